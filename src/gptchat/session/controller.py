"""Session controller: store → client → store for one invocation."""

import logging
from collections.abc import Callable

from ..llm import ChatClient, ChatMessage, create_chat_client
from ..memory import Config, JsonStore
from .operations import Chat, Clean, Noop, Operation, SetHint

logger = logging.getLogger(__name__)

ClientFactory = Callable[[Config], ChatClient]


class SessionController:
    """Runs the clean, hint and chat operations against the store.

    Any error from the store or the client propagates immediately. The
    history is only written after a chat turn has fully succeeded, so a
    failed call leaves no trace of the pending prompt.
    """

    def __init__(
        self,
        store: JsonStore,
        client_factory: ClientFactory = create_chat_client,
    ):
        self._store = store
        self._client_factory = client_factory

    def initialize(self) -> None:
        """Make sure the storage directory and documents exist."""
        self._store.ensure_initialized()

    def clean(self) -> None:
        """Reset the history to its empty default. Config is untouched."""
        self._store.reset_history()
        logger.info("History cleared")

    def set_hint(self, text: str) -> None:
        """Overwrite the stored hint with a system message."""
        history = self._store.load_history()
        self._store.save_history(history.with_hint(text))
        logger.info("Hint updated")

    async def chat(self, prompt: str) -> ChatMessage:
        """Run one chat turn and persist it.

        Args:
            prompt: User message to send

        Returns:
            The assistant's reply
        """
        # Reload so changes made earlier in this run are seen
        history = self._store.load_history()
        config = self._store.load_config()

        user_message = ChatMessage.user(prompt)
        messages = history.outbound_messages(user_message)

        async with self._client_factory(config) as client:
            reply = await client.complete(messages)

        updated = history.with_turn(user_message, reply)
        self._store.save_history(updated)
        logger.debug("History now holds %d messages", len(updated.history))
        return reply

    async def execute(self, operation: Operation) -> ChatMessage | None:
        """Execute a single operation, returning the reply for a chat turn."""
        if isinstance(operation, Clean):
            self.clean()
        elif isinstance(operation, SetHint):
            self.set_hint(operation.text)
        elif isinstance(operation, Chat):
            return await self.chat(operation.prompt)
        elif isinstance(operation, Noop):
            logger.debug("Nothing to do")
        else:
            raise TypeError(f"Unknown operation: {operation!r}")
        return None

    async def run(self, operations: list[Operation]) -> ChatMessage | None:
        """Initialize storage, then execute ``operations`` in order.

        Returns:
            The reply of the chat turn, or None if no turn ran
        """
        self.initialize()

        reply = None
        for operation in operations:
            result = await self.execute(operation)
            if result is not None:
                reply = result
            if isinstance(operation, Clean):
                break
        return reply
