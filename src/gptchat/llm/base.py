from abc import ABC, abstractmethod
from typing import Any

from .models import ChatMessage


class ChatClient(ABC):
    """Abstract base class for chat-completion clients.

    This module hides the design decision of how a conversation reaches the
    remote model. Implementations must handle:
    - Request construction and authentication
    - Transport and its failures
    - Response decoding and remote error detection

    Exactly one request is made per ``complete`` call; there is no retry.

    Supports async context manager protocol for proper resource cleanup:
        async with client:
            reply = await client.complete(messages)
        # Automatically cleaned up
    """

    @abstractmethod
    async def complete(self, messages: list[ChatMessage]) -> ChatMessage:
        """Send the conversation and return the model's reply.

        Args:
            messages: Conversation history, oldest first

        Returns:
            The first reply returned by the endpoint

        Raises:
            NetworkError: The request could not be sent or answered
            RemoteError: The endpoint reported a failure
            DecodeError: The response does not have the expected shape
        """

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections or resources."""

    async def __aenter__(self) -> "ChatClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit with automatic cleanup."""
        await self.close()
