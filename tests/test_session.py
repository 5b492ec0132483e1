"""Unit tests for the session module."""
import json
import logging

import pytest
from hypothesis import given
from hypothesis import strategies as st

from conftest import FakeChatClient
from gptchat.errors import DecodeError, NetworkError, RemoteError
from gptchat.llm import ChatMessage
from gptchat.memory import Config, History, JsonStore
from gptchat.session import (
    Chat,
    Clean,
    Noop,
    SessionController,
    SetHint,
    plan_operations,
)


def controller_for(store: JsonStore, client: FakeChatClient) -> tuple[SessionController, list[Config]]:
    """Build a controller whose factory hands out ``client`` and records configs."""
    configs: list[Config] = []

    def factory(config: Config) -> FakeChatClient:
        configs.append(config)
        return client

    return SessionController(store, client_factory=factory), configs


class TestPlanOperations:
    """Tests for translating command-line input into operations."""

    def test_nothing_requested(self):
        """Test that no input plans a no-op."""
        assert plan_operations() == [Noop()]

    def test_empty_prompt_is_noop(self):
        """Test that an empty prompt does not trigger a chat turn."""
        assert plan_operations(prompt="") == [Noop()]

    def test_prompt_only(self):
        """Test a plain chat turn."""
        assert plan_operations(prompt="hi") == [Chat("hi")]

    def test_hint_then_chat(self):
        """Test that the hint update runs before the chat turn."""
        assert plan_operations(hint="be concise", prompt="hi") == [SetHint("be concise"), Chat("hi")]

    def test_empty_hint_is_still_applied(self):
        """Test that an explicit empty hint clears the stored one."""
        assert plan_operations(hint="") == [SetHint("")]

    @given(st.one_of(st.none(), st.text()), st.one_of(st.none(), st.text()))
    def test_clean_short_circuits(self, hint, prompt):
        """Property test: Clean suppresses every other operation."""
        assert plan_operations(clean=True, hint=hint, prompt=prompt) == [Clean()]


class TestSessionController:
    """Tests for SessionController."""

    def test_clean_resets_history_only(self, store, fake_client):
        """Test that clean empties the history and leaves config untouched."""
        store.save_history(History(history=[ChatMessage.user("hi")]).with_hint("x"))
        store.save(store.paths.config_file, Config(model="custom", key="k"))
        config_bytes = store.paths.config_file.read_bytes()
        controller, _ = controller_for(store, fake_client)

        controller.clean()

        assert store.load_history() == History()
        assert store.paths.config_file.read_bytes() == config_bytes

    def test_set_hint(self, store, storage_paths, fake_client):
        """Test that the hint is replaced and the messages are untouched."""
        storage_paths.history_file.write_text(json.dumps({"hint": {}, "history": []}))
        controller, _ = controller_for(store, fake_client)

        controller.set_hint("be concise")

        history = store.load_history()
        assert history.hint == ChatMessage(role="system", content="be concise")
        assert history.history == []

    @pytest.mark.asyncio
    async def test_chat_appends_turn_in_order(self, store, fake_client):
        """Test that a turn appends the prompt and then the reply."""
        store.save_history(History(history=[ChatMessage.user("hi")]))
        controller, _ = controller_for(store, fake_client)

        reply = await controller.chat("next")

        assert reply == ChatMessage.assistant("ok")
        assert store.load_history().history == [
            ChatMessage.user("hi"),
            ChatMessage.user("next"),
            ChatMessage.assistant("ok"),
        ]
        assert fake_client.calls == [[ChatMessage.user("hi"), ChatMessage.user("next")]]
        assert fake_client.closed

    @pytest.mark.asyncio
    async def test_chat_uses_persisted_config(self, store, fake_client):
        """Test that the client is built from the stored configuration."""
        config = Config(url="http://localhost:8080/v1/chat/completions", model="local", key="k")
        store.save(store.paths.config_file, config)
        controller, configs = controller_for(store, fake_client)

        await controller.chat("hi")

        assert configs == [config]

    @pytest.mark.asyncio
    async def test_chat_does_not_send_hint(self, store, fake_client):
        """Test that a stored hint is neither sent nor appended."""
        store.save_history(History().with_hint("be concise"))
        controller, _ = controller_for(store, fake_client)

        await controller.chat("hi")

        assert fake_client.calls == [[ChatMessage.user("hi")]]
        history = store.load_history()
        assert history.hint == ChatMessage.system("be concise")
        assert history.history == [ChatMessage.user("hi"), ChatMessage.assistant("ok")]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [NetworkError("down"), RemoteError("denied", status_code=401), DecodeError("garbled")],
    )
    async def test_failed_chat_persists_nothing(self, store, error):
        """Test that a failed call leaves the history exactly as it was."""
        store.save_history(History(history=[ChatMessage.user("hi")]))
        before = store.paths.history_file.read_bytes()
        client = FakeChatClient(error=error)
        controller, _ = controller_for(store, client)

        with pytest.raises(type(error)):
            await controller.chat("next")

        assert store.paths.history_file.read_bytes() == before
        assert client.closed

    @pytest.mark.asyncio
    async def test_run_initializes_storage(self, storage_paths, fake_client):
        """Test that a no-op run still creates the default documents."""
        store = JsonStore(storage_paths)
        controller, configs = controller_for(store, fake_client)

        reply = await controller.run([Noop()])

        assert reply is None
        assert store.load_history() == History()
        assert store.load_config() == Config()
        assert configs == []

    @pytest.mark.asyncio
    async def test_run_hint_then_chat(self, store, fake_client):
        """Test that a hint and a chat turn in one run both persist."""
        controller, _ = controller_for(store, fake_client)

        reply = await controller.run(plan_operations(hint="be concise", prompt="hi"))

        assert reply == ChatMessage.assistant("ok")
        assert fake_client.calls == [[ChatMessage.user("hi")]]
        history = store.load_history()
        assert history.hint == ChatMessage.system("be concise")
        assert history.history == [ChatMessage.user("hi"), ChatMessage.assistant("ok")]

    @pytest.mark.asyncio
    async def test_chat_logs_saved_length(self, store, fake_client, caplog):
        """Test that the logged message count matches the saved history."""
        store.save_history(History(history=[ChatMessage.user("hi"), ChatMessage.assistant("hello")]))
        controller, _ = controller_for(store, fake_client)

        with caplog.at_level(logging.DEBUG, logger="gptchat.session.controller"):
            await controller.chat("next")

        assert len(store.load_history().history) == 4
        assert "History now holds 4 messages" in caplog.text

    @pytest.mark.asyncio
    async def test_run_clean_skips_chat(self, store, fake_client):
        """Test that clean never reaches the client even with a prompt."""
        store.save_history(History(history=[ChatMessage.user("hi")]))
        controller, configs = controller_for(store, fake_client)

        reply = await controller.run(plan_operations(clean=True, prompt="hi"))

        assert reply is None
        assert configs == []
        assert store.load_history() == History()

    @pytest.mark.asyncio
    async def test_execute_rejects_unknown_operation(self, store, fake_client):
        """Test that only known operations are accepted."""
        controller, _ = controller_for(store, fake_client)

        with pytest.raises(TypeError):
            await controller.execute("chat")  # type: ignore[arg-type]
