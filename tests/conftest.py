"""Pytest configuration and shared fixtures."""
import io
import os

import pytest
from rich.console import Console

from gptchat.llm import ChatClient, ChatMessage
from gptchat.memory import JsonStore, StoragePaths


class FakeChatClient(ChatClient):
    """Chat client that records calls instead of talking to an endpoint."""

    def __init__(self, reply: ChatMessage | None = None, error: Exception | None = None):
        self.reply = reply or ChatMessage.assistant("ok")
        self.error = error
        self.calls: list[list[ChatMessage]] = []
        self.closed = False

    async def complete(self, messages: list[ChatMessage]) -> ChatMessage:
        self.calls.append(list(messages))
        if self.error is not None:
            raise self.error
        return self.reply

    async def close(self) -> None:
        self.closed = True


@pytest.fixture(scope="session")
def api_keys():
    """Return API keys from environment."""
    return {
        "openai": os.getenv("OPENAI_API_KEY"),
    }


@pytest.fixture
def storage_paths(tmp_path):
    """Storage paths rooted in a temporary home directory."""
    return StoragePaths.from_home(tmp_path)


@pytest.fixture
def store(storage_paths):
    """An initialized store in a temporary directory."""
    json_store = JsonStore(storage_paths)
    json_store.ensure_initialized()
    return json_store


@pytest.fixture
def fake_client():
    """A fake chat client replying with an assistant 'ok'."""
    return FakeChatClient()


@pytest.fixture
def captured_console():
    """A console writing into a string buffer."""
    return Console(file=io.StringIO(), width=200)
