"""
gptchat: a command-line client for chat-completion endpoints.

Keeps the conversation history on local disk and sends it, together with
each new prompt, to the configured endpoint.
"""

__version__ = "0.1.0"

from .errors import ChatError
from .llm import ChatMessage, Role, create_chat_client
from .memory import Config, History, JsonStore, StoragePaths
from .session import SessionController, plan_operations

__all__ = [
    "ChatError",
    "ChatMessage",
    "Config",
    "History",
    "JsonStore",
    "Role",
    "SessionController",
    "StoragePaths",
    "create_chat_client",
    "plan_operations",
]
