from .base import ChatClient
from .factory import create_chat_client
from .models import ChatMessage, ChatRequest, ChatResponse, Choice, Role, Usage
from .providers import HttpChatClient, build_headers, build_request

__all__ = [
    "ChatClient",
    "create_chat_client",
    "ChatMessage",
    "ChatRequest",
    "ChatResponse",
    "Choice",
    "Role",
    "Usage",
    "HttpChatClient",
    "build_headers",
    "build_request",
]
