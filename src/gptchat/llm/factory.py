from typing import TYPE_CHECKING, Any

from .base import ChatClient
from .providers import HttpChatClient

if TYPE_CHECKING:
    from ..memory.models import Config


def create_chat_client(config: "Config", **kwargs: Any) -> ChatClient:
    """Create a chat client for the configured endpoint.

    This factory hides which client implementation talks to the endpoint.

    Args:
        config: Endpoint URL, model and key
        **kwargs: Client options
            - timeout: float (default: 60.0)
            - console: rich Console the reply is echoed to
            - any further httpx.AsyncClient kwargs (e.g. transport)

    Returns:
        Initialized chat client

    Raises:
        InvalidConfigError: If the URL or key cannot be used

    Examples:
        >>> client = create_chat_client(Config(key="sk-..."), timeout=30.0)
    """
    return HttpChatClient(config, **kwargs)
