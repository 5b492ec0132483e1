import logging
from typing import TYPE_CHECKING, Any

import httpx
from pydantic import ValidationError
from rich.console import Console

from ...errors import DecodeError, InvalidConfigError, NetworkError, RemoteError
from ..base import ChatClient
from ..models import ChatMessage, ChatRequest, ChatResponse

if TYPE_CHECKING:
    from ...memory.models import Config

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 60.0


def build_request(config: "Config", messages: list[ChatMessage]) -> ChatRequest:
    """Build the request body for a conversation."""
    return ChatRequest(model=config.model, messages=list(messages))


def build_headers(key: str) -> dict[str, str]:
    """Build the request headers for a bearer key.

    Raises:
        InvalidConfigError: If the key cannot be sent in an HTTP header
    """
    for ch in key:
        if not (" " <= ch <= "~"):
            raise InvalidConfigError(
                "API key contains characters that are not allowed in an HTTP header"
            )
    return {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {key}",
    }


def validate_url(url: str) -> httpx.URL:
    """Check that ``url`` is an absolute http(s) URL.

    Raises:
        InvalidConfigError: If the URL is empty, malformed or not http(s)
    """
    if not url:
        raise InvalidConfigError("No endpoint URL configured")
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as e:
        raise InvalidConfigError(f"Invalid endpoint URL {url!r}: {e}") from e
    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise InvalidConfigError(f"Endpoint URL must be an absolute http(s) URL: {url!r}")
    return parsed


def _error_message(body: Any) -> str | None:
    """Extract the message from an OpenAI-style ``{"error": {...}}`` body."""
    if not isinstance(body, dict) or "error" not in body:
        return None
    error = body["error"]
    if error is None:
        return None
    if isinstance(error, dict):
        return str(error.get("message") or error.get("type") or error)
    return str(error)


class HttpChatClient(ChatClient):
    """Chat client that POSTs the conversation to a chat-completion endpoint.

    Hidden design decisions:
    - HTTP client setup (httpx)
    - Header construction and bearer authentication
    - Mapping of transport, status and body failures onto the error taxonomy
    """

    def __init__(
        self,
        config: "Config",
        timeout: float = DEFAULT_TIMEOUT,
        console: Console | None = None,
        **client_kwargs: Any
    ):
        """Initialize the client.

        Args:
            config: Endpoint URL, model and key
            timeout: Seconds to wait for the whole exchange
            console: Console the reply is echoed to (None uses stdout)
            **client_kwargs: Additional kwargs for httpx.AsyncClient

        Raises:
            InvalidConfigError: If the URL or key cannot be used
        """
        self._config = config
        self._url = validate_url(config.url)
        self._headers = build_headers(config.key)
        self._console = console or Console()
        self._client = httpx.AsyncClient(timeout=timeout, **client_kwargs)

    @property
    def model(self) -> str:
        """Get the configured model name."""
        return self._config.model

    async def complete(self, messages: list[ChatMessage]) -> ChatMessage:
        """Send the conversation and return the first reply.

        The reply content is also printed to the console.
        """
        request = build_request(self._config, messages)
        logger.debug("POST %s (model=%s, %d messages)", self._url, request.model, len(request.messages))

        try:
            response = await self._client.post(
                self._url,
                headers=self._headers,
                json=request.model_dump(mode="json"),
            )
        except httpx.TimeoutException as e:
            raise NetworkError(f"Request to {self._url} timed out") from e
        except httpx.TransportError as e:
            raise NetworkError(f"Request to {self._url} failed: {e}") from e

        logger.debug("Response status %d", response.status_code)

        try:
            body = response.json()
        except ValueError:
            body = None

        if response.is_error:
            detail = _error_message(body) or response.reason_phrase or "request failed"
            raise RemoteError(
                f"Endpoint returned HTTP {response.status_code}: {detail}",
                status_code=response.status_code,
            )

        if body is None:
            raise DecodeError("Endpoint response is not valid JSON")

        detail = _error_message(body)
        if detail is not None:
            raise RemoteError(f"Endpoint reported an error: {detail}", status_code=response.status_code)

        try:
            completion = ChatResponse.model_validate(body)
        except ValidationError as e:
            raise DecodeError(f"Unexpected response shape: {e}") from e

        if not completion.choices:
            raise DecodeError("Endpoint response contains no choices")

        reply = completion.choices[0].message
        if completion.usage:
            logger.debug("Token usage: %s", completion.usage.model_dump())

        self._console.print(reply.content, markup=False, highlight=False, emoji=False, soft_wrap=True)
        return reply

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()
