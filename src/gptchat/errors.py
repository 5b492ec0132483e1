"""Error taxonomy for gptchat.

Every failure surfaced to the command line derives from ChatError, so the
CLI can turn any of them into a diagnostic and a non-zero exit code.
Library exceptions are translated at module boundaries.
"""


class ChatError(Exception):
    """Base class for all gptchat errors."""


class ConfigResolutionError(ChatError):
    """The user's home directory could not be determined."""


class InvalidConfigError(ChatError):
    """The configured endpoint or key cannot be used to build a request."""


class StorageError(ChatError):
    """A storage directory or document could not be created, read or written."""


class NotFoundError(StorageError):
    """A persisted document does not exist."""


class DecodeError(ChatError):
    """Persisted JSON or an API response does not match the expected shape."""


class NetworkError(ChatError):
    """The request could not be sent or no response was received."""


class RemoteError(ChatError):
    """The remote API responded with a failure indication."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
