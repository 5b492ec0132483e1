"""Component factory functions for the CLI.

Centralizes creation of the store and the session controller from
environment variables. Hides configuration details from the command.
"""

import logging
import os
from functools import partial

from rich.console import Console
from rich.logging import RichHandler

from ..errors import InvalidConfigError
from ..llm import create_chat_client
from ..llm.providers.http import DEFAULT_TIMEOUT
from ..memory import JsonStore, StoragePaths
from ..session import SessionController

TIMEOUT_ENV = "CHATGPT_TIMEOUT"

# Default console for output
_console = Console()


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr through rich.

    Args:
        verbose: Log at DEBUG instead of WARNING
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
    # httpx logs every request at INFO; keep it quiet unless debugging
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)


def get_timeout() -> float:
    """Read the request timeout.

    Environment variables:
        CHATGPT_TIMEOUT: Seconds to wait for the endpoint (default: 60)

    Raises:
        InvalidConfigError: If the value is not a positive number
    """
    raw = os.getenv(TIMEOUT_ENV)
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError as e:
        raise InvalidConfigError(f"{TIMEOUT_ENV} must be a number, got {raw!r}") from e
    if timeout <= 0:
        raise InvalidConfigError(f"{TIMEOUT_ENV} must be positive, got {raw!r}")
    return timeout


def get_store() -> JsonStore:
    """Create the JSON store.

    Environment variables:
        CHATGPT_HOME: Storage directory (default: ~/.chatgpt)

    Raises:
        ConfigResolutionError: If the home directory cannot be determined
    """
    return JsonStore(StoragePaths.from_env())


def get_controller(console: Console | None = None) -> SessionController:
    """Create a session controller wired to the store and HTTP client.

    Args:
        console: Console the assistant's reply is printed to
    """
    con = console or _console
    client_factory = partial(create_chat_client, timeout=get_timeout(), console=con)
    return SessionController(get_store(), client_factory=client_factory)
