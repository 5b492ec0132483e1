"""Resolution of the on-disk storage location."""

import os
from dataclasses import dataclass
from pathlib import Path

from ..errors import ConfigResolutionError

STORAGE_DIR_NAME = ".chatgpt"
CONFIG_FILE_NAME = "config.json"
HISTORY_FILE_NAME = "history.json"

# Overrides the storage directory when set
STORAGE_DIR_ENV = "CHATGPT_HOME"


@dataclass(frozen=True)
class StoragePaths:
    """Locations of the configuration and history documents."""

    root: Path

    @property
    def config_file(self) -> Path:
        return self.root / CONFIG_FILE_NAME

    @property
    def history_file(self) -> Path:
        return self.root / HISTORY_FILE_NAME

    @classmethod
    def from_home(cls, home: str | Path | None = None) -> "StoragePaths":
        """Build paths under ``<home>/.chatgpt``.

        Args:
            home: Home directory to use (None resolves the current user's)

        Raises:
            ConfigResolutionError: If the home directory cannot be determined
        """
        if home is None:
            try:
                home = Path.home()
            except (RuntimeError, KeyError) as e:
                raise ConfigResolutionError(f"Cannot determine home directory: {e}") from e
        return cls(root=Path(home) / STORAGE_DIR_NAME)

    @classmethod
    def from_env(cls) -> "StoragePaths":
        """Build paths from ``CHATGPT_HOME``, falling back to the home directory."""
        override = os.getenv(STORAGE_DIR_ENV)
        if override:
            return cls(root=Path(override).expanduser())
        return cls.from_home()
