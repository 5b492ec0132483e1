"""JSON file store for configuration and conversation history.

Each document lives in its own file under the storage directory, so
clearing the history never touches the configuration. Writes overwrite
the whole file; there is no locking and the last writer wins.
"""

import logging
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from ..errors import DecodeError, NotFoundError, StorageError
from .models import Config, History
from .paths import StoragePaths

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _to_json(value: BaseModel) -> str:
    return value.model_dump_json(indent=2)


class JsonStore:
    """File-backed store for the ``Config`` and ``History`` documents."""

    def __init__(self, paths: StoragePaths):
        self._paths = paths

    @property
    def paths(self) -> StoragePaths:
        return self._paths

    def ensure_initialized(self) -> None:
        """Create the storage directory and any missing document.

        Existing documents are left exactly as they are, so this is safe
        to call on every invocation.

        Raises:
            StorageError: If the directory or a document cannot be created
        """
        try:
            self._paths.root.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(f"Cannot create storage directory {self._paths.root}: {e}") from e

        self._init_document(self._paths.config_file, Config())
        self._init_document(self._paths.history_file, History())

    def _init_document(self, path: Path, default: BaseModel) -> None:
        try:
            with path.open("x", encoding="utf-8") as f:
                f.write(_to_json(default))
        except FileExistsError:
            return
        except OSError as e:
            raise StorageError(f"Cannot create {path}: {e}") from e
        logger.debug("Created %s with defaults", path)

    def load(self, path: Path, model: type[ModelT]) -> ModelT:
        """Read and validate a JSON document.

        Args:
            path: Document location
            model: Model class the document must match

        Returns:
            The decoded document

        Raises:
            NotFoundError: If the document does not exist
            DecodeError: If the content is not valid JSON of the expected shape
            StorageError: If the document cannot be read
        """
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise NotFoundError(f"{path} does not exist") from e
        except UnicodeDecodeError as e:
            raise DecodeError(f"{path} is not valid UTF-8: {e}") from e
        except OSError as e:
            raise StorageError(f"Cannot read {path}: {e}") from e

        try:
            return model.model_validate_json(text)
        except ValidationError as e:
            raise DecodeError(f"{path} is not a valid {model.__name__} document: {e}") from e

    def save(self, path: Path, value: BaseModel) -> None:
        """Overwrite a document with ``value`` as pretty-printed JSON.

        Raises:
            StorageError: If the document cannot be written
        """
        try:
            path.write_text(_to_json(value), encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Cannot write {path}: {e}") from e
        logger.debug("Saved %s", path)

    def reset(self, path: Path, default: BaseModel) -> None:
        """Remove a document and recreate it with ``default``."""
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            raise StorageError(f"Cannot remove {path}: {e}") from e
        self._init_document(path, default)

    def load_config(self) -> Config:
        return self.load(self._paths.config_file, Config)

    def load_history(self) -> History:
        return self.load(self._paths.history_file, History)

    def save_history(self, history: History) -> None:
        self.save(self._paths.history_file, history)

    def reset_history(self) -> None:
        self.reset(self._paths.history_file, History())
