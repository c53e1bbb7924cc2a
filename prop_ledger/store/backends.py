"""Key-value backends holding serialized collections."""

import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path

from prop_ledger.exceptions import StorageCorruptError, StorageUnavailableError

logger = logging.getLogger(__name__)


class KeyValueBackend(ABC):
    """Synchronous string store addressed by fixed keys."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the payload under ``key``, or None if the key was never set."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous payload."""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Drop ``key``; missing keys are ignored."""

    def contains(self, key: str) -> bool:
        return self.get(key) is not None


class InMemoryBackend(KeyValueBackend):
    """Process-local backend, lost on exit."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._data)


class JsonDirectoryBackend(KeyValueBackend):
    """One ``<key>.json`` file per key inside a directory."""

    def __init__(self, data_dir: str | Path) -> None:
        """Initialize the directory backend.

        Parameters
        ----------
        data_dir : str | Path
            Directory holding the collection files. Created if missing.
        """
        self.data_dir = Path(data_dir)
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageUnavailableError(f"Cannot create data directory {self.data_dir}: {exc}") from exc

    def _path(self, key: str) -> Path:
        return self.data_dir / f"{key}.json"

    def get(self, key: str) -> str | None:
        path = self._path(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except UnicodeDecodeError as exc:
            raise StorageCorruptError(f"{path} is not valid UTF-8", key=key) from exc
        except OSError as exc:
            raise StorageUnavailableError(f"Cannot read {path}: {exc}") from exc

    def set(self, key: str, value: str) -> None:
        path = self._path(key)
        tmp_path = path.with_suffix(".json.tmp")
        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp_path, path)
        except OSError as exc:
            tmp_path.unlink(missing_ok=True)
            raise StorageUnavailableError(f"Cannot write {path}: {exc}") from exc
        logger.debug("Wrote %d bytes to %s", len(value), path)

    def delete(self, key: str) -> None:
        try:
            self._path(key).unlink(missing_ok=True)
        except OSError as exc:
            raise StorageUnavailableError(f"Cannot delete {self._path(key)}: {exc}") from exc
