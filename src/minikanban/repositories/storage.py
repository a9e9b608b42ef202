"""Key-value storage backends."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from ..errors import StorageError

logger = logging.getLogger(__name__)


class FileStorage:
    """
    Storage backed by a directory on the filesystem.

    Each key is stored as <key>.json inside the data directory. Writes go
    through a temporary file and a rename, so a crash never leaves a
    half-written snapshot behind.
    """

    SUFFIX = ".json"

    def __init__(self, data_dir: Path) -> None:
        """
        Initialize storage.

        Args:
            data_dir: Directory holding the stored files (created on first write)
        """
        self.data_dir = data_dir

    def ensure_directory(self) -> None:
        """Create the data directory if it doesn't exist."""
        self.data_dir.mkdir(parents=True, exist_ok=True)

    def path_for(self, key: str) -> Path:
        """Get the file path a key is stored at."""
        return self.data_dir / f"{key}{self.SUFFIX}"

    def get(self, key: str) -> str | None:
        """Read a stored value. Missing or unreadable files return None."""
        path = self.path_for(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Cannot read %s: %s", path, e)
            return None

    def set(self, key: str, value: str) -> None:
        """Write a value atomically."""
        path = self.path_for(key)
        try:
            self.ensure_directory()
            fd, tmp_name = tempfile.mkstemp(dir=self.data_dir, prefix=f".{key}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(value)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise StorageError(f"Cannot write {path}: {e}") from e
        logger.debug("Stored %d bytes under %s", len(value), key)


class MemoryStorage:
    """Storage kept in a dict for the lifetime of the process."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value
