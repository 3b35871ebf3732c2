"""Key-value storage abstraction for persisted documents.

Each key maps to one whole document (a string). Writers always replace the
entire value; readers always get the entire value. On disk every key is a
separate JSON file, written with owner-only permissions (0o600) inside an
owner-only directory (0o700).
"""

import contextlib
import os
import re
import tempfile
from pathlib import Path
from typing import Protocol

import structlog

logger = structlog.get_logger()

# Owner-only directory permissions for the storage root.
_STORAGE_DIR_MODE = 0o700

# Owner-only file permissions for stored documents.
_STORAGE_FILE_MODE = 0o600

_KEY_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+$")


class KeyValueStorage(Protocol):
    """Protocol for whole-value document storage addressed by a string key."""

    def read(self, key: str) -> str | None: ...

    def write(self, key: str, content: str) -> None: ...


def validate_key(key: str) -> str:
    """Return key unchanged if it is a safe storage key, raise ValueError otherwise."""
    if not _KEY_PATTERN.match(key) or key in {".", ".."}:
        raise ValueError(f"Invalid storage key {key!r}: use letters, digits, '_', '.' or '-'")
    return key


class InMemoryKeyValueStorage:
    """Dict-backed storage for tests and embedding without a filesystem."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def read(self, key: str) -> str | None:
        return self._values.get(key)

    def write(self, key: str, content: str) -> None:
        self._values[key] = content


class LocalKeyValueStorage:
    """Stores each key as ``<key>.json`` under a root directory.

    Writes are atomic (temp file, fsync, rename) so a reader never sees a
    partially written document.
    """

    def __init__(self, root_dir: str | Path) -> None:
        self._root_dir = Path(root_dir).resolve()

    def _path_for(self, key: str) -> Path:
        target = (self._root_dir / f"{key}.json").resolve()
        if not target.is_relative_to(self._root_dir):
            raise ValueError(f"Path traversal rejected: '{key}' resolves outside storage directory")
        return target

    def read(self, key: str) -> str | None:
        """Return the stored document, or None if the key was never written."""
        target = self._path_for(key)
        try:
            return target.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None

    def write(self, key: str, content: str) -> None:
        """Replace the document stored under key.

        Creates the root directory lazily on first write with owner-only
        permissions. Rejects keys that would place the file outside the root.
        """
        target = self._path_for(key)

        self._root_dir.mkdir(mode=_STORAGE_DIR_MODE, parents=True, exist_ok=True)
        self._root_dir.chmod(_STORAGE_DIR_MODE)

        fd, tmp_path = tempfile.mkstemp(dir=str(self._root_dir), suffix=".tmp", prefix=".kv_")
        fd_owned = True
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                fd_owned = False  # os.fdopen took ownership; it will close fd
                f.write(content)
                f.flush()
                os.fsync(f.fileno())
            os.chmod(tmp_path, _STORAGE_FILE_MODE)  # noqa: PTH101
            Path(tmp_path).replace(target)
        except BaseException:
            if fd_owned:
                with contextlib.suppress(OSError):
                    os.close(fd)
            with contextlib.suppress(OSError):
                Path(tmp_path).unlink()
            raise
        logger.debug("stored document", key=key, path=str(target), size=len(content))
