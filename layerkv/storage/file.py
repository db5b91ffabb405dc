"""
File-per-key Storage Backend

Each key maps to one file under a root directory: path = root / key.
Keys with slashes create nested directories on write. Keys are normalized
first (see FileStore.normalize_key), and keys that would escape the root
are refused.

Writes fully overwrite the file but are not atomic against concurrent
readers. Wrap the store in a GuardedStore when sharing it between threads.
"""

import logging
import posixpath
from pathlib import Path
from typing import Union

from ..errors import InvalidKeyError, NotFoundError, StorageIOError
from .base import Store, as_bytes

logger = logging.getLogger(__name__)

# A missing parent, or a parent that is a regular file, both mean "no such key"
_MISSING = (FileNotFoundError, NotADirectoryError)


class FileStore(Store):
    """
    Durable store keeping one file per key.

    Attributes:
        root: Directory holding all key files
    """

    def __init__(self, root: Union[str, Path]):
        """
        Initialize the store, creating the root directory if absent.

        Args:
            root: Root directory path

        Raises:
            StorageIOError: If the root directory cannot be created
        """
        self.root = Path(root)
        try:
            self.root.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageIOError(f"cannot create root directory {self.root}: {exc}") from exc
        logger.debug(f"File store rooted at {self.root}")

    def normalize_key(self, key: str) -> str:
        """
        Return the canonical spelling of key.

        Every spelling that resolves to the same file ("a/b", "/a/b",
        "a/./b", "a//b", "a/b/", "a/x/../b") normalizes to the same string.

        Raises:
            InvalidKeyError: If key contains a NUL byte, names the root
                itself or resolves outside the root
        """
        if "\x00" in key:
            raise InvalidKeyError(f"key contains a NUL byte: {key!r}", key=key)
        normalized = posixpath.normpath(key.lstrip("/"))
        if normalized == "." or normalized == ".." or normalized.startswith("../"):
            raise InvalidKeyError(f"key does not name a file under the root: {key!r}", key=key)
        return normalized

    def path_for(self, key: str) -> Path:
        """Return the file path for key (see normalize_key)."""
        return self.root / self.normalize_key(key)

    def get(self, key: str) -> bytes:
        try:
            return self.path_for(key).read_bytes()
        except _MISSING:
            raise NotFoundError(key) from None
        except OSError as exc:
            raise StorageIOError(f"cannot read {key}: {exc}", key=key) from exc

    def set(self, key: str, value: bytes) -> None:
        path = self.path_for(key)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(as_bytes(value))
        except OSError as exc:
            raise StorageIOError(f"cannot write {key}: {exc}", key=key) from exc

    def delete(self, key: str) -> None:
        try:
            self.path_for(key).unlink()
        except _MISSING:
            raise NotFoundError(key) from None
        except OSError as exc:
            raise StorageIOError(f"cannot delete {key}: {exc}", key=key) from exc
