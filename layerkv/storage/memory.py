"""In-memory backend. Fast, but unbounded: nothing is ever evicted."""

from typing import Dict

from ..errors import NotFoundError
from .base import Store, as_bytes


class MemoryStore(Store):
    """Dict-backed store. Deleting an absent key is a no-op."""

    def __init__(self):
        self._data: Dict[str, bytes] = {}

    def get(self, key: str) -> bytes:
        try:
            return self._data[key]
        except KeyError:
            raise NotFoundError(key) from None

    def set(self, key: str, value: bytes) -> None:
        self._data[key] = as_bytes(value)

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def size(self) -> int:
        """Get the number of stored keys."""
        return len(self._data)
