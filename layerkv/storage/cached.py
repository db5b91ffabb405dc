"""Cache-only backend: an LRUCache behind the Store interface."""

from ..cache.eviction import LRUCache
from ..errors import NotFoundError
from .base import Store, as_bytes


class CacheStore(Store):
    """
    Bounded in-memory store. Entries beyond capacity are silently evicted,
    so a get may raise NotFoundError for a key that was set earlier.
    """

    def __init__(self, capacity: int):
        self.cache = LRUCache(capacity)

    def get(self, key: str) -> bytes:
        value, found = self.cache.get(key)
        if not found:
            raise NotFoundError(key)
        return value

    def set(self, key: str, value: bytes) -> None:
        self.cache.put(key, as_bytes(value))

    def delete(self, key: str) -> None:
        self.cache.delete(key)
