"""
Layered Store Module

An LRU cache (fast tier) in front of a FileStore (source of truth).

Read path (read-through):
- Cache hit: return without touching the file store
- Cache miss: read the file store, populate the cache, return the value

Write path (write-through, cache first):
- set: cache, then file store
- delete: cache, then file store

Writing the cache first keeps it in step with the caller's own sequence of
calls. The cost: if the file store write fails, the cache holds a value that
was never persisted. That value is served until a later successful set or
a process restart (the cache itself is not persisted).
"""

import logging
from pathlib import Path
from typing import Any, Dict, Union

from ..cache.eviction import LRUCache
from ..errors import KVError
from .base import Store, as_bytes
from .file import FileStore

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 1024


class LayeredStore(Store):
    """
    Read-through / write-through cache over a file-per-key store.

    The store creates and exclusively owns its cache and file store; both
    live exactly as long as the LayeredStore does.

    Keys are normalized (FileStore.normalize_key) before either tier is
    touched, so every spelling of a key shares one cache entry and one file.
    A key that cannot name a file raises InvalidKeyError with both tiers
    untouched.

    Usage:
        store = LayeredStore("/var/lib/kv", capacity=512)
        store.set("users/42", b"...")
        store.get("users/42")  # served from the cache

    Attributes:
        cache: The LRUCache fast tier
        backend: The FileStore durable tier
    """

    def __init__(self, root: Union[str, Path], capacity: int = DEFAULT_CAPACITY):
        """
        Initialize the store.

        Args:
            root: Root directory of the file store (created if absent)
            capacity: Maximum number of cached entries

        Raises:
            ConfigurationError: If capacity is invalid
            StorageIOError: If the root directory cannot be created
        """
        self._cache = LRUCache(capacity)
        self._backend = FileStore(root)

    @property
    def cache(self) -> LRUCache:
        return self._cache

    @property
    def backend(self) -> FileStore:
        return self._backend

    def get(self, key: str) -> bytes:
        """
        Get a value, falling through to the file store on a cache miss.

        Raises:
            NotFoundError: If the key is in neither tier
            StorageIOError: If the file store read fails
        """
        key = self._backend.normalize_key(key)
        value, found = self._cache.get(key)
        if found:
            logger.debug(f"Cache hit: {key}")
            return value

        logger.debug(f"Cache miss: {key}")
        value = self._backend.get(key)

        # Population is best effort; the value is already in hand
        try:
            self._cache.put(key, value)
        except KVError as exc:
            logger.warning(f"Could not cache {key}: {exc}")
        return value

    def set(self, key: str, value: bytes) -> None:
        """
        Store a value in the cache, then in the file store.

        Raises:
            InvalidKeyError: If the key cannot name a file
            TypeError: If value is not bytes-like
            StorageIOError: If the file store write fails. The cache already
                holds the new value at that point.
        """
        key = self._backend.normalize_key(key)
        value = as_bytes(value)
        self._cache.put(key, value)
        self._backend.set(key, value)

    def delete(self, key: str) -> None:
        """
        Remove a key from the cache, then from the file store.

        Raises:
            NotFoundError: If the file store has no such key, even when the
                cache removal succeeded
            StorageIOError: If the file store delete fails
        """
        key = self._backend.normalize_key(key)
        self._cache.delete(key)
        self._backend.delete(key)

    def get_stats(self) -> Dict[str, Any]:
        """
        Get statistics about the store.

        Returns:
            Dictionary containing:
            - hits: Reads answered by the cache
            - misses: Reads that went to the file store
            - hit_ratio: hits / (hits + misses)
            - root: File store root directory
            - cache: LRUCache statistics
        """
        cache_stats = self._cache.get_stats()
        hits, misses = cache_stats["hits"], cache_stats["misses"]
        total = hits + misses
        return {
            "hits": hits,
            "misses": misses,
            "hit_ratio": hits / total if total > 0 else 0.0,
            "root": str(self._backend.root),
            "cache": cache_stats,
        }
