"""
Concurrency Guard Module

Serializes every operation on a wrapped store behind a single lock.

There is no read/write distinction: gets are mutually exclusive with sets
and deletes too. A LayeredStore get performs a read on the file store and
then a write on the cache, and that pair must not interleave with another
caller's operation.

There is no timeout. A slow or hung inner call blocks every other caller
until it returns.
"""

import threading
from typing import Any, Optional

from ..codec import JSONCodec
from .base import Store


class GuardedStore(Store):
    """
    Thread-safe wrapper around any Store.

    Every get/set/delete holds the lock for its full duration and releases
    it on every exit path, so the visible effect of concurrent calls equals
    some sequential order of them.

    Usage:
        store = GuardedStore(LayeredStore("/var/lib/kv"))
        store.set_encoded("config", {"debug": True})
        store.get_decoded("config")  # {"debug": True}

    Attributes:
        inner: The wrapped store
        codec: Encoder/decoder used by get_decoded and set_encoded
    """

    def __init__(self, inner: Store, codec: Optional[Any] = None):
        """
        Initialize the guard.

        Args:
            inner: The store to wrap
            codec: Object with encode(obj) -> bytes and decode(bytes) -> obj
                (default JSONCodec)
        """
        self.inner = inner
        self.codec = codec if codec is not None else JSONCodec()
        self._lock = threading.Lock()

    def get(self, key: str) -> bytes:
        with self._lock:
            return self.inner.get(key)

    def set(self, key: str, value: bytes) -> None:
        with self._lock:
            self.inner.set(key, value)

    def delete(self, key: str) -> None:
        with self._lock:
            self.inner.delete(key)

    def get_decoded(self, key: str) -> Any:
        """
        Get a value and decode it with the codec.

        Raises:
            NotFoundError: If the key does not exist
            Whatever the codec raises on malformed data
        """
        return self.codec.decode(self.get(key))

    def set_encoded(self, key: str, value: Any) -> None:
        """
        Encode a value with the codec and store it.

        The store is not touched if encoding fails.
        """
        self.set(key, self.codec.encode(value))
