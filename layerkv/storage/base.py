"""
Store Interface

Every backend implements the same three operations, so backends, the
layered store and the concurrency guard compose freely.
"""

from abc import ABC, abstractmethod


def as_bytes(value) -> bytes:
    """
    Copy a bytes-like value to immutable bytes.

    Raises:
        TypeError: If value is not bytes-like (an int would otherwise
            become that many zero bytes)
    """
    return bytes(memoryview(value))


class Store(ABC):
    """
    Key-value store operating on bytes only.

    Encoding of structured values is handled above this layer
    (see GuardedStore.get_decoded / set_encoded).
    """

    @abstractmethod
    def get(self, key: str) -> bytes:
        """
        Get the value stored under key.

        Raises:
            NotFoundError: If the key does not exist
        """

    @abstractmethod
    def set(self, key: str, value: bytes) -> None:
        """Create or overwrite the value stored under key."""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove key from the store."""
