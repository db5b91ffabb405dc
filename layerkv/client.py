"""
Store Factories

Each factory returns a GuardedStore, safe to share between threads.
Callers own the returned handle; there is no process-wide instance.

Usage:
    store = open_layered("/var/lib/kv", capacity=512)
    store.set("greeting", b"hello")
    store.get("greeting")  # b"hello"
"""

from pathlib import Path
from typing import Union

from .errors import ConfigurationError
from .storage import (
    DEFAULT_CAPACITY,
    CacheStore,
    FileStore,
    GuardedStore,
    LayeredStore,
    MemoryStore,
)

BACKENDS = ("memory", "file", "lru", "layered")


def open_memory() -> GuardedStore:
    """Thread-safe in-memory store (unbounded)."""
    return GuardedStore(MemoryStore())


def open_file(root: Union[str, Path]) -> GuardedStore:
    """Thread-safe file-per-key store rooted at root."""
    return GuardedStore(FileStore(root))


def open_lru(capacity: int) -> GuardedStore:
    """Thread-safe LRU cache store holding at most capacity entries."""
    return GuardedStore(CacheStore(capacity))


def open_layered(root: Union[str, Path], capacity: int = DEFAULT_CAPACITY) -> GuardedStore:
    """Thread-safe LRU cache over a file-per-key store."""
    return GuardedStore(LayeredStore(root, capacity=capacity))


def open_store(
        backend: str,
        root: Union[str, Path] = ".",
        capacity: int = DEFAULT_CAPACITY,
) -> GuardedStore:
    """
    Open a store by backend name.

    Args:
        backend: One of "memory", "file", "lru", "layered"
        root: Root directory (file and layered backends)
        capacity: Cache capacity (lru and layered backends)

    Raises:
        ConfigurationError: If backend is unknown or capacity is invalid
        StorageIOError: If the root directory cannot be created
    """
    if backend == "memory":
        return open_memory()
    if backend == "file":
        return open_file(root)
    if backend == "lru":
        return open_lru(capacity)
    if backend == "layered":
        return open_layered(root, capacity=capacity)
    raise ConfigurationError(
        f"unknown backend {backend!r} (expected one of: {', '.join(BACKENDS)})"
    )
