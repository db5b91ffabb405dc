"""Storage backends for layerkv."""

from .base import Store
from .cached import CacheStore
from .file import FileStore
from .guard import GuardedStore
from .layered import DEFAULT_CAPACITY, LayeredStore
from .memory import MemoryStore

__all__ = [
    "DEFAULT_CAPACITY",
    "CacheStore",
    "FileStore",
    "GuardedStore",
    "LayeredStore",
    "MemoryStore",
    "Store",
]
