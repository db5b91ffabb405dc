"""
layerkv: Embeddable Key-Value Store

A small key-value store with pluggable backends (memory, file-per-key,
LRU cache, and an LRU cache layered over files), each usable from many
threads through a locking wrapper, with an optional HTTP front end.
"""

from .client import open_file, open_layered, open_lru, open_memory, open_store
from .errors import (
    ConfigurationError,
    ErrorKind,
    InvalidKeyError,
    KVError,
    NotFoundError,
    StorageIOError,
)

__version__ = "1.0.0"

__all__ = [
    "ConfigurationError",
    "ErrorKind",
    "InvalidKeyError",
    "KVError",
    "NotFoundError",
    "StorageIOError",
    "open_file",
    "open_layered",
    "open_lru",
    "open_memory",
    "open_store",
]
