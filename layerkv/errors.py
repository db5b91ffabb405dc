"""
Error Definitions

Every failure raised by a store carries an ErrorKind so callers (the HTTP
layer in particular) can branch on what went wrong without parsing messages.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Enumeration of error kinds."""
    NOT_FOUND = "not_found"
    IO = "io"
    CONFIGURATION = "configuration"
    INVALID_KEY = "invalid_key"


class KVError(Exception):
    """
    Base class for all store errors.

    Attributes:
        kind: The ErrorKind of this error
        key: The key involved, or None when not tied to a key
    """

    kind: ErrorKind = ErrorKind.IO

    def __init__(self, message: str, key: Optional[str] = None):
        super().__init__(message)
        self.key = key


class NotFoundError(KVError):
    """The key does not exist (raised by get and delete, never by set)."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, key: str):
        super().__init__(f"key not found: {key}", key=key)


class StorageIOError(KVError):
    """The persistent medium failed. The underlying OSError is the __cause__."""

    kind = ErrorKind.IO


class ConfigurationError(KVError, ValueError):
    """Invalid construction parameters (capacity, backend name)."""

    kind = ErrorKind.CONFIGURATION


class InvalidKeyError(KVError, ValueError):
    """The key cannot name a file under the root (NUL byte, root itself, escapes the root)."""

    kind = ErrorKind.INVALID_KEY
