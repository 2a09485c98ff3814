"""Domain exceptions for typedcache.

A missing key is never an error; these cover caller contract violations and
the two custom-object codec failures, which must stay distinguishable from
each other and from absence.
"""

from typing import Any, Optional


class TypedCacheError(Exception):
    """Base exception for the typedcache package."""

    def __init__(self, message: str, key: Optional[str] = None, cause: Optional[BaseException] = None):
        self.key = key
        self.cause = cause
        super().__init__(message)


class InvalidKeyError(TypedCacheError, ValueError):
    """Raised when a key is empty or not a string."""

    def __init__(self, key: Any):
        super().__init__(f"Keys must be non-empty strings, got {key!r}", key=None)
        self.invalid_key = key


class InvalidValueError(TypedCacheError, ValueError):
    """Raised when a value cannot be stored under the requested kind.

    Covers values that cannot be normalized (an out-of-range integer, a
    malformed URL) and payloads the durable store refuses, such as plain
    objects that are not property-list compatible.
    """


class CodecError(TypedCacheError):
    """Base class for custom-object archive failures."""


class ArchiveEncodeError(CodecError):
    """Raised when a custom object cannot be archived for storage."""


class ArchiveDecodeError(CodecError):
    """Raised when stored bytes for a custom object cannot be unarchived.

    Signals corrupt data for that key, as opposed to the key being absent.
    """
