"""typedcache: a typed, cache-accelerated facade over a persistent key-value store.

Reads are served from an in-memory cache when possible and fall back to the
durable store; writes go to the durable store first and are then mirrored
into the cache.
"""

from typedcache.core.typed_cache import TypedCacheFacade
from typedcache.domain.exceptions import (
    ArchiveDecodeError,
    ArchiveEncodeError,
    CodecError,
    InvalidKeyError,
    InvalidValueError,
    TypedCacheError,
)
from typedcache.domain.models.common import ValueKind
from typedcache.domain.models.stored_value import StoredValue

__all__ = [
    "TypedCacheFacade",
    "StoredValue",
    "ValueKind",
    "TypedCacheError",
    "InvalidKeyError",
    "InvalidValueError",
    "CodecError",
    "ArchiveEncodeError",
    "ArchiveDecodeError",
]

__version__ = "1.0.0"
