"""Interface for the in-memory cache tier.

The cache is a volatile fast path with no durability. Capacity and eviction
are owned entirely by the implementation.
"""

import abc
from typing import Optional

from typedcache.domain.models.common import CacheKey
from typedcache.domain.models.stored_value import StoredValue


class MemoryCache(abc.ABC):
    """Abstract Base Class for the in-memory cache."""

    @abc.abstractmethod
    def get(self, key: CacheKey) -> Optional[StoredValue]:
        """Returns the cached entry for key, or None on a miss."""
        pass

    @abc.abstractmethod
    def set(self, key: CacheKey, stored: StoredValue) -> None:
        """Caches an entry for key."""
        pass

    @abc.abstractmethod
    def remove(self, key: CacheKey) -> None:
        """Drops key from the cache if present."""
        pass

    @abc.abstractmethod
    def remove_all(self) -> None:
        """Drops every cached entry."""
        pass
