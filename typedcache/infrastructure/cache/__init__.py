"""Memory Cache Implementation.

Provides the concrete in-memory tier for the MemoryCache interface.
Bounded Context: Cache Management
"""

from typedcache.infrastructure.cache.memory_cache import LRUMemoryCache

__all__ = ["LRUMemoryCache"]
