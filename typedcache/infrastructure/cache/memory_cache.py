"""In-memory MemoryCache with least-recently-used eviction.

Entries live in an OrderedDict guarded by a lock, so the cache can be shared
by every thread in the process.
"""

import logging
import threading
from collections import OrderedDict
from typing import Optional

from typedcache.domain.interfaces.memory_cache import MemoryCache
from typedcache.domain.models.common import CacheKey
from typedcache.domain.models.stored_value import StoredValue

logger = logging.getLogger(__name__)

DEFAULT_MAX_ITEMS = 1024


class LRUMemoryCache(MemoryCache):
    """Thread-safe LRU cache of StoredValues."""

    def __init__(self, max_items: Optional[int] = DEFAULT_MAX_ITEMS):
        """Initializes the cache.

        Args:
            max_items: Capacity before the least recently used entry is
                evicted. None disables eviction.
        """
        if max_items is not None and max_items < 1:
            raise ValueError(f"max_items must be positive or None, got {max_items}")
        self.max_items = max_items
        self._entries: "OrderedDict[CacheKey, StoredValue]" = OrderedDict()
        self._lock = threading.Lock()
        logger.info(f"LRUMemoryCache initialized. max_items={max_items}")

    def get(self, key: CacheKey) -> Optional[StoredValue]:
        with self._lock:
            stored = self._entries.get(key)
            if stored is not None:
                self._entries.move_to_end(key)
            return stored

    def set(self, key: CacheKey, stored: StoredValue) -> None:
        with self._lock:
            self._entries[key] = stored
            self._entries.move_to_end(key)
            self._evict()

    def remove(self, key: CacheKey) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def remove_all(self) -> None:
        with self._lock:
            self._entries.clear()
        logger.debug("Cleared memory cache.")

    def _evict(self) -> None:
        """Drops least recently used entries until within capacity. Caller holds the lock."""
        if self.max_items is None:
            return
        while len(self._entries) > self.max_items:
            evicted_key, _ = self._entries.popitem(last=False)
            logger.debug(f"Memory cache EVICTED key (LRU): {evicted_key}")

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries
