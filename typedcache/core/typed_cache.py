"""Typed cache facade: read-through / write-through orchestration over a
durable ValueStore and a volatile MemoryCache.

Writes go to the store first, are flushed, and only then mirrored into the
cache, so the durable copy is always authoritative. Reads try the cache,
fall back to the store and populate the cache on the way out. A missing key
resolves to the caller's default (or the kind's zero-equivalent) and is
never reported as an error.
"""

import logging
from typing import Any, Optional

from typedcache.core.normalization import URLLike, coerce, normalize
from typedcache.domain.exceptions import InvalidKeyError
from typedcache.domain.interfaces.codec import ObjectCodec
from typedcache.domain.interfaces.memory_cache import MemoryCache
from typedcache.domain.interfaces.value_store import ValueStore
from typedcache.domain.models.common import CacheKey, ValueKind
from typedcache.domain.models.stored_value import StoredValue
from typedcache.infrastructure.codecs.object_codecs import PickleCodec

logger = logging.getLogger(__name__)


class TypedCacheFacade:
    """Typed accessors over a durable store with an in-memory fast path.

    Thread safety: every call is safe to make concurrently provided the two
    collaborators are individually thread-safe (the bundled ones are). The
    facade adds no locking of its own, so its two-step sequences are not
    atomic across tiers. Two writers racing on one key can leave the cache
    holding the older value while the store holds the newer one (A writes
    the store, B writes store and cache, A writes the cache). The store
    remains correct and the cache converges on the next write, removal or
    eviction of that key.
    """

    def __init__(
        self,
        value_store: ValueStore,
        memory_cache: MemoryCache,
        codec: Optional[ObjectCodec] = None,
    ):
        """Initializes the facade.

        Args:
            value_store: The durable tier.
            memory_cache: The in-memory tier.
            codec: Default codec for custom objects (pickle if None).
        """
        self._value_store = value_store
        self._memory_cache = memory_cache
        self.codec = codec or PickleCodec()
        logger.info(
            f"TypedCacheFacade initialized. store={type(value_store).__name__}, "
            f"cache={type(memory_cache).__name__}, codec={type(self.codec).__name__}"
        )

    # --- Collaborator injection ---

    @property
    def value_store(self) -> ValueStore:
        return self._value_store

    @property
    def memory_cache(self) -> MemoryCache:
        return self._memory_cache

    def set_value_store(self, value_store: ValueStore) -> None:
        """Replaces the durable tier.

        The current cache is emptied so it cannot serve keys the new store
        does not hold.
        """
        self._value_store = value_store
        self._memory_cache.remove_all()
        logger.info(f"Value store replaced with {type(value_store).__name__}; memory cache cleared.")

    def set_memory_cache(self, memory_cache: MemoryCache) -> None:
        """Replaces the in-memory tier. The new cache fills on demand."""
        self._memory_cache = memory_cache
        logger.info(f"Memory cache replaced with {type(memory_cache).__name__}.")

    # --- Generic read / write ---

    def get(self, key: str, kind: ValueKind, default: Any = None, codec: Optional[ObjectCodec] = None) -> Any:
        """Reads key through the cache and coerces the result to kind.

        Args:
            key: Non-empty key.
            kind: Accessor family selecting the variant and coercion rule.
            default: Returned when the key is absent (and, for object kinds,
                when the stored variant does not match).
            codec: Codec for custom objects, overriding the facade default.

        Returns:
            The stored value, the default, or the kind's zero-equivalent.

        Raises:
            InvalidKeyError: If key is empty or not a string.
            ArchiveDecodeError: If a stored custom object cannot be decoded.
        """
        cache_key = self._validate_key(key)
        stored = self._read_through(cache_key)
        return coerce(cache_key, stored, kind, codec or self.codec, default)

    def set(self, key: str, value: Any, kind: ValueKind, codec: Optional[ObjectCodec] = None) -> None:
        """Writes value under key to the store, flushes it, then caches it.

        Raises:
            InvalidKeyError: If key is empty or not a string.
            InvalidValueError: If value cannot be stored as kind, or the store
                rejects it.
            ArchiveEncodeError: If a custom object cannot be archived.
        """
        cache_key = self._validate_key(key)
        stored = normalize(cache_key, value, kind, codec or self.codec)
        store = self._value_store
        store.set(cache_key, stored)
        store.flush()
        self._memory_cache.set(cache_key, stored)
        logger.debug(f"Wrote {kind.value} for key '{cache_key}' to store and cache")

    # --- Existence / removal ---

    def contains_key(self, key: str) -> bool:
        """True iff the durable store holds key. The cache is not consulted."""
        return self._value_store.contains_key(self._validate_key(key))

    def remove(self, key: str) -> None:
        """Removes key from both tiers. Removing an absent key is a no-op."""
        cache_key = self._validate_key(key)
        store = self._value_store
        store.remove(cache_key)
        store.flush()
        self._memory_cache.remove(cache_key)
        logger.debug(f"Removed key '{cache_key}' from store and cache")

    def remove_all(self) -> None:
        """Clears the entire store namespace and the cache.

        This deletes every key the store holds, including ones this facade
        never wrote.
        """
        logger.warning(f"Removing all entries from {type(self._value_store).__name__} and memory cache.")
        store = self._value_store
        store.remove_all()
        store.flush()
        self._memory_cache.remove_all()

    # --- Typed accessors ---

    def get_integer(self, key: str, default: Optional[int] = None) -> int:
        return self.get(key, ValueKind.INTEGER, default)

    def set_integer(self, key: str, value: int) -> None:
        self.set(key, value, ValueKind.INTEGER)

    def get_float(self, key: str, default: Optional[float] = None) -> float:
        """Returns the stored single-precision value.

        An entry written with set_double reads as 0.0 here; float and double
        are separate kinds.
        """
        return self.get(key, ValueKind.FLOAT, default)

    def set_float(self, key: str, value: float) -> None:
        """Stores value rounded to single precision."""
        self.set(key, value, ValueKind.FLOAT)

    def get_double(self, key: str, default: Optional[float] = None) -> float:
        """Returns the stored double. An entry written with set_float reads as 0.0."""
        return self.get(key, ValueKind.DOUBLE, default)

    def set_double(self, key: str, value: float) -> None:
        self.set(key, value, ValueKind.DOUBLE)

    def get_bool(self, key: str, default: Optional[bool] = None) -> bool:
        return self.get(key, ValueKind.BOOLEAN, default)

    def set_bool(self, key: str, value: bool) -> None:
        self.set(key, value, ValueKind.BOOLEAN)

    def get_object(self, key: str, default: Any = None) -> Any:
        """Returns a copy of the stored property-list object, or default."""
        return self.get(key, ValueKind.OBJECT, default)

    def set_object(self, key: str, value: Any) -> None:
        """Stores a property-list object.

        value may only contain bytes, str, int, float, bool, datetime, lists,
        tuples and str-keyed dicts of those; the store rejects anything else.
        """
        self.set(key, value, ValueKind.OBJECT)

    def get_custom_object(self, key: str, default: Any = None, codec: Optional[ObjectCodec] = None) -> Any:
        return self.get(key, ValueKind.CUSTOM_OBJECT, default, codec=codec)

    def set_custom_object(self, key: str, value: Any, codec: Optional[ObjectCodec] = None) -> None:
        self.set(key, value, ValueKind.CUSTOM_OBJECT, codec=codec)

    def get_url(self, key: str, default: Optional[URLLike] = None) -> Optional[URLLike]:
        """Returns the stored canonical URL string, or default unchanged."""
        return self.get(key, ValueKind.URL, default)

    def set_url(self, key: str, value: URLLike) -> None:
        self.set(key, value, ValueKind.URL)

    # --- Internals ---

    @staticmethod
    def _validate_key(key: Any) -> CacheKey:
        if not isinstance(key, str) or not key:
            raise InvalidKeyError(key)
        return CacheKey(key)

    def _read_through(self, key: CacheKey) -> Optional[StoredValue]:
        """Cache first; on a miss read the store and populate the cache."""
        cache = self._memory_cache
        stored = cache.get(key)
        if stored is not None:
            logger.debug(f"Memory cache HIT for key '{key}'")
            return stored

        stored = self._value_store.get(key)
        if stored is None:
            logger.debug(f"Cache miss for key '{key}' in both tiers")
            return None

        cache.set(key, stored)
        logger.debug(f"Memory cache MISS for key '{key}'; populated from store")
        return stored
