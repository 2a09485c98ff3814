import threading

import pytest

from typedcache.domain.models.common import ValueKind
from typedcache.domain.models.stored_value import StoredValue
from typedcache.infrastructure.cache.memory_cache import LRUMemoryCache


def _int(value: int) -> StoredValue:
    return StoredValue(ValueKind.INTEGER, value)


def test_get_set_remove():
    cache = LRUMemoryCache()
    cache.set("a", _int(1))
    assert cache.get("a") == _int(1)
    cache.remove("a")
    cache.remove("a")
    assert cache.get("a") is None


def test_evicts_least_recently_used():
    cache = LRUMemoryCache(max_items=2)
    cache.set("a", _int(1))
    cache.set("b", _int(2))
    cache.get("a")  # "b" is now the least recently used
    cache.set("c", _int(3))

    assert "a" in cache
    assert "b" not in cache
    assert "c" in cache
    assert len(cache) == 2


def test_unbounded_cache_never_evicts():
    cache = LRUMemoryCache(max_items=None)
    for i in range(100):
        cache.set(f"k{i}", _int(i))
    assert len(cache) == 100


def test_invalid_capacity():
    with pytest.raises(ValueError):
        LRUMemoryCache(max_items=0)


def test_concurrent_writers_keep_capacity():
    cache = LRUMemoryCache(max_items=50)

    def writer(offset: int) -> None:
        for i in range(200):
            cache.set(f"{offset}-{i}", _int(i))
            cache.get(f"{offset}-{i // 2}")

    threads = [threading.Thread(target=writer, args=(n,)) for n in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(cache) == 50
