import pytest
from typer.testing import CliRunner
from pathlib import Path

from typedcache import main
from typedcache.core.typed_cache import TypedCacheFacade
from typedcache.infrastructure.cache.memory_cache import LRUMemoryCache
from typedcache.infrastructure.config.settings import clear_test_config, set_config_for_testing
from typedcache.infrastructure.store.disk_store import DiskValueStore


@pytest.fixture(scope="session")
def runner():
    """Provides a Typer CliRunner instance."""
    return CliRunner()


@pytest.fixture
def value_store(tmp_path: Path):
    """A real disk store in a temporary directory."""
    store = DiskValueStore(directory=tmp_path / "store", timeout=5)
    yield store
    store.close()


@pytest.fixture
def memory_cache():
    return LRUMemoryCache(max_items=None)


@pytest.fixture
def facade(value_store: DiskValueStore, memory_cache: LRUMemoryCache):
    """Facade wired to the temporary store and an unbounded memory cache."""
    return TypedCacheFacade(value_store=value_store, memory_cache=memory_cache)


@pytest.fixture
def cli_store_dir(tmp_path: Path):
    """Points the CLI's shared facade at a temporary store and resets it afterwards."""
    store_dir = tmp_path / "cli_store"
    set_config_for_testing({"store.directory": str(store_dir), "logging.level": "WARNING"})
    main.reset_dependencies()
    yield store_dir
    main.reset_dependencies()
    clear_test_config()
