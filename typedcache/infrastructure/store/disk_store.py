"""Disk-backed ValueStore built on diskcache.

Each entry is persisted as a (variant, payload) record in a diskcache
directory. The SQLite database is opened with synchronous=FULL and without
an eviction policy, so a committed write survives process termination and is
never culled to make room.
"""

import logging
from pathlib import Path
from typing import Optional, Union

import diskcache as dc

from typedcache.domain.exceptions import InvalidValueError
from typedcache.domain.interfaces.value_store import ValueStore
from typedcache.domain.models.common import CacheKey
from typedcache.domain.models.stored_value import StoredValue, payload_matches_kind

logger = logging.getLogger(__name__)

DEFAULT_STORE_DIR = Path.home() / ".typedcache" / "store"
DEFAULT_TIMEOUT_SECONDS = 60
SQLITE_SYNCHRONOUS_FULL = 2


class DiskValueStore(ValueStore):
    """Durable store persisted in a diskcache directory."""

    def __init__(self, directory: Union[str, Path] = DEFAULT_STORE_DIR, timeout: float = DEFAULT_TIMEOUT_SECONDS):
        """Opens (or creates) the store at directory.

        Args:
            directory: Directory holding the SQLite database.
            timeout: Seconds to wait on a locked database before failing.
        """
        self.directory = Path(directory).expanduser()
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            self._cache = dc.Cache(
                str(self.directory),
                timeout=timeout,
                eviction_policy="none",
                sqlite_synchronous=SQLITE_SYNCHRONOUS_FULL,
            )
        except OSError as e:
            logger.error(f"Failed to open value store at {self.directory}: {e}")
            raise
        logger.info(f"DiskValueStore opened at: {self.directory} (timeout={timeout}s)")

    def get(self, key: CacheKey) -> Optional[StoredValue]:
        record = self._cache.get(key, default=None)
        if record is None:
            return None
        try:
            return StoredValue.from_record(record)
        except ValueError as e:
            logger.warning(f"Ignoring unreadable record for key '{key}' in {self.directory}: {e}")
            return None

    def set(self, key: CacheKey, stored: StoredValue) -> None:
        if not payload_matches_kind(stored):
            raise InvalidValueError(
                f"Refusing to store {type(stored.payload).__name__} as {stored.kind.value} for key '{key}'",
                key=key,
            )
        self._cache.set(key, stored.as_record())
        logger.debug(f"Stored {stored.kind.value} for key '{key}' on disk")

    def remove(self, key: CacheKey) -> None:
        if self._cache.delete(key):
            logger.debug(f"Deleted key '{key}' from disk")

    def remove_all(self) -> None:
        count = self._cache.clear()
        logger.info(f"Cleared {count} entries from value store at: {self.directory}")

    def contains_key(self, key: CacheKey) -> bool:
        return key in self._cache

    def flush(self) -> None:
        """Waits for every write begun before this call to commit.

        Individual writes commit on return; opening a write transaction
        blocks until any concurrent writer's transaction has committed too.
        """
        with self._cache.transact():
            pass

    def close(self) -> None:
        """Releases the SQLite connections held by this store."""
        self._cache.close()
        logger.debug(f"Closed value store at: {self.directory}")

    def __enter__(self) -> "DiskValueStore":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def __len__(self) -> int:
        return len(self._cache)
