"""Interface for the durable value store.

Defines the contract for the process-wide, persistent tier. Implementations
hold only StoredValue variants and own their on-disk format entirely.
"""

import abc
from typing import Optional

from typedcache.domain.models.common import CacheKey
from typedcache.domain.models.stored_value import StoredValue


class ValueStore(abc.ABC):
    """Abstract Base Class for the durable key-value store."""

    @abc.abstractmethod
    def get(self, key: CacheKey) -> Optional[StoredValue]:
        """Retrieves the entry stored under key.

        The returned StoredValue carries its own variant tag; callers select
        and coerce the kind they asked for.

        Args:
            key: The key to look up.

        Returns:
            The stored entry, or None if the key is absent.
        """
        pass

    @abc.abstractmethod
    def set(self, key: CacheKey, stored: StoredValue) -> None:
        """Stores an entry, replacing any previous value for key.

        Args:
            key: The key to store under.
            stored: The entry to persist.

        Raises:
            InvalidValueError: If the payload is not legal for its variant.
        """
        pass

    @abc.abstractmethod
    def remove(self, key: CacheKey) -> None:
        """Deletes key. Removing an absent key is a no-op."""
        pass

    @abc.abstractmethod
    def remove_all(self) -> None:
        """Deletes every entry in the store's namespace."""
        pass

    @abc.abstractmethod
    def contains_key(self, key: CacheKey) -> bool:
        """Returns True if the store currently holds an entry for key."""
        pass

    @abc.abstractmethod
    def flush(self) -> None:
        """Blocks until every write issued so far is durable."""
        pass
