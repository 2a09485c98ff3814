"""Interface for presenting results to the user.

Defines the contract the command-line layer uses to show stored values,
information and errors, allowing different UI implementations.
"""

import abc
from typing import Any

from typedcache.domain.models.common import CacheKey, ValueKind


class UserInterface(abc.ABC):
    """Abstract Base Class for user interaction."""

    @abc.abstractmethod
    def display_value(self, key: CacheKey, kind: ValueKind, value: Any) -> None:
        """Displays a value read from the cache.

        Args:
            key: The key that was read.
            kind: The accessor family used for the read.
            value: The value (or default) returned by the facade.
        """
        pass

    @abc.abstractmethod
    def display_error(self, error_message: str, **kwargs: Any) -> None:
        """Displays an error message to the user."""
        pass

    @abc.abstractmethod
    def display_warning(self, warning_message: str, **kwargs: Any) -> None:
        """Displays a warning message to the user."""
        pass

    @abc.abstractmethod
    def display_info(self, info_message: str, **kwargs: Any) -> None:
        """Displays an informational message to the user."""
        pass
