"""Interfaces for archiving custom objects into bytes.

A custom object is stored as an encoded blob. Which codec handles a value is
decided by the caller (or the facade's default codec), never discovered by
inspecting the value.
"""

import abc
from typing import Any, Protocol


class ObjectCodec(abc.ABC):
    """Abstract Base Class for a custom-object archive format."""

    @abc.abstractmethod
    def encode(self, value: Any) -> bytes:
        """Archives value into bytes.

        Raises:
            Exception: Any failure; the facade reports it as ArchiveEncodeError.
        """
        pass

    @abc.abstractmethod
    def decode(self, data: bytes) -> Any:
        """Rebuilds a value from bytes produced by encode.

        Raises:
            Exception: Any failure; the facade reports it as ArchiveDecodeError.
        """
        pass


class Archivable(Protocol):
    """Capability implemented by types that archive themselves."""

    def to_archive(self) -> bytes:
        ...

    @classmethod
    def from_archive(cls, data: bytes) -> "Archivable":
        ...
