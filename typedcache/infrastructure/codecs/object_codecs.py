"""Concrete ObjectCodec implementations.

PickleCodec archives any picklable value and is the facade's default.
ArchivableCodec delegates to a class that implements the Archivable protocol
(to_archive / from_archive), for types that control their own format.
"""

import logging
import pickle
from typing import Any, Type

from typedcache.domain.interfaces.codec import Archivable, ObjectCodec

logger = logging.getLogger(__name__)


class PickleCodec(ObjectCodec):
    """Archives values with the pickle protocol."""

    def __init__(self, protocol: int = pickle.HIGHEST_PROTOCOL):
        self.protocol = protocol

    def encode(self, value: Any) -> bytes:
        return pickle.dumps(value, protocol=self.protocol)

    def decode(self, data: bytes) -> Any:
        return pickle.loads(data)


class ArchivableCodec(ObjectCodec):
    """Archives instances of one Archivable class."""

    def __init__(self, cls: Type[Archivable]):
        self.cls = cls

    def encode(self, value: Any) -> bytes:
        if not isinstance(value, self.cls):
            raise TypeError(f"{type(value).__name__} is not a {self.cls.__name__}")
        return value.to_archive()

    def decode(self, data: bytes) -> Any:
        return self.cls.from_archive(data)

    def __repr__(self) -> str:
        return f"ArchivableCodec({self.cls.__name__})"
