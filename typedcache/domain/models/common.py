"""Defines common Value Objects used across the facade and its collaborators.

These objects name the concepts shared by both storage tiers: the key space
and the closed set of value kinds an entry can hold.
"""

from enum import Enum
from typing import NewType

# === Core Value Objects ===

# Using NewType for semantic clarity, although they are strings at runtime.
CacheKey = NewType("CacheKey", str)        # Key shared by the durable store and the memory cache
EncodedBlob = NewType("EncodedBlob", bytes)  # Bytes produced by archiving a custom object
CanonicalURL = NewType("CanonicalURL", str)  # URL in its normalized string form


class ValueKind(str, Enum):
    """The accessor families, one per StoredValue variant.

    CUSTOM_OBJECT entries hold an encoded blob produced by an object codec;
    URL entries hold a canonical URL string.
    """

    INTEGER = "integer"
    FLOAT = "float"
    DOUBLE = "double"
    BOOLEAN = "bool"
    OBJECT = "object"
    CUSTOM_OBJECT = "custom_object"
    URL = "url"

    @property
    def is_primitive(self) -> bool:
        return self in PRIMITIVE_KINDS


PRIMITIVE_KINDS = frozenset({ValueKind.INTEGER, ValueKind.FLOAT, ValueKind.DOUBLE, ValueKind.BOOLEAN})
