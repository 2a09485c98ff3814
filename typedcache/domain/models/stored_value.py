"""StoredValue: the tagged representation persisted by the durable store and
mirrored by the memory cache.

Exactly one variant (a ValueKind) is active per entry. Helpers here describe
which payloads are legal for each variant; the durable store uses them to
reject malformed writes before anything reaches disk.
"""

import datetime
from dataclasses import dataclass
from typing import Any, Optional, Tuple

from typedcache.domain.models.common import ValueKind

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

# Kinds a property-list compatible structure may be built from (besides list/dict)
PLIST_SCALAR_TYPES = (bytes, str, bool, int, float, datetime.datetime)

ZERO_EQUIVALENTS = {
    ValueKind.INTEGER: 0,
    ValueKind.FLOAT: 0.0,
    ValueKind.DOUBLE: 0.0,
    ValueKind.BOOLEAN: False,
}


@dataclass(frozen=True)
class StoredValue:
    """A single stored entry: the variant tag plus its payload."""

    kind: ValueKind
    payload: Any

    def matches(self, kind: ValueKind) -> bool:
        return self.kind is kind

    def as_record(self) -> Tuple[str, Any]:
        """Plain tuple form used when the value is written to disk."""
        return (self.kind.value, self.payload)

    @classmethod
    def from_record(cls, record: Any) -> "StoredValue":
        """Rebuilds a StoredValue from its on-disk record.

        Raises:
            ValueError: If the record is not a (variant, payload) pair with a
                known variant name.
        """
        if not isinstance(record, tuple) or len(record) != 2:
            raise ValueError(f"Malformed stored record: {record!r}")
        kind_name, payload = record
        return cls(ValueKind(kind_name), payload)


def zero_equivalent(kind: ValueKind) -> Optional[Any]:
    """Value returned for a kind when nothing usable is stored.

    Primitive kinds map to 0 / 0.0 / False; object kinds map to None.
    """
    return ZERO_EQUIVALENTS.get(kind)


def is_plist_safe(value: Any) -> bool:
    """True if value is recursively built only from property-list kinds."""
    if isinstance(value, PLIST_SCALAR_TYPES):
        return True
    if isinstance(value, (list, tuple)):
        return all(is_plist_safe(item) for item in value)
    if isinstance(value, dict):
        return all(isinstance(k, str) and is_plist_safe(v) for k, v in value.items())
    return False


def payload_matches_kind(stored: StoredValue) -> bool:
    """Checks that the payload is legal for the variant it is tagged with."""
    payload = stored.payload
    kind = stored.kind
    if kind is ValueKind.INTEGER:
        return isinstance(payload, int) and not isinstance(payload, bool) and INT64_MIN <= payload <= INT64_MAX
    if kind in (ValueKind.FLOAT, ValueKind.DOUBLE):
        return isinstance(payload, float)
    if kind is ValueKind.BOOLEAN:
        return isinstance(payload, bool)
    if kind is ValueKind.OBJECT:
        return is_plist_safe(payload)
    if kind is ValueKind.CUSTOM_OBJECT:
        return isinstance(payload, bytes)
    if kind is ValueKind.URL:
        return isinstance(payload, str)
    return False
