"""Normalization and coercion between caller values and StoredValue.

Writes turn a native value into the StoredValue variant for the requested
kind. Reads turn whatever StoredValue was found (or nothing) back into a
value of the requested kind, following these rules:

=====================  ===============  =========================  ==========================
requested kind         same variant     different variant          absent
=====================  ===============  =========================  ==========================
integer/float/double/  stored value     zero-equivalent            default or zero-equivalent
bool                                    (0, 0.0, False)
object                 deep copy        default (or None)          default (or None)
custom_object          codec-decoded    default (or None)          default (or None)
url                    canonical URL,   default (or None)          default (or None)
                       malformed ->
                       default
=====================  ===============  =========================  ==========================
"""

import copy
import logging
import struct
from typing import Any, Optional, Union
from urllib.parse import ParseResult, SplitResult, urlsplit

from typedcache.core.object_archiver import archive, unarchive
from typedcache.domain.exceptions import InvalidValueError
from typedcache.domain.interfaces.codec import ObjectCodec
from typedcache.domain.models.common import CacheKey, CanonicalURL, ValueKind
from typedcache.domain.models.stored_value import INT64_MAX, INT64_MIN, StoredValue, zero_equivalent

logger = logging.getLogger(__name__)

NUMERIC_TYPES = (bool, int, float)
URLLike = Union[str, SplitResult, ParseResult]


def to_single_precision(value: float) -> float:
    """Rounds a Python float to the nearest IEEE-754 single-precision value."""
    return struct.unpack("<f", struct.pack("<f", value))[0]


def canonical_url(value: Any) -> Optional[CanonicalURL]:
    """Returns the canonical string form of a URL, or None if it is not one.

    A URL needs a scheme plus a network location or a path, and may not
    contain whitespace.
    """
    if isinstance(value, (SplitResult, ParseResult)):
        value = value.geturl()
    if not isinstance(value, str) or not value:
        return None
    if any(ch.isspace() for ch in value):
        return None
    try:
        parts = urlsplit(value)
    except ValueError:
        # e.g. an unterminated IPv6 host
        return None
    if not parts.scheme or not (parts.netloc or parts.path):
        return None
    return CanonicalURL(parts.geturl())


def _require_number(key: CacheKey, value: Any, kind: ValueKind) -> None:
    if not isinstance(value, NUMERIC_TYPES):
        raise InvalidValueError(
            f"Cannot store {type(value).__name__} as {kind.value} for key '{key}'", key=key
        )


def normalize(key: CacheKey, value: Any, kind: ValueKind, codec: ObjectCodec) -> StoredValue:
    """Converts a caller value into the StoredValue variant for kind.

    Plain objects are deep-copied but not validated; whether they are
    property-list compatible is the durable store's decision. Objects that
    cannot even be copied are rejected here.

    Raises:
        InvalidValueError: If a primitive or URL value cannot be represented.
        ArchiveEncodeError: If a custom object cannot be archived.
    """
    if kind is ValueKind.INTEGER:
        _require_number(key, value, kind)
        try:
            number = int(value)
        except (ValueError, OverflowError) as e:
            raise InvalidValueError(f"Value {value!r} for key '{key}' is not an integer", key=key, cause=e) from e
        if not INT64_MIN <= number <= INT64_MAX:
            raise InvalidValueError(f"Integer {number} for key '{key}' does not fit in 64 bits", key=key)
        return StoredValue(kind, number)

    if kind is ValueKind.FLOAT:
        _require_number(key, value, kind)
        try:
            return StoredValue(kind, to_single_precision(float(value)))
        except (OverflowError, struct.error) as e:
            raise InvalidValueError(f"Value {value!r} for key '{key}' is out of single-precision range", key=key, cause=e) from e

    if kind is ValueKind.DOUBLE:
        _require_number(key, value, kind)
        return StoredValue(kind, float(value))

    if kind is ValueKind.BOOLEAN:
        _require_number(key, value, kind)
        return StoredValue(kind, bool(value))

    if kind is ValueKind.OBJECT:
        try:
            return StoredValue(kind, copy.deepcopy(value))
        except (TypeError, copy.Error) as e:
            raise InvalidValueError(
                f"Cannot store {type(value).__name__} as object for key '{key}'", key=key, cause=e
            ) from e

    if kind is ValueKind.CUSTOM_OBJECT:
        return StoredValue(kind, archive(key, value, codec))

    if kind is ValueKind.URL:
        url = canonical_url(value)
        if url is None:
            raise InvalidValueError(f"Value {value!r} for key '{key}' is not a valid URL", key=key)
        return StoredValue(kind, url)

    raise InvalidValueError(f"Unsupported value kind: {kind!r}", key=key)


def coerce(
    key: CacheKey,
    stored: Optional[StoredValue],
    kind: ValueKind,
    codec: ObjectCodec,
    default: Any = None,
) -> Any:
    """Turns a StoredValue (or its absence) into a value of the requested kind.

    Raises:
        ArchiveDecodeError: If a custom object is present but cannot be decoded.
    """
    if stored is None:
        return default if default is not None else zero_equivalent(kind)

    if not stored.matches(kind):
        logger.debug(f"Kind mismatch for key '{key}': stored {stored.kind.value}, requested {kind.value}")
        if kind.is_primitive:
            return zero_equivalent(kind)
        return default

    if kind is ValueKind.OBJECT:
        # Callers must not be able to mutate the cached copy in place
        return copy.deepcopy(stored.payload)

    if kind is ValueKind.CUSTOM_OBJECT:
        return unarchive(key, stored.payload, codec)

    if kind is ValueKind.URL:
        url = canonical_url(stored.payload)
        if url is None:
            logger.warning(f"Discarding malformed URL stored under key '{key}': {stored.payload!r}")
            return default
        return url

    return stored.payload
