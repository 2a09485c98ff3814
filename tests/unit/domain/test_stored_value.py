import datetime

import pytest

from typedcache.domain.models.common import ValueKind
from typedcache.domain.models.stored_value import (
    StoredValue,
    is_plist_safe,
    payload_matches_kind,
    zero_equivalent,
)


@pytest.mark.parametrize("value", [
    b"bytes",
    "text",
    7,
    2.5,
    True,
    datetime.datetime(2020, 5, 17, 12, 0),
    [1, "two", [3.0]],
    ("a", "b"),
    {"nested": {"list": [1, {"deep": b"x"}]}},
])
def test_plist_safe_values(value):
    assert is_plist_safe(value) is True


@pytest.mark.parametrize("value", [
    None,
    object(),
    {1: "non-string key"},
    [1, {2, 3}],
    {"when": datetime.date(2020, 1, 1)},
])
def test_non_plist_values(value):
    assert is_plist_safe(value) is False


def test_record_round_trip():
    stored = StoredValue(ValueKind.URL, "https://example.com")
    assert stored.as_record() == ("url", "https://example.com")
    assert StoredValue.from_record(stored.as_record()) == stored


@pytest.mark.parametrize("record", [("nope", 1), ["integer", 1], ("integer",), "integer"])
def test_malformed_records_raise_value_error(record):
    with pytest.raises(ValueError):
        StoredValue.from_record(record)


def test_zero_equivalents():
    assert zero_equivalent(ValueKind.INTEGER) == 0
    assert zero_equivalent(ValueKind.BOOLEAN) is False
    assert zero_equivalent(ValueKind.DOUBLE) == 0.0
    assert zero_equivalent(ValueKind.OBJECT) is None
    assert zero_equivalent(ValueKind.URL) is None


@pytest.mark.parametrize("stored,expected", [
    (StoredValue(ValueKind.INTEGER, 5), True),
    (StoredValue(ValueKind.INTEGER, True), False),
    (StoredValue(ValueKind.INTEGER, 2 ** 63), False),
    (StoredValue(ValueKind.FLOAT, 1.0), True),
    (StoredValue(ValueKind.DOUBLE, 1), False),
    (StoredValue(ValueKind.BOOLEAN, 0), False),
    (StoredValue(ValueKind.OBJECT, {"k": object()}), False),
    (StoredValue(ValueKind.CUSTOM_OBJECT, b"\x00"), True),
    (StoredValue(ValueKind.CUSTOM_OBJECT, "text"), False),
    (StoredValue(ValueKind.URL, "https://example.com"), True),
])
def test_payload_matches_kind(stored, expected):
    assert payload_matches_kind(stored) is expected


def test_primitive_kinds():
    assert ValueKind.FLOAT.is_primitive
    assert not ValueKind.URL.is_primitive
