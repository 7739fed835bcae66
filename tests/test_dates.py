"""Tests for to_datetime."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest

from condition_query.dates import to_datetime


def test_iso_string_with_z_suffix() -> None:
    assert to_datetime("1969-07-20T20:18:04.000Z") == datetime(
        1969, 7, 20, 20, 18, 4, tzinfo=timezone.utc
    )


def test_iso_string_with_offset_is_converted_to_utc() -> None:
    result = to_datetime("2024-03-01T10:00:00+02:00")
    assert result == datetime(2024, 3, 1, 8, 0, tzinfo=timezone.utc)
    assert result.utcoffset() == timedelta(0)


def test_date_only_string_is_midnight_utc() -> None:
    assert to_datetime("2024-03-01") == datetime(2024, 3, 1, tzinfo=timezone.utc)


def test_seconds_mapping() -> None:
    assert to_datetime({"_seconds": 100}) == datetime(
        1970, 1, 1, 0, 1, 40, tzinfo=timezone.utc
    )


def test_seconds_attribute() -> None:
    stamp = SimpleNamespace(_seconds=1_700_000_000, _nanoseconds=0)
    assert to_datetime(stamp) == datetime.fromtimestamp(
        1_700_000_000, tz=timezone.utc
    )


@pytest.mark.parametrize(
    "value",
    [
        "not-a-date",
        "",
        None,
        42,
        {"seconds": 1},
        {"_seconds": "100"},
        {"_seconds": True},
        ["2024-01-01"],
    ],
)
def test_unrecognised_input_returns_none(value) -> None:
    assert to_datetime(value) is None
