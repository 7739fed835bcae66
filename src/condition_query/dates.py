"""DateTimeNormalizer: coerce loosely typed date inputs to UTC datetimes."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

SECONDS_KEY = "_seconds"


def _parse_iso(text: str) -> datetime | None:
    candidate = text.strip()
    if candidate.endswith(("Z", "z")):
        candidate = candidate[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(candidate)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def _epoch_seconds(value: Any) -> Any:
    if isinstance(value, Mapping):
        return value.get(SECONDS_KEY)
    return getattr(value, SECONDS_KEY, None)


def to_datetime(value: Any) -> datetime | None:
    """Normalise ``value`` to an aware UTC datetime, or ``None``.

    Accepts ISO-8601 strings (``Z`` suffix and date-only forms included;
    naive values are taken as UTC) and timestamp-like objects exposing a
    numeric ``_seconds`` field, either as a mapping key or an attribute.
    Anything else yields ``None``; this function never raises.
    """
    if isinstance(value, str):
        return _parse_iso(value)
    if value is None:
        return None
    seconds = _epoch_seconds(value)
    if isinstance(seconds, bool) or not isinstance(seconds, (int, float)):
        return None
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None
