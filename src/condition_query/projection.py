"""FieldProjector: restrict a record to allowed fields."""

from __future__ import annotations

from collections.abc import Collection, Mapping
from typing import Any

from .dates import to_datetime


def project(
    obj: Mapping[str, Any],
    allowed_fields: Collection[str],
    date_fields: Collection[str] = (),
) -> dict[str, Any]:
    """Return a new dict holding only ``allowed_fields`` of ``obj``.

    ``None`` values are dropped. Values of ``date_fields`` are normalised with
    :func:`~condition_query.dates.to_datetime`; a date that does not normalise
    is dropped as well.
    """
    projected: dict[str, Any] = {}
    for key, value in obj.items():
        if key not in allowed_fields or value is None:
            continue
        if key in date_fields:
            value = to_datetime(value)
            if value is None:
                continue
        projected[key] = value
    return projected
