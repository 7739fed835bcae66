"""Condition key whitelist."""

from __future__ import annotations

from collections.abc import Collection, Iterable, Mapping
from typing import Any

from .exceptions import FieldNotAllowedError
from .operators import LOGICAL_CONNECTORS


def rejected_keys(
    conditions: Mapping[str, Any], allowed_fields: Collection[str]
) -> list[str]:
    """Return top-level keys that are neither allowed nor logical connectors."""
    return [
        key
        for key in conditions
        if key not in allowed_fields and key not in LOGICAL_CONNECTORS
    ]


def validate_keys(
    conditions: Mapping[str, Any], allowed_fields: Collection[str]
) -> bool:
    """True if every top-level key is allowed or is ``AND``/``OR``/``NOT``."""
    return not rejected_keys(conditions, allowed_fields)


class ConditionWhitelist:
    """Per-resource set of filterable fields."""

    def __init__(self, filterable_fields: Iterable[str] | None = None) -> None:
        self.filterable_fields = frozenset(filterable_fields or ())

    def is_allowed(self, conditions: Mapping[str, Any]) -> bool:
        return validate_keys(conditions, self.filterable_fields)

    def ensure(self, conditions: Mapping[str, Any]) -> None:
        """Raise FieldNotAllowedError if any key is not filterable."""
        rejected = rejected_keys(conditions, self.filterable_fields)
        if rejected:
            raise FieldNotAllowedError(rejected)
