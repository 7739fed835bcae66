"""Exceptions raised by condition-query."""

from __future__ import annotations


class ConditionQueryError(Exception):
    """Root exception for the condition-query library."""


class ValidationError(ConditionQueryError):
    """Raised when caller input cannot be translated.

    Carries structured errors: ``{field: [messages]}``.
    """

    def __init__(self, errors: dict[str, list[str]] | str | None = None) -> None:
        if isinstance(errors, str):
            self.errors: dict[str, list[str]] = {"__root__": [errors]}
        elif errors is None:
            self.errors = {}
        else:
            self.errors = errors
        super().__init__(str(self.errors))


class MalformedRangeError(ValidationError):
    """Raised when a range field value is not a ``[lower, upper]`` pair."""

    def __init__(self, field: str, value: object) -> None:
        self.field = field
        self.value = value
        super().__init__(
            {field: [f"Expected a [lower, upper] pair, got {value!r}"]}
        )


class InvalidPaginationError(ValidationError):
    """Raised when page number or page size cannot produce a valid page."""


class FieldNotAllowedError(ValidationError):
    """Raised when a condition map uses keys outside the whitelist."""

    def __init__(self, fields: list[str]) -> None:
        self.fields = fields
        super().__init__({name: ["Field is not filterable"] for name in fields})


class StoreError(ConditionQueryError):
    """Base class for data store adapter failures."""


class MongoQueryError(StoreError):
    """Raised when a predicate cannot be compiled to a MongoDB filter."""
