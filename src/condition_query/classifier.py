"""FieldClassifier: pick the translation rule for a single condition."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class FieldCategory(str, Enum):
    """Translation rules, listed in classification priority order."""

    ADDRESS = "address"
    RANGE = "range"
    LIST_AND = "list_and"
    LIST_OR = "list_or"
    LIST = "list"
    SEARCH = "search"
    EQUALS = "equals"


def _frozen(names: Iterable[str] | None) -> frozenset[str]:
    return frozenset(names or ())


@dataclass(frozen=True)
class FieldCategorySets:
    """Per-request field name sets that drive classification.

    A name present in several sets is resolved by the priority order of
    :func:`classify`; overlaps are not rejected.
    """

    range_fields: frozenset[str] = field(default_factory=frozenset)
    list_or_fields: frozenset[str] = field(default_factory=frozenset)
    list_and_fields: frozenset[str] = field(default_factory=frozenset)
    address_fields: frozenset[str] = field(default_factory=frozenset)
    search_fields: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def of(
        cls,
        *,
        range_fields: Iterable[str] | None = None,
        list_or_fields: Iterable[str] | None = None,
        list_and_fields: Iterable[str] | None = None,
        address_fields: Iterable[str] | None = None,
        search_fields: Iterable[str] | None = None,
    ) -> FieldCategorySets:
        """Build from any iterables of field names (lists, sets, tuples)."""
        return cls(
            range_fields=_frozen(range_fields),
            list_or_fields=_frozen(list_or_fields),
            list_and_fields=_frozen(list_and_fields),
            address_fields=_frozen(address_fields),
            search_fields=_frozen(search_fields),
        )


EMPTY_CATEGORIES = FieldCategorySets()


def is_list_value(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def classify(name: str, value: Any, categories: FieldCategorySets) -> FieldCategory:
    """Return the rule for ``name``; the first matching rule wins."""
    if name in categories.address_fields:
        return FieldCategory.ADDRESS
    if is_list_value(value):
        if name in categories.range_fields:
            return FieldCategory.RANGE
        if name in categories.list_and_fields:
            return FieldCategory.LIST_AND
        if name in categories.list_or_fields:
            return FieldCategory.LIST_OR
        return FieldCategory.LIST
    if name in categories.search_fields:
        return FieldCategory.SEARCH
    return FieldCategory.EQUALS
