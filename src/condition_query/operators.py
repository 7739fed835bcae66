from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any


class PredicateOperator(str, Enum):
    """Operator keys understood by the target predicate language."""

    EQUALS = "equals"
    IN = "in"
    HAS_SOME = "hasSome"
    HAS_EVERY = "hasEvery"
    GTE = "gte"
    LTE = "lte"
    CONTAINS = "contains"
    PATH = "path"

    # Logical connectors
    AND = "AND"
    OR = "OR"
    NOT = "NOT"


LOGICAL_CONNECTORS: frozenset[str] = frozenset(
    op.value
    for op in (PredicateOperator.AND, PredicateOperator.OR, PredicateOperator.NOT)
)

FIELD_OPERATORS: frozenset[str] = frozenset(
    op.value for op in PredicateOperator if op.value not in LOGICAL_CONNECTORS
)


def is_operator_clause(clause: Any) -> bool:
    """True if ``clause`` is an operator dict rather than a literal value.

    A mapping holding at least one operator key is an operator clause; a
    mapping with none of them is a literal (e.g. a JSON object compared with
    shorthand equality).
    """
    return isinstance(clause, Mapping) and not clause.keys().isdisjoint(
        FIELD_OPERATORS
    )


def unknown_operators(clause: Mapping[str, Any]) -> list[str]:
    """Return the keys of an operator clause that are not operators."""
    return [key for key in clause if key not in FIELD_OPERATORS]
