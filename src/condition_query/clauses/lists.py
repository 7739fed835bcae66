"""List fields -> hasEvery / hasSome / in."""

from __future__ import annotations

from typing import Any

from ..operators import PredicateOperator


def compile_list_and(field: str, val: Any) -> dict[str, Any]:
    """Array column must contain every value."""
    return {field: {PredicateOperator.HAS_EVERY.value: list(val)}}


def compile_list_or(field: str, val: Any) -> dict[str, Any]:
    """Array column must contain at least one value."""
    return {field: {PredicateOperator.HAS_SOME.value: list(val)}}


def compile_list(field: str, val: Any) -> dict[str, Any]:
    """Scalar column must equal one of the values."""
    return {field: {PredicateOperator.IN.value: list(val)}}
