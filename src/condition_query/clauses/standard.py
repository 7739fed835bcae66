"""Scalar fields -> equals / contains."""

from __future__ import annotations

from typing import Any

from ..operators import PredicateOperator


def compile_equals(field: str, val: Any) -> dict[str, Any]:
    return {field: {PredicateOperator.EQUALS.value: val}}


def compile_search(field: str, val: Any) -> dict[str, Any]:
    return {field: {PredicateOperator.CONTAINS.value: val}}
