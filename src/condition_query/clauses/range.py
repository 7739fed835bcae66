"""Range fields -> inclusive gte/lte bounds."""

from __future__ import annotations

from typing import Any

from ..exceptions import MalformedRangeError
from ..operators import PredicateOperator


def compile_range(field: str, val: Any) -> dict[str, Any]:
    # Date bounds must already be normalised by the caller.
    if not isinstance(val, (list, tuple)) or len(val) != 2:
        raise MalformedRangeError(field, val)
    lower, upper = val
    return {
        field: {
            PredicateOperator.GTE.value: lower,
            PredicateOperator.LTE.value: upper,
        }
    }
