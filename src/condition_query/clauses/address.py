"""Address fields -> OR-list of nested JSON path matches."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..operators import PredicateOperator

COUNTRY_KEY = "country"


def _strip_nulls(address: Mapping[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in address.items() if v is not None}


def compile_address(field: str, val: Any) -> list[dict[str, Any]]:
    """Compile a list of address filters into OR-able sub-predicates.

    An address carrying only ``country`` matches on that JSON path; any other
    address matches the whole stripped object. Empty addresses are skipped.
    """
    if isinstance(val, Mapping):
        val = [val]
    clauses: list[dict[str, Any]] = []
    for address in val or ():
        if not isinstance(address, Mapping):
            continue
        stripped = _strip_nulls(address)
        if not stripped:
            continue
        if stripped.keys() == {COUNTRY_KEY}:
            clauses.append(
                {
                    field: {
                        PredicateOperator.PATH.value: [COUNTRY_KEY],
                        PredicateOperator.EQUALS.value: stripped[COUNTRY_KEY],
                    }
                }
            )
        else:
            clauses.append({field: {PredicateOperator.EQUALS.value: stripped}})
    return clauses
