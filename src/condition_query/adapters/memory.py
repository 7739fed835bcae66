"""InMemoryDataStore: list-backed fake that evaluates where predicates."""

from __future__ import annotations

import copy
import uuid
from collections.abc import Mapping
from typing import Any

from ..exceptions import StoreError
from ..operators import PredicateOperator as Op
from ..operators import is_operator_clause, unknown_operators


def _resolve_path(value: Any, path: list[str]) -> Any:
    for part in path:
        if not isinstance(value, Mapping):
            return None
        value = value.get(part)
    return value


def _as_list(value: Any) -> list[Any]:
    if isinstance(value, (list, tuple, set, frozenset)):
        return list(value)
    return [value]


def _compare(value: Any, bound: Any, op: str) -> bool:
    if value is None:
        return False
    try:
        return bool(value >= bound) if op == Op.GTE.value else bool(value <= bound)
    except TypeError:
        return False


def _evaluate_clause(value: Any, clause: Any) -> bool:
    if not is_operator_clause(clause):
        return value == clause
    unknown = unknown_operators(clause)
    if unknown:
        raise StoreError(f"Unsupported operators {unknown!r} in {dict(clause)!r}")
    if Op.PATH.value in clause:
        value = _resolve_path(value, list(clause[Op.PATH.value]))
    for op, expected in clause.items():
        if op == Op.PATH.value:
            continue
        if op == Op.EQUALS.value:
            ok = value == expected
        elif op == Op.IN.value:
            ok = value in _as_list(expected)
        elif op == Op.HAS_SOME.value:
            ok = value is not None and any(v in _as_list(value) for v in expected)
        elif op == Op.HAS_EVERY.value:
            ok = value is not None and all(v in _as_list(value) for v in expected)
        elif op in (Op.GTE.value, Op.LTE.value):
            ok = _compare(value, expected, op)
        else:
            ok = isinstance(value, str) and str(expected) in value
        if not ok:
            return False
    return True


def _sub_predicates(value: Any) -> list[Mapping[str, Any]]:
    return list(value) if isinstance(value, (list, tuple)) else [value]


def matches(record: Mapping[str, Any], where: Mapping[str, Any]) -> bool:
    """Evaluate a where predicate against a single record.

    ``OR`` with an empty list matches nothing; ``AND`` with an empty list
    matches everything.
    """
    for key, clause in where.items():
        if key == Op.OR.value:
            if not any(matches(record, sub) for sub in _sub_predicates(clause)):
                return False
        elif key == Op.AND.value:
            if not all(matches(record, sub) for sub in _sub_predicates(clause)):
                return False
        elif key == Op.NOT.value:
            if any(matches(record, sub) for sub in _sub_predicates(clause)):
                return False
        elif not _evaluate_clause(record.get(key), clause):
            return False
    return True


def _sort_keys(order_by: Any) -> list[tuple[str, bool]]:
    if not order_by:
        return []
    keys: list[tuple[str, bool]] = []
    for item in _sub_predicates(order_by):
        for field, direction in item.items():
            keys.append((field, str(direction).lower() == "desc"))
    return keys


class InMemoryDataStore:
    """In-memory implementation of ``IDataStoreClient``.

    Records are plain dicts; callers receive copies, never the stored dicts.
    """

    def __init__(
        self, records: list[dict[str, Any]] | None = None, *, id_field: str = "id"
    ) -> None:
        self._id_field = id_field
        self._records: list[dict[str, Any]] = [dict(r) for r in records or ()]
        self.release_count = 0

    def __len__(self) -> int:
        return len(self._records)

    def _select(self, where: Mapping[str, Any]) -> list[dict[str, Any]]:
        return [r for r in self._records if matches(r, where)]

    async def find_many(
        self,
        where: dict[str, Any],
        order_by: Any = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[dict[str, Any]]:
        rows = self._select(where)
        for field, descending in reversed(_sort_keys(order_by)):
            rows.sort(
                key=lambda r, f=field: (r.get(f) is None, r.get(f)),
                reverse=descending,
            )
        start = offset or 0
        end = start + limit if limit is not None else None
        return copy.deepcopy(rows[start:end])

    async def count(self, where: dict[str, Any]) -> int:
        return len(self._select(where))

    async def create(self, data: dict[str, Any]) -> dict[str, Any]:
        record = copy.deepcopy(data)
        record.setdefault(self._id_field, uuid.uuid4().hex)
        self._records.append(record)
        return copy.deepcopy(record)

    async def create_many(self, data_list: list[dict[str, Any]]) -> None:
        for data in data_list:
            await self.create(data)

    async def delete(self, record_id: Any) -> None:
        for index, record in enumerate(self._records):
            if record.get(self._id_field) == record_id:
                del self._records[index]
                return
        raise KeyError(record_id)

    async def update_many(self, where: dict[str, Any], data: dict[str, Any]) -> None:
        for record in self._select(where):
            record.update(copy.deepcopy(data))

    async def release(self) -> None:
        self.release_count += 1
