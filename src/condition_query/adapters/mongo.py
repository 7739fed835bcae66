"""MongoDB adapter: where predicate -> filter document, motor-backed store."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from ..exceptions import MongoQueryError, StoreError
from ..operators import PredicateOperator as Op
from ..operators import is_operator_clause

if TYPE_CHECKING:
    from collections.abc import Callable

    from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection


def _match_nothing() -> dict[str, Any]:
    return {"_id": {"$exists": False}}


_OPERATOR_MAP = {
    Op.EQUALS.value: "$eq",
    Op.IN.value: "$in",
    Op.HAS_SOME.value: "$in",
    Op.HAS_EVERY.value: "$all",
    Op.GTE.value: "$gte",
    Op.LTE.value: "$lte",
}


def _as_list(val: Any) -> list[Any]:
    return list(val) if isinstance(val, (list, tuple)) else [val]


def _compile_field(field: str, clause: Any) -> dict[str, Any]:
    """Compile one ``{field: clause}`` entry to a MongoDB query document.

    An object passed to ``equals`` compiles to embedded-document equality: the
    stored object must hold exactly those keys, in the same order.
    """
    if not is_operator_clause(clause):
        return {field: clause}
    path = clause.get(Op.PATH.value)
    target = ".".join([field, *path]) if path else field
    compiled: dict[str, Any] = {}
    for op, val in clause.items():
        if op == Op.PATH.value:
            continue
        if op == Op.CONTAINS.value:
            compiled["$regex"] = re.escape(str(val))
        elif op in (Op.IN.value, Op.HAS_SOME.value, Op.HAS_EVERY.value):
            compiled[_OPERATOR_MAP[op]] = _as_list(val)
        elif op in _OPERATOR_MAP:
            compiled[_OPERATOR_MAP[op]] = val
        else:
            raise MongoQueryError(f"Unsupported operator {op!r} on {field!r}")
    return {target: compiled}


def _merge(parts: list[dict[str, Any]]) -> dict[str, Any]:
    merged: dict[str, Any] = {}
    for part in parts:
        if part.keys() & merged.keys():
            return {"$and": parts}
        merged.update(part)
    return merged


class MongoPredicateCompiler:
    """Compiles Prisma-style where predicates to MongoDB filter documents."""

    def build_match(self, where: Mapping[str, Any] | None) -> dict[str, Any]:
        if where is None:
            return {}
        if not isinstance(where, Mapping):
            raise MongoQueryError("where predicate must be a mapping")
        parts: list[dict[str, Any]] = []
        for key, clause in where.items():
            if key == Op.OR.value:
                subs = [self.build_match(s) for s in _as_list(clause)]
                parts.append({"$or": subs} if subs else _match_nothing())
            elif key == Op.AND.value:
                subs = [self.build_match(s) for s in _as_list(clause)]
                if subs:
                    parts.append({"$and": subs})
            elif key == Op.NOT.value:
                subs = [self.build_match(s) for s in _as_list(clause)]
                if subs:
                    parts.append({"$nor": subs})
            else:
                parts.append(_compile_field(key, clause))
        return _merge(parts)

    def build_sort(self, order_by: Any) -> list[tuple[str, int]]:
        """Build MongoDB sort tuples.

        Accepts ``{field: "asc"|"desc"}``, a list of those, or
        ``["-field", "field"]``.
        """
        if not order_by:
            return []
        result: list[tuple[str, int]] = []
        for item in _as_list(order_by):
            if isinstance(item, Mapping):
                for field, direction in item.items():
                    result.append(
                        (field, -1 if str(direction).lower() == "desc" else 1)
                    )
            elif isinstance(item, str):
                if item.startswith("-"):
                    result.append((item[1:], -1))
                else:
                    result.append((item, 1))
        return result


def _strip_object_id(doc: Mapping[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in doc.items() if k != "_id"}


class MongoConnectionManager:
    """Lazily (re)creates a motor client; ``close`` is idempotent.

    After ``close`` the next ``connect`` opens a fresh client, so a store can
    be released after every mutation and still serve later calls.
    """

    def __init__(
        self,
        url: str = "mongodb://localhost:27017",
        *,
        client_factory: Callable[[], AsyncIOMotorClient[Any]] | None = None,
        server_selection_timeout_ms: int = 5000,
        **kwargs: Any,
    ) -> None:
        self._url = url
        self._client_factory = client_factory
        self._server_selection_timeout_ms = server_selection_timeout_ms
        self._kwargs = kwargs
        self._client: AsyncIOMotorClient[Any] | None = None

    @property
    def is_connected(self) -> bool:
        return self._client is not None

    def _create_client(self) -> AsyncIOMotorClient[Any]:
        if self._client_factory is not None:
            return self._client_factory()
        try:
            from motor.motor_asyncio import AsyncIOMotorClient
        except ImportError as e:
            raise StoreError("motor is required; install with motor>=3.3.0") from e
        try:
            return AsyncIOMotorClient(
                self._url,
                serverSelectionTimeoutMS=self._server_selection_timeout_ms,
                **self._kwargs,
            )
        except Exception as e:
            raise StoreError(str(e)) from e

    def connect(self) -> AsyncIOMotorClient[Any]:
        """Return the cached client, creating one if needed."""
        if self._client is None:
            self._client = self._create_client()
        return self._client

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None


class MongoDataStore:
    """``IDataStoreClient`` over one MongoDB collection.

    The collection is resolved from ``connection`` on every call; ``release``
    closes the client and the next call reconnects.
    """

    def __init__(
        self,
        connection: MongoConnectionManager,
        database: str,
        collection: str,
        *,
        compiler: MongoPredicateCompiler | None = None,
        id_field: str = "id",
    ) -> None:
        self._connection = connection
        self._database = database
        self._collection_name = collection
        self._compiler = compiler or MongoPredicateCompiler()
        self._id_field = id_field

    def _collection(self) -> AsyncIOMotorCollection[Any]:
        return (
            self._connection.connect()
            .get_database(self._database)
            .get_collection(self._collection_name)
        )

    async def find_many(
        self,
        where: dict[str, Any],
        order_by: Any = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[dict[str, Any]]:
        cursor = self._collection().find(
            self._compiler.build_match(where),
            sort=self._compiler.build_sort(order_by) or None,
            skip=offset or 0,
            limit=limit or 0,
        )
        return [_strip_object_id(doc) async for doc in cursor]

    async def count(self, where: dict[str, Any]) -> int:
        return int(
            await self._collection().count_documents(
                self._compiler.build_match(where)
            )
        )

    async def create(self, data: dict[str, Any]) -> dict[str, Any]:
        doc = dict(data)
        await self._collection().insert_one(doc)
        return _strip_object_id(doc)

    async def create_many(self, data_list: list[dict[str, Any]]) -> None:
        if data_list:
            await self._collection().insert_many([dict(d) for d in data_list])

    async def delete(self, record_id: Any) -> None:
        await self._collection().delete_one({self._id_field: record_id})

    async def update_many(self, where: dict[str, Any], data: dict[str, Any]) -> None:
        await self._collection().update_many(
            self._compiler.build_match(where), {"$set": data}
        )

    async def release(self) -> None:
        self._connection.close()
