"""Tests for InMemoryDataStore and predicate evaluation."""

from __future__ import annotations

import pytest

from condition_query.adapters.memory import InMemoryDataStore, matches
from condition_query.exceptions import StoreError
from condition_query.ports import IDataStoreClient

RECORD = {
    "id": "r1",
    "name": "Acme Corp",
    "salary": 100,
    "tags": ["b2b", "saas"],
    "location": {"city": "San Jose", "country": "US"},
    "closedAt": None,
}


class TestMatches:
    @pytest.mark.parametrize(
        "where",
        [
            {},
            {"name": {"equals": "Acme Corp"}},
            {"name": "Acme Corp"},
            {"name": {"contains": "Corp"}},
            {"salary": {"gte": 100, "lte": 200}},
            {"salary": {"in": [50, 100]}},
            {"tags": {"hasSome": ["saas", "x"]}},
            {"tags": {"hasEvery": ["saas", "b2b"]}},
            {"location": {"path": ["country"], "equals": "US"}},
            {"location": {"equals": {"city": "San Jose", "country": "US"}}},
            {"OR": [{"name": {"equals": "nope"}}, {"salary": {"equals": 100}}]},
            {"AND": [{"salary": {"gte": 1}}, {"name": {"contains": "Acme"}}]},
            {"AND": []},
            {"NOT": {"name": {"equals": "Globex"}}},
        ],
    )
    def test_matching_predicates(self, where) -> None:
        assert matches(RECORD, where) is True

    @pytest.mark.parametrize(
        "where",
        [
            {"name": {"equals": "Globex"}},
            {"name": {"contains": "corp"}},
            {"salary": {"gte": 101}},
            {"salary": {"lte": "abc"}},
            {"closedAt": {"gte": 0}},
            {"tags": {"hasEvery": ["saas", "b2c"]}},
            {"tags": {"hasSome": ["b2c"]}},
            {"location": {"path": ["country"], "equals": "CA"}},
            {"location": {"equals": {"country": "US"}}},
            {"OR": []},
            {"NOT": [{"salary": {"equals": 100}}]},
            {"missing": {"equals": 1}},
        ],
    )
    def test_non_matching_predicates(self, where) -> None:
        assert matches(RECORD, where) is False

    @pytest.mark.parametrize(
        "clause",
        [
            {"equals": "Acme Corp", "startsWith": "Acme"},
            {"contains": "Acme", "mode": "insensitive"},
        ],
    )
    def test_unknown_operator_keys_raise(self, clause) -> None:
        with pytest.raises(StoreError, match="Unsupported operators"):
            matches(RECORD, {"name": clause})

    def test_dict_without_operator_keys_is_literal(self) -> None:
        assert matches({"meta": {"kind": "x"}}, {"meta": {"kind": "x"}}) is True
        assert matches({"meta": {"kind": "y"}}, {"meta": {"kind": "x"}}) is False


@pytest.mark.asyncio
class TestInMemoryDataStore:
    async def test_satisfies_protocol(self, store) -> None:
        assert isinstance(store, IDataStoreClient)

    async def test_find_many_sorts_skips_and_limits(self, store) -> None:
        rows = await store.find_many({}, order_by={"salary": "desc"}, limit=2, offset=1)
        assert [r["id"] for r in rows] == ["c2", "c1"]

    async def test_find_many_multi_key_order(self, store) -> None:
        rows = await store.find_many(
            {}, order_by=[{"status": "asc"}, {"salary": "desc"}]
        )
        assert [r["id"] for r in rows] == ["c3", "c1", "c2"]

    async def test_results_are_copies(self, store) -> None:
        rows = await store.find_many({"id": "c1"})
        rows[0]["tags"].append("mutated")
        again = await store.find_many({"id": "c1"})
        assert again[0]["tags"] == ["b2b", "saas"]

    async def test_create_assigns_id(self) -> None:
        store = InMemoryDataStore()
        record = await store.create({"name": "x"})
        assert record["id"]
        assert await store.count({"id": record["id"]}) == 1

    async def test_delete_missing_raises(self, store) -> None:
        with pytest.raises(KeyError):
            await store.delete("nope")

    async def test_update_many(self, store) -> None:
        await store.update_many({"status": {"equals": "active"}}, {"status": "done"})
        assert await store.count({"status": "done"}) == 2
