"""Tests for field projection, key whitelisting and SQL helpers."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from condition_query.exceptions import FieldNotAllowedError
from condition_query.projection import project
from condition_query.sql import values_clause
from condition_query.whitelist import ConditionWhitelist, validate_keys


class TestProject:
    def test_keeps_only_allowed_fields(self) -> None:
        obj = {"name": "Acme", "secret": "x", "status": "active"}
        assert project(obj, ["name", "status"]) == {"name": "Acme", "status": "active"}

    def test_drops_none_values(self) -> None:
        assert project({"name": None, "status": "a"}, {"name", "status"}) == {
            "status": "a"
        }

    def test_normalises_date_fields(self) -> None:
        obj = {"createdAt": {"_seconds": 0}, "updatedAt": "2024-01-02T00:00:00Z"}
        result = project(obj, ["createdAt", "updatedAt"], ["createdAt", "updatedAt"])
        assert result == {
            "createdAt": datetime(1970, 1, 1, tzinfo=timezone.utc),
            "updatedAt": datetime(2024, 1, 2, tzinfo=timezone.utc),
        }

    def test_unparseable_date_is_dropped(self) -> None:
        assert project({"createdAt": "soon"}, ["createdAt"], ["createdAt"]) == {}

    def test_does_not_mutate_input(self) -> None:
        obj = {"createdAt": "2024-01-02", "other": 1}
        project(obj, ["createdAt"], ["createdAt"])
        assert obj == {"createdAt": "2024-01-02", "other": 1}


class TestValidateKeys:
    def test_allowed_keys_and_connectors(self) -> None:
        assert validate_keys({"name": "x", "AND": [{"name": "y"}]}, ["name"]) is True
        assert validate_keys({"OR": [], "NOT": {}}, []) is True

    def test_unapproved_key(self) -> None:
        assert validate_keys({"secret": 1}, ["name"]) is False

    def test_connectors_are_case_sensitive(self) -> None:
        assert validate_keys({"and": []}, ["name"]) is False

    def test_empty_conditions_are_valid(self) -> None:
        assert validate_keys({}, ["name"]) is True


class TestConditionWhitelist:
    def test_ensure_names_rejected_fields(self) -> None:
        whitelist = ConditionWhitelist(["name", "status"])
        with pytest.raises(FieldNotAllowedError) as exc_info:
            whitelist.ensure({"name": "x", "password": "p", "role": "admin"})
        assert exc_info.value.fields == ["password", "role"]

    def test_is_allowed(self) -> None:
        whitelist = ConditionWhitelist({"name"})
        assert whitelist.is_allowed({"name": "x", "OR": []})
        assert not whitelist.is_allowed({"role": "admin"})
        whitelist.ensure({"name": "x"})


@pytest.mark.parametrize(
    ("length", "expected"),
    [(3, "VALUES($1, $2, $3)"), (1, "VALUES($1)"), (0, ""), (-2, "")],
)
def test_values_clause(length, expected) -> None:
    assert values_clause(length) == expected
