"""Shared fixtures for condition-query tests."""

from __future__ import annotations

import pytest

from condition_query.adapters.memory import InMemoryDataStore
from condition_query.classifier import FieldCategorySets


@pytest.fixture
def categories() -> FieldCategorySets:
    """Category sets covering every translation rule."""
    return FieldCategorySets.of(
        range_fields=["createdAt", "salary"],
        list_or_fields=["tags"],
        list_and_fields=["skills"],
        address_fields=["location"],
        search_fields=["name"],
    )


@pytest.fixture
def companies() -> list[dict]:
    return [
        {
            "id": "c1",
            "name": "Acme Corp",
            "status": "active",
            "salary": 100,
            "tags": ["b2b", "saas"],
            "skills": ["python", "sql"],
            "location": {"city": "San Jose", "country": "US", "province": "CA"},
        },
        {
            "id": "c2",
            "name": "Globex",
            "status": "pending",
            "salary": 250,
            "tags": ["b2c"],
            "skills": ["python"],
            "location": {"city": "Toronto", "country": "CA", "province": "ON"},
        },
        {
            "id": "c3",
            "name": "Acme Labs",
            "status": "active",
            "salary": 400,
            "tags": ["saas"],
            "skills": ["go", "python", "sql"],
            "location": {"city": "Austin", "country": "US", "province": "TX"},
        },
    ]


@pytest.fixture
def store(companies: list[dict]) -> InMemoryDataStore:
    """Fresh in-memory store seeded with three companies."""
    return InMemoryDataStore(companies)
