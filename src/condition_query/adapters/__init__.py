"""Data store adapters implementing IDataStoreClient."""

from __future__ import annotations

from .memory import InMemoryDataStore, matches
from .mongo import MongoConnectionManager, MongoDataStore, MongoPredicateCompiler

__all__ = [
    "InMemoryDataStore",
    "MongoConnectionManager",
    "MongoDataStore",
    "MongoPredicateCompiler",
    "matches",
]
