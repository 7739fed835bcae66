"""Condition translation, pagination and result shaping for data stores."""

from __future__ import annotations

from .classifier import FieldCategory, FieldCategorySets, classify
from .dates import to_datetime
from .exceptions import (
    ConditionQueryError,
    FieldNotAllowedError,
    InvalidPaginationError,
    MalformedRangeError,
    MongoQueryError,
    StoreError,
    ValidationError,
)
from .operators import LOGICAL_CONNECTORS, PredicateOperator
from .pagination import (
    DEFAULT_PAGE_NUMBER,
    DEFAULT_PAGE_SIZE,
    Pagination,
    get_pagination,
    total_pages,
)
from .ports import IDataStoreClient
from .projection import project
from .result import MutationResult, QueryResult, assemble
from .service import DataStoreService, released
from .sql import values_clause
from .translator import ConditionTranslator, build_where
from .whitelist import ConditionWhitelist, validate_keys

__all__ = [
    "DEFAULT_PAGE_NUMBER",
    "DEFAULT_PAGE_SIZE",
    "LOGICAL_CONNECTORS",
    "ConditionQueryError",
    "ConditionTranslator",
    "ConditionWhitelist",
    "DataStoreService",
    "FieldCategory",
    "FieldCategorySets",
    "FieldNotAllowedError",
    "IDataStoreClient",
    "InvalidPaginationError",
    "MalformedRangeError",
    "MongoQueryError",
    "MutationResult",
    "Pagination",
    "PredicateOperator",
    "QueryResult",
    "StoreError",
    "ValidationError",
    "assemble",
    "build_where",
    "classify",
    "get_pagination",
    "project",
    "released",
    "to_datetime",
    "total_pages",
    "validate_keys",
    "values_clause",
]
