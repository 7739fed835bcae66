"""ConditionTranslator: flat condition map -> Prisma-style where predicate."""

from __future__ import annotations

import copy
import logging
from typing import TYPE_CHECKING, Any

from .classifier import EMPTY_CATEGORIES, FieldCategory, FieldCategorySets, classify
from .clauses import (
    compile_address,
    compile_equals,
    compile_list,
    compile_list_and,
    compile_list_or,
    compile_range,
    compile_search,
)
from .operators import LOGICAL_CONNECTORS, PredicateOperator

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

logger = logging.getLogger("condition_query.translator")

_COMPILERS: dict[FieldCategory, Callable[[str, Any], dict[str, Any]]] = {
    FieldCategory.RANGE: compile_range,
    FieldCategory.LIST_AND: compile_list_and,
    FieldCategory.LIST_OR: compile_list_or,
    FieldCategory.LIST: compile_list,
    FieldCategory.SEARCH: compile_search,
    FieldCategory.EQUALS: compile_equals,
}

OR_KEY = PredicateOperator.OR.value


class ConditionTranslator:
    """Stateless translator; every call takes all of its inputs."""

    def translate(
        self,
        conditions: Mapping[str, Any] | None,
        categories: FieldCategorySets | None = None,
    ) -> dict[str, Any]:
        """Translate ``conditions`` into a where predicate.

        Entries are ANDed at top level. Address fields populate the single
        ``OR`` list. The logical connectors ``AND``, ``OR`` and ``NOT`` are
        copied through untouched as sub-predicates. Only one entry owns
        ``OR``: a later address field or caller-supplied ``OR`` replaces an
        earlier one, with a warning.

        Raises:
            MalformedRangeError: a range field value is not a 2-element pair.
        """
        categories = categories or EMPTY_CATEGORIES
        where: dict[str, Any] = {}
        or_owner: str | None = None
        for name, value in (conditions or {}).items():
            if name in LOGICAL_CONNECTORS:
                key, clause = name, copy.deepcopy(value)
            else:
                category = classify(name, value, categories)
                if category is not FieldCategory.ADDRESS:
                    where.update(_COMPILERS[category](name, value))
                    continue
                key, clause = OR_KEY, compile_address(name, value)
            if key == OR_KEY:
                if or_owner is not None:
                    logger.warning(
                        "%r replaces OR clauses built for %r", name, or_owner
                    )
                or_owner = name
            where[key] = clause
        logger.debug("Built where predicate with keys %s", list(where))
        return where


_default_translator = ConditionTranslator()


def build_where(
    conditions: Mapping[str, Any] | None,
    categories: FieldCategorySets | None = None,
) -> dict[str, Any]:
    """Module-level shortcut for :meth:`ConditionTranslator.translate`."""
    return _default_translator.translate(conditions, categories)
