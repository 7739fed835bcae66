"""Positional placeholder helpers for raw SQL inserts."""

from __future__ import annotations


def values_clause(length: int) -> str:
    """Return ``VALUES($1, $2, ...)`` with ``length`` placeholders.

    Returns an empty string when ``length`` is zero or negative.
    """
    if length <= 0:
        return ""
    placeholders = ", ".join(f"${index}" for index in range(1, length + 1))
    return f"VALUES({placeholders})"
