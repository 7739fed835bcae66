"""Clause compilers, one per field category."""

from __future__ import annotations

from .address import compile_address
from .lists import compile_list, compile_list_and, compile_list_or
from .range import compile_range
from .standard import compile_equals, compile_search

__all__ = [
    "compile_address",
    "compile_equals",
    "compile_list",
    "compile_list_and",
    "compile_list_or",
    "compile_range",
    "compile_search",
]
