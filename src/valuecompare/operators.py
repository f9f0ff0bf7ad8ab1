"""Comparison operators for dynamic values."""

from __future__ import annotations

from enum import Enum
from typing import Any


class CompareOp(str, Enum):
    """Comparison operators, valued by their canonical token."""

    GT = ">"
    GTE = ">="
    LT = "<"
    LTE = "<="
    EQ = "=="
    NEQ = "!="


OPERATORS: tuple[str, ...] = tuple(op.value for op in CompareOp)


def lookup(operator: Any) -> CompareOp | None:
    """Return the CompareOp for a token, or None if it is not supported.

    Matching is exact and case-sensitive; there are no aliases, so "lt"
    and "le" are rejected like any other unknown token.
    """
    if isinstance(operator, CompareOp):
        return operator
    if not isinstance(operator, str):
        return None
    try:
        return CompareOp(operator)
    except ValueError:
        return None


def is_valid_operator(operator: Any) -> bool:
    """Check a token before handing it to compare()."""
    return lookup(operator) is not None
