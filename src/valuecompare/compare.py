"""Compare two dynamic values with an operator chosen at runtime.

Example:
    >>> compare(">=", 1, 2)
    False
    >>> compare("<", 3, JSONNumber("4"))
    True
    >>> compare("<<", 3, 4)
    Traceback (most recent call last):
        ...
    valuecompare.errors.InvalidOperatorError: Invalid operator! ...

Values of different kinds never satisfy a relation, so they compare False
under every operator except "!=", which is always the negation of "==".
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from .errors import InvalidOperatorError
from .operators import OPERATORS, CompareOp, lookup
from .values import ValueKind, classify, to_float

logger = logging.getLogger(__name__)

# "!=" is derived from "==" in not_equal_to
_RELATIONS: dict[CompareOp, Callable[[Any, Any], bool]] = {
    CompareOp.EQ: lambda left_val, right_val: left_val == right_val,
    CompareOp.LT: lambda left_val, right_val: left_val < right_val,
    CompareOp.GT: lambda left_val, right_val: left_val > right_val,
    CompareOp.LTE: lambda left_val, right_val: left_val <= right_val,
    CompareOp.GTE: lambda left_val, right_val: left_val >= right_val,
}


def _is_compare_true(op: CompareOp, left: Any, right: Any) -> bool:
    left_kind = classify(left)
    right_kind = classify(right)

    if left_kind is ValueKind.NULL and right_kind is ValueKind.NULL:
        return op is CompareOp.EQ

    if left_kind.is_numeric and right_kind.is_numeric:
        left_val = to_float(left)
        right_val = to_float(right)
        if left_val is None or right_val is None:
            return False
        return _RELATIONS[op](left_val, right_val)

    if left_kind is ValueKind.STRING and right_kind is ValueKind.STRING:
        return _RELATIONS[op](left, right)

    if left_kind is ValueKind.BOOLEAN and right_kind is ValueKind.BOOLEAN:
        # Booleans have no ordering
        return op is CompareOp.EQ and left == right

    logger.debug(f"No {op.value!r} relation between {left_kind.value} and {right_kind.value}")
    return False


def equal_to(left: Any, right: Any) -> bool:
    """Check if values are equal to each other."""
    return _is_compare_true(CompareOp.EQ, left, right)


def not_equal_to(left: Any, right: Any) -> bool:
    """Negation of equal_to, including for values of different kinds."""
    return not equal_to(left, right)


def less_than(left: Any, right: Any) -> bool:
    """For '<', check if left is less than right."""
    return _is_compare_true(CompareOp.LT, left, right)


def greater_than(left: Any, right: Any) -> bool:
    """For '>', check if left is greater than right."""
    return _is_compare_true(CompareOp.GT, left, right)


def less_or_equal(left: Any, right: Any) -> bool:
    """For '<=', check if left is less than or equal to right."""
    return _is_compare_true(CompareOp.LTE, left, right)


def greater_or_equal(left: Any, right: Any) -> bool:
    """For '>=', check if left is greater than or equal to right."""
    return _is_compare_true(CompareOp.GTE, left, right)


PREDICATES: dict[CompareOp, Callable[[Any, Any], bool]] = {
    CompareOp.GT: greater_than,
    CompareOp.GTE: greater_or_equal,
    CompareOp.LT: less_than,
    CompareOp.LTE: less_or_equal,
    CompareOp.EQ: equal_to,
    CompareOp.NEQ: not_equal_to,
}


def compare(operator: str | CompareOp, left: Any, right: Any) -> bool:
    """Compare left and right using the given operator token.

    Args:
        operator: One of ">", ">=", "<", "<=", "==", "!=" (or a CompareOp)
        left: Left-hand dynamic value
        right: Right-hand dynamic value

    Returns:
        True if `left <operator> right` holds

    Raises:
        InvalidOperatorError: operator is not a supported token. This is a
            programmer error; check with is_valid_operator() first when the
            token comes from untrusted input.
    """
    op = lookup(operator)
    if op is None:
        logger.error(f"Invalid comparison operator: {operator!r}")
        raise InvalidOperatorError(operator, OPERATORS)
    return PREDICATES[op](left, right)
