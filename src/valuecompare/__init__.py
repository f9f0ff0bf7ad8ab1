"""Compare values of unknown type with an operator chosen at runtime."""

from .compare import (
    compare,
    equal_to,
    greater_or_equal,
    greater_than,
    less_or_equal,
    less_than,
    not_equal_to,
)
from .conditions import CompareCondition, evaluate_compare
from .errors import InvalidOperatorError
from .operators import OPERATORS, CompareOp, is_valid_operator
from .values import JSONNumber, ValueKind, classify, loads, to_float

__all__ = [
    "compare",
    "equal_to",
    "not_equal_to",
    "less_than",
    "greater_than",
    "less_or_equal",
    "greater_or_equal",
    "is_valid_operator",
    "OPERATORS",
    "CompareOp",
    "InvalidOperatorError",
    "JSONNumber",
    "ValueKind",
    "classify",
    "to_float",
    "loads",
    "CompareCondition",
    "evaluate_compare",
]
