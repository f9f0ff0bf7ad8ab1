"""Errors raised by valuecompare.

Only one thing can go wrong: asking for an operator that does not exist.
Value-level mismatches are results, not errors.
"""

from __future__ import annotations


class InvalidOperatorError(ValueError):
    """Raised when an operator token is not one of the supported relations."""

    def __init__(self, operator: object, valid_operators: tuple[str, ...]):
        self.operator = operator
        self.valid_operators = valid_operators
        joined = "','".join(valid_operators)
        super().__init__(
            f"Invalid operator! The parsed operator should be in ['{joined}'], "
            f"received ['{operator}']"
        )
