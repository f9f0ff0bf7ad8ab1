"""Declarative comparison conditions.

A CompareCondition is a `left op right` filter that can be loaded from
configuration. The operator is validated when the model is built, so a bad
token surfaces as a pydantic ValidationError instead of an
InvalidOperatorError at evaluation time.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

from .compare import compare
from .operators import CompareOp


class CompareCondition(BaseModel):
    """Compare two dynamic values: left op right."""

    model_config = ConfigDict(frozen=True)

    op: CompareOp
    left: Any = None
    right: Any = None

    def evaluate(self) -> bool:
        return evaluate_compare(self)


def evaluate_compare(condition: CompareCondition) -> bool:
    """Evaluate left op right for a validated condition."""
    return compare(condition.op, condition.left, condition.right)
