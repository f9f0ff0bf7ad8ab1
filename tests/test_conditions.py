"""Tests for CompareCondition model parsing and evaluation."""

import pytest
from pydantic import ValidationError

from valuecompare import CompareCondition, CompareOp, JSONNumber, evaluate_compare, loads


class TestCompareConditionParsing:
    """Operators are validated when the condition is built."""

    def test_parses_token(self):
        condition = CompareCondition.model_validate({"op": ">=", "left": 3, "right": 2})

        assert condition.op is CompareOp.GTE
        assert condition.left == 3
        assert condition.right == 2

    def test_rejects_unknown_operator(self):
        with pytest.raises(ValidationError):
            CompareCondition.model_validate({"op": "<<", "left": 1, "right": 2})

    def test_rejects_alias(self):
        with pytest.raises(ValidationError):
            CompareCondition(op="lt", left=1, right=2)

    def test_missing_operands_default_to_none(self):
        condition = CompareCondition(op="==")
        assert condition.left is None and condition.right is None

    def test_is_frozen(self):
        condition = CompareCondition(op="==", left=1, right=1)
        with pytest.raises(ValidationError):
            condition.op = CompareOp.NEQ

    def test_keeps_deferred_numbers(self):
        condition = CompareCondition.model_validate(loads('{"op": "<", "left": 1.25, "right": 2}'))
        assert isinstance(condition.left, JSONNumber)


class TestEvaluateCompare:
    """Conditions evaluate through compare()."""

    @pytest.mark.parametrize(
        "data, expected",
        [
            ({"op": "<", "left": 3, "right": 4}, True),
            ({"op": ">=", "left": 1, "right": 2}, False),
            ({"op": "==", "left": None, "right": None}, True),
            ({"op": "==", "left": "5", "right": 5}, False),
            ({"op": "!=", "left": "5", "right": 5}, True),
            ({"op": "<", "left": True, "right": False}, False),
        ],
    )
    def test_evaluate(self, data, expected):
        condition = CompareCondition.model_validate(data)
        assert evaluate_compare(condition) is expected
        assert condition.evaluate() is expected

    def test_evaluate_decoded_condition(self):
        condition = CompareCondition.model_validate(loads('{"op": "==", "left": 5, "right": 5.0}'))
        assert condition.evaluate() is True
