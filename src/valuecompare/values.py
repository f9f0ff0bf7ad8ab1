"""Dynamic value classification and numeric coercion.

Values arriving from loosely typed sources are sorted into a small set of
kinds before they are compared. Numbers can show up in two forms: as native
Python numbers, or as a JSONNumber, the untouched text of a JSON number that
a decoder handed over without converting it. Both are coerced to float only
when a comparison needs them.
"""

from __future__ import annotations

import json
import logging
import math
import numbers
import re
from decimal import Decimal
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)

# Number text accepted by strconv.ParseFloat(s, 64)
_DECIMAL_LITERAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_HEX_LITERAL = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+"
)
# A sign is allowed on infinity but not on nan
_SPECIAL_LITERAL = re.compile(r"[+-]?inf(?:inity)?|nan", re.IGNORECASE)


class ValueKind(str, Enum):
    """Kinds a dynamic value can be classified as."""

    NULL = "null"
    BOOLEAN = "boolean"
    STRING = "string"
    NUMBER = "number"
    DEFERRED_NUMBER = "deferred_number"
    OTHER = "other"

    @property
    def is_numeric(self) -> bool:
        """Whether values of this kind take part in numeric comparison."""
        return self in (ValueKind.NUMBER, ValueKind.DEFERRED_NUMBER)


class JSONNumber(str):
    """A number kept in its textual form until it is needed.

    Produced by loads() for every JSON number so that no precision is lost at
    decode time. It is a str subclass, but the comparator treats it as a
    number, never as a string.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return f"JSONNumber({str(self)!r})"

    def as_float(self) -> float:
        """Parse the text as a 64-bit float.

        Accepts the same text as Go's strconv.ParseFloat: ASCII only, no
        surrounding whitespace or underscores, decimal or hex ("0x1p4")
        mantissas, and the inf/infinity/nan literals. Raises ValueError for
        anything else, or if the value is too large for a float ("1e400").
        """
        text = str(self)
        if _SPECIAL_LITERAL.fullmatch(text):
            return float(text)
        if _HEX_LITERAL.fullmatch(text):
            try:
                return float.fromhex(text)
            except OverflowError:
                raise ValueError(f"number out of float range: {text!r}") from None
        if not _DECIMAL_LITERAL.fullmatch(text):
            raise ValueError(f"invalid number literal: {text!r}")
        value = float(text)
        if math.isinf(value):
            raise ValueError(f"number out of float range: {text!r}")
        return value

    def as_int(self) -> int:
        """Parse the text as an exact integer. Raises ValueError otherwise."""
        return int(str(self))


def classify(value: Any) -> ValueKind:
    """Classify a dynamic value.

    bool is checked before the numeric kinds because it subclasses int, and
    JSONNumber before STRING because it subclasses str.
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, JSONNumber):
        return ValueKind.DEFERRED_NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (numbers.Real, Decimal)):
        return ValueKind.NUMBER
    return ValueKind.OTHER


def to_float(value: Any) -> float | None:
    """Coerce a numeric value to float.

    Returns None when the value is not numeric or cannot be represented as a
    float (unparsable JSONNumber text, an int too large for a float).
    """
    kind = classify(value)
    if kind is ValueKind.DEFERRED_NUMBER:
        try:
            return value.as_float()
        except ValueError as e:
            logger.debug(f"Deferred number is not numeric: {e}")
            return None
    if kind is ValueKind.NUMBER:
        try:
            return float(value)
        except (OverflowError, ValueError, TypeError) as e:
            logger.debug(f"Cannot coerce {type(value).__name__} to float: {e}")
            return None
    return None


def loads(text: str | bytes, **kwargs: Any) -> Any:
    """Decode JSON, keeping every number as a JSONNumber.

    Keyword arguments are passed through to json.loads.
    """
    return json.loads(text, parse_int=JSONNumber, parse_float=JSONNumber, **kwargs)
