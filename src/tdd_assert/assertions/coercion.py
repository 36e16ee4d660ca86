"""Loose and strict equality over a closed set of value kinds.

Loose equality follows the classic type-coercing comparison used by
TDD-style assertion libraries:

* values of the same kind compare strictly;
* ``None`` (null) and :data:`UNDEFINED` are loosely equal to each other and
  to nothing else;
* a number and a string compare by the string's numeric value;
* a boolean is compared as ``1`` or ``0``;
* any other object is only ever equal to itself.

Examples
--------
>>> loose_equal(5, "5")
True
>>> strict_equal(5, "5")
False
>>> loose_equal(None, UNDEFINED)
True
"""

import math
import numbers
import re
from enum import Enum
from typing import Any


class Kind(Enum):
    """Value kinds the equality rules distinguish."""

    UNDEFINED = "undefined"
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    OBJECT = "object"


class _Undefined:
    """Marker for an absent value, distinct from ``None``."""

    _instance: "_Undefined | None" = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"


UNDEFINED = _Undefined()

_ABSENT = (Kind.NULL, Kind.UNDEFINED)
_DECIMAL = re.compile(r"[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")
_PREFIXED = re.compile(r"0([xXoObB])([0-9a-fA-F]+)")
_RADIX = {"x": 16, "o": 8, "b": 2}
_WHITESPACE = (
    " \t\n\v\f\r\u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)


def kind_of(value: Any) -> Kind:
    if value is UNDEFINED:
        return Kind.UNDEFINED
    if value is None:
        return Kind.NULL
    # bool before number: bool is an int subclass
    if isinstance(value, bool):
        return Kind.BOOLEAN
    if isinstance(value, numbers.Real):
        return Kind.NUMBER
    if isinstance(value, str):
        return Kind.STRING
    return Kind.OBJECT


def to_number(text: str) -> float:
    """Convert a string to a number the way loose comparison does.

    Surrounding whitespace (ASCII, no-break and Unicode space separators) is
    ignored and an empty string is ``0``. Accepts ASCII decimal literals,
    ``Infinity`` and ``0x``/``0o``/``0b`` integers; anything else, including
    Python-only spellings such as ``"nan"``, ``"1_000"`` or non-ASCII digits,
    is NaN.
    """
    text = text.strip(_WHITESPACE)
    if not text:
        return 0.0

    match = _PREFIXED.fullmatch(text)
    if match:
        try:
            return float(int(match.group(2), _RADIX[match.group(1).lower()]))
        except ValueError:
            return math.nan
        except OverflowError:
            return math.inf

    if _DECIMAL.fullmatch(text):
        return float(text.replace("Infinity", "inf"))
    return math.nan


def strict_equal(actual: Any, expected: Any) -> bool:
    """Compare without coercion: kinds must match, objects by identity."""
    actual_kind, expected_kind = kind_of(actual), kind_of(expected)
    if actual_kind is not expected_kind:
        return False
    if actual_kind is Kind.OBJECT:
        return actual is expected
    if actual_kind in _ABSENT:
        return True
    return actual == expected


def loose_equal(actual: Any, expected: Any) -> bool:
    """Compare with number/string/boolean coercion."""
    actual_kind, expected_kind = kind_of(actual), kind_of(expected)
    if actual_kind is expected_kind:
        return strict_equal(actual, expected)

    if actual_kind in _ABSENT or expected_kind in _ABSENT:
        return actual_kind in _ABSENT and expected_kind in _ABSENT

    if actual_kind is Kind.BOOLEAN:
        return loose_equal(int(actual), expected)
    if expected_kind is Kind.BOOLEAN:
        return loose_equal(actual, int(expected))

    if actual_kind is Kind.NUMBER and expected_kind is Kind.STRING:
        return actual == to_number(expected)
    if actual_kind is Kind.STRING and expected_kind is Kind.NUMBER:
        return to_number(actual) == expected

    return False
