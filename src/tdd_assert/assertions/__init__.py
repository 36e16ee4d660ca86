"""Assertion primitives and the engine that counts them."""

from tdd_assert.assertions._base import AssertionFailedError, AssertionResult
from tdd_assert.assertions.coercion import UNDEFINED, loose_equal, strict_equal, to_number
from tdd_assert.assertions.engine import Assertions
from tdd_assert.assertions.formatting import format_message

__all__ = [
    "AssertionFailedError",
    "AssertionResult",
    "Assertions",
    "UNDEFINED",
    "format_message",
    "loose_equal",
    "strict_equal",
    "to_number",
]
