"""tdd-assert - Minimal assertion library for TDD-style test runners."""

from .api import (
    asserted,
    does_not_throw,
    equal,
    fail,
    get_assertions,
    is_false,
    is_true,
    not_equal,
    not_strict_equal,
    ok,
    reset,
    strict_equal,
    throws,
)
from .assertions import UNDEFINED, AssertionFailedError, AssertionResult, Assertions
from .context import assertion_scope, assertions_collector
from .version import __version__


__all__ = [
    # Engine
    "Assertions",
    "AssertionFailedError",
    "AssertionResult",
    "UNDEFINED",
    # Scopes
    "assertion_scope",
    "assertions_collector",
    "get_assertions",
    # Operations
    "asserted",
    "reset",
    "ok",
    "fail",
    "is_true",
    "is_false",
    "equal",
    "not_equal",
    "strict_equal",
    "not_strict_equal",
    "throws",
    "does_not_throw",
]
