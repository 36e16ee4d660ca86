"""Module-level assertion operations.

Each function runs against the engine bound by
:func:`tdd_assert.context.assertion_scope`, or against one process-wide
engine when no scope is active.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, NoReturn

from tdd_assert.assertions.engine import Assertions
from tdd_assert.context import get_current_assertions


DEFAULT_ASSERTIONS = Assertions()


def get_assertions() -> Assertions:
    """Get the engine for the current scope, falling back to the process-wide one."""
    return get_current_assertions() or DEFAULT_ASSERTIONS


def asserted(message: str | None = None) -> None:
    """Check that the current engine counted one or more assertions since its last reset."""
    get_assertions().asserted(message)


def reset() -> None:
    """Reset the current engine's assertion count to zero."""
    get_assertions().reset()


def ok(value: Any, message: str | None = None) -> None:
    get_assertions().ok(value, message)


def fail(message: str) -> NoReturn:
    """Raise `AssertionFailedError` with ``message``. Not counted as an assertion."""
    get_assertions().fail(message)


def is_true(value: Any, message: str | None = None) -> None:
    get_assertions().is_true(value, message)


def is_false(value: Any, message: str | None = None) -> None:
    get_assertions().is_false(value, message)


def equal(actual: Any, expected: Any, message: str | None = None) -> None:
    """Check ``actual`` and ``expected`` are loosely equal."""
    get_assertions().equal(actual, expected, message)


def not_equal(actual: Any, expected: Any, message: str | None = None) -> None:
    get_assertions().not_equal(actual, expected, message)


def strict_equal(actual: Any, expected: Any, message: str | None = None) -> None:
    """Check ``actual`` and ``expected`` are equal without coercion."""
    get_assertions().strict_equal(actual, expected, message)


def not_strict_equal(actual: Any, expected: Any, message: str | None = None) -> None:
    get_assertions().not_strict_equal(actual, expected, message)


def throws(method: Callable[[], Any], expected: type | str | None = None, message: str | None = None) -> None:
    """Check that calling ``method`` raises an error, optionally of type or with message ``expected``."""
    get_assertions().throws(method, expected, message)


def does_not_throw(method: Callable[[], Any], message: str | None = None) -> None:
    """Check that calling ``method`` raises nothing."""
    get_assertions().does_not_throw(method, message)
