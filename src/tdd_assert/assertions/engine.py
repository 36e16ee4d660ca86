"""The assertion engine and its assertion counter."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, NoReturn

from tdd_assert.assertions._base import AssertionFailedError, AssertionResult
from tdd_assert.assertions.coercion import loose_equal, strict_equal
from tdd_assert.assertions.formatting import format_message
from tdd_assert.context import ASSERTION_RESULTS_COLLECTOR

logger = logging.getLogger(__name__)


def error_message(ex: BaseException) -> str:
    """Return the message of a raised error.

    Uses a string ``message`` attribute when the error has one, then a single
    string argument, and falls back to ``str(ex)``.
    """
    message = getattr(ex, "message", None)
    if isinstance(message, str):
        return message
    if len(ex.args) == 1 and isinstance(ex.args[0], str):
        return ex.args[0]
    return str(ex)


def display_name(error_type: type) -> str:
    """Return the declared ``name`` of an error type, else its ``__name__``."""
    name = getattr(error_type, "name", None)
    if isinstance(name, str) and name:
        return name
    return getattr(error_type, "__name__", None) or str(error_type)


class Assertions:
    """Assertion operations sharing one assertion counter.

    Every evaluated check increments :attr:`count`, whether it passes or not,
    so a runner can tell a test that checked nothing from one that passed.
    Failures raise :class:`AssertionFailedError`.

    Examples
    --------
    >>> a = Assertions()
    >>> a.equal(5, "5")
    >>> a.count
    1
    >>> a.asserted()
    """

    def __init__(self) -> None:
        self._count = 0

    def __repr__(self) -> str:
        return f"Assertions(count={self._count})"

    @property
    def count(self) -> int:
        """Number of checks evaluated since the last :meth:`reset`."""
        return self._count

    def _assert(self, condition: Any, message: str, operation: str) -> None:
        """Count a check and raise if ``condition`` is falsy.

        Parameters
        ----------
        condition : Any
            The condition to evaluate.
        message : str
            Message for the raised error.
        operation : str
            Name of the public operation, recorded on the result.

        Raises
        ------
        AssertionFailedError
            If ``condition`` is falsy.
        """
        self._count += 1

        passed = bool(condition)
        result = AssertionResult(operation=operation, passed=passed, message=message)
        if (collector := ASSERTION_RESULTS_COLLECTOR.get()) is not None:
            collector.append(result)

        if not passed:
            logger.debug("Assertion %s failed: %s", operation, message)
            raise AssertionFailedError(message, result)

    # Assertion tracking

    def asserted(self, message: str | None = None) -> None:
        """Check that one or more assertions were made since the last reset."""
        self._assert(self._count > 0, message or "Expected one or more assertions.", "asserted")

    def reset(self) -> None:
        self._count = 0

    # Basic asserts

    def ok(self, value: Any, message: str | None = None) -> None:
        self._assert(value, message or "Expected value to be truthy.", "ok")

    def fail(self, message: str) -> NoReturn:
        """Raise an assertion error. Not counted as an assertion."""
        logger.debug("Explicit failure: %s", message)
        raise AssertionFailedError(message)

    # Boolean asserts

    def is_true(self, value: Any, message: str | None = None) -> None:
        self._assert(value is True, message or "Expected value to be true.", "is_true")

    def is_false(self, value: Any, message: str | None = None) -> None:
        self._assert(value is False, message or "Expected value to be false.", "is_false")

    # Equality asserts

    def equal(self, actual: Any, expected: Any, message: str | None = None) -> None:
        """Check ``actual`` and ``expected`` are loosely equal (see `coercion.loose_equal`)."""
        self._assert(loose_equal(actual, expected), message or "Expected values to be equal.", "equal")

    def not_equal(self, actual: Any, expected: Any, message: str | None = None) -> None:
        self._assert(
            not loose_equal(actual, expected), message or "Expected values not to be equal.", "not_equal"
        )

    def strict_equal(self, actual: Any, expected: Any, message: str | None = None) -> None:
        """Check ``actual`` and ``expected`` are equal without coercion."""
        self._assert(
            strict_equal(actual, expected), message or "Expected values to be strictly equal.", "strict_equal"
        )

    def not_strict_equal(self, actual: Any, expected: Any, message: str | None = None) -> None:
        self._assert(
            not strict_equal(actual, expected),
            message or "Expected values not to be strictly equal.",
            "not_strict_equal",
        )

    # Error asserts

    def throws(
        self,
        method: Callable[[], Any],
        expected: type | str | None = None,
        message: str | None = None,
    ) -> None:
        """Check that calling ``method`` raises an error.

        Parameters
        ----------
        method : Callable[[], Any]
            Code to run, called with no arguments.
        expected : type | str | None
            Error type the raised error must be an instance of, or the exact
            message it must carry. With ``None`` any error passes.
        message : str | None
            Message to use instead of the default one on failure.

        Raises
        ------
        AssertionFailedError
            If nothing is raised, or the raised error does not match ``expected``.

        Notes
        -----
        Only the type and message checks are counted; catching the error is not.
        Exceptions that do not derive from ``Exception`` (``KeyboardInterrupt``,
        ``SystemExit``) are not caught.
        """
        try:
            method()
        except Exception as ex:
            if isinstance(expected, type):
                self._assert(
                    isinstance(ex, expected),
                    message
                    or format_message(
                        "Expected thrown error to be instance of {name}.", {"name": display_name(expected)}
                    ),
                    "throws",
                )
            elif isinstance(expected, str):
                self.strict_equal(
                    error_message(ex),
                    expected,
                    message or format_message("Expected error message to be '{msg}'.", {"msg": expected}),
                )
            return

        self.fail(message or "Expected error to be thrown.")

    def does_not_throw(self, method: Callable[[], Any], message: str | None = None) -> None:
        """Check that calling ``method`` raises nothing."""
        try:
            method()
        except Exception:
            self.fail(message or "Expected not to throw an error.")
