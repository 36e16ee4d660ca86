from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from tdd_assert.assertions._base import AssertionResult
    from tdd_assert.assertions.engine import Assertions


ASSERTIONS_CONTEXT: ContextVar[Assertions | None] = ContextVar("assertions_context", default=None)

ASSERTION_RESULTS_COLLECTOR: ContextVar[list[AssertionResult] | None] = ContextVar(
    "assertion_results_collector", default=None
)


def get_current_assertions() -> Assertions | None:
    """Get the engine bound to the current scope, or None outside any scope."""
    return ASSERTIONS_CONTEXT.get()


@contextmanager
def assertion_scope(assertions: Assertions | None = None) -> Iterator[Assertions]:
    """Bind ``assertions`` as the current engine for the duration of the ``with`` block.

    Parameters
    ----------
    assertions : Assertions | None
        The engine module-level operations should count against. A fresh
        engine is created when omitted.
    """
    if assertions is None:
        from tdd_assert.assertions.engine import Assertions

        assertions = Assertions()

    token = ASSERTIONS_CONTEXT.set(assertions)
    try:
        yield assertions
    finally:
        ASSERTIONS_CONTEXT.reset(token)


@contextmanager
def assertions_collector(ctx: list[AssertionResult]) -> Iterator[None]:
    """Append every evaluated `AssertionResult` to ``ctx`` within the ``with`` block."""
    token = ASSERTION_RESULTS_COLLECTOR.set(ctx)
    try:
        yield
    finally:
        ASSERTION_RESULTS_COLLECTOR.reset(token)
