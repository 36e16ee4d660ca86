"""Base assertion error and result types."""

from __future__ import annotations

from datetime import datetime, timezone
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class AssertionResult(BaseModel):
    """Record of a single evaluated assertion.

    Attributes
    ----------
    operation : str
        Name of the assertion operation that was evaluated (e.g. ``"strict_equal"``).
    passed : bool
        Whether the checked condition held.
    message : str | None
        Message that is (or would have been) raised on failure.
    uuid : UUID
        Unique identifier for this evaluation.
    timestamp : datetime
        UTC timestamp when the assertion was evaluated.
    """

    operation: str
    passed: bool
    message: str | None = None
    uuid: UUID = Field(default_factory=uuid4)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class AssertionFailedError(AssertionError):
    """Raised when an assertion fails or ``fail()`` is called.

    Subclasses the builtin ``AssertionError`` so runners report it as a test
    failure, while ``isinstance`` still tells it apart from a plain one.

    Attributes
    ----------
    name : str
        Error tag, always ``"AssertionError"``.
    message : str | None
        The failure message.
    assertion_result : AssertionResult | None
        Record of the failed check; ``None`` for explicit ``fail()`` calls.
    """

    name = "AssertionError"

    def __init__(self, message: str | None = None, result: AssertionResult | None = None):
        self.message = message
        self.assertion_result = result
        if message is None:
            super().__init__()
        else:
            super().__init__(message)
