"""Demonstrates how a small runner drives tdd-assert.

* Every check is counted by the current `Assertions` engine.
* The runner binds a fresh engine per test and calls `asserted()` afterwards,
  so a test that checks nothing is reported as a failure.
* Failures raise `AssertionFailedError`, which the runner reports.
"""

import tdd_assert
from tdd_assert import AssertionFailedError, Assertions, assertion_scope


def test_parsing() -> None:
    tdd_assert.equal(int("42"), "42")
    tdd_assert.throws(lambda: int("x"), ValueError)


def test_strictness() -> None:
    tdd_assert.strict_equal(5, "5")


def test_nothing() -> None:
    pass


def run(*tests) -> None:
    for test in tests:
        with assertion_scope(Assertions()) as engine:
            try:
                test()
                engine.asserted(f"{test.__name__} made no assertions.")
            except AssertionFailedError as ex:
                print(f"FAIL {test.__name__}: {ex.message}")
            else:
                print(f"PASS {test.__name__} ({engine.count} assertions)")


if __name__ == "__main__":
    run(test_parsing, test_strictness, test_nothing)
