"""pytest integration.

Every test, including its fixtures, runs with its own :class:`Assertions`
engine bound as the current one, so module-level operations such as
``tdd_assert.ok`` count per test.
Tests marked ``require_assertions`` (or every test, when enabled through
``--require-assertions``, the ``tdd_assert_require_assertions`` ini option or
``TDD_ASSERT_REQUIRE_ASSERTIONS``) fail if they pass without asserting anything.
"""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest

from tdd_assert.assertions.engine import Assertions
from tdd_assert.config import AssertSettings
from tdd_assert.context import assertion_scope

logger = logging.getLogger(__name__)


ASSERTIONS_KEY = pytest.StashKey[Assertions]()
REQUIRE_ALL_KEY = pytest.StashKey[bool]()


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("tdd-assert")
    group.addoption(
        "--require-assertions",
        action="store_true",
        default=False,
        help="fail passing tests that made no tdd-assert assertions",
    )
    parser.addini(
        "tdd_assert_require_assertions",
        type="bool",
        default=False,
        help="fail passing tests that made no tdd-assert assertions",
    )


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "require_assertions: fail the test if it makes no tdd-assert assertions")

    settings = AssertSettings()
    require_all = bool(
        config.getoption("require_assertions")
        or config.getini("tdd_assert_require_assertions")
        or settings.require_assertions
    )
    config.stash[REQUIRE_ALL_KEY] = require_all
    logger.debug("tdd-assert require_assertions=%s", require_all)


@pytest.hookimpl(wrapper=True)
def pytest_runtest_protocol(
    item: pytest.Item, nextitem: pytest.Item | None
) -> Generator[None, object, object]:
    # setup, call and teardown (fixtures included) count against the same engine
    assertions = Assertions()
    item.stash[ASSERTIONS_KEY] = assertions
    with assertion_scope(assertions):
        return (yield)


@pytest.hookimpl(wrapper=True)
def pytest_runtest_call(item: pytest.Item) -> Generator[None, object, object]:
    assertions = item.stash[ASSERTIONS_KEY]
    result = yield

    if item.config.stash[REQUIRE_ALL_KEY] or item.get_closest_marker("require_assertions"):
        assertions.asserted()
    return result


@pytest.fixture
def assertions(request: pytest.FixtureRequest) -> Assertions:
    """The assertion engine of the running test."""
    return request.node.stash[ASSERTIONS_KEY]
