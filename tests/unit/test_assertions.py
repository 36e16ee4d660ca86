"""Tests for the Assertions engine."""

import logging

import pytest

from tdd_assert import UNDEFINED, AssertionFailedError, Assertions, assertions_collector
from tdd_assert.assertions.engine import display_name, error_message


class CustomError(Exception):
    pass


class NamedError(Exception):
    name = "FancyError"


@pytest.fixture
def a():
    return Assertions()


def raiser(ex):
    def method():
        raise ex

    return method


def noop():
    pass


class TestAssertionFailedError:
    def test_is_an_assertion_error(self):
        ex = AssertionFailedError("Foo")
        assert isinstance(ex, AssertionError)
        assert ex.message == "Foo"
        assert ex.name == "AssertionError"
        assert str(ex) == "Foo"

    def test_distinguishable_from_builtin(self):
        assert not isinstance(AssertionError("Foo"), AssertionFailedError)

    def test_without_message(self):
        ex = AssertionFailedError()
        assert ex.message is None
        assert ex.assertion_result is None


class TestOk:
    @pytest.mark.parametrize("value", [True, 1, "foo", {"a": 1}, [0], object()])
    def test_truthy_passes(self, a, value):
        a.ok(value)

    @pytest.mark.parametrize("value", [False, 0, "", None, UNDEFINED, [], {}])
    def test_falsy_raises(self, a, value):
        with pytest.raises(AssertionFailedError, match="^Foo$"):
            a.ok(value, "Foo")

    def test_default_message(self, a):
        with pytest.raises(AssertionFailedError) as excinfo:
            a.ok(False)
        assert excinfo.value.message == "Expected value to be truthy."

    def test_empty_override_falls_back_to_default(self, a):
        with pytest.raises(AssertionFailedError, match="Expected value to be truthy."):
            a.ok(False, "")


class TestFail:
    def test_always_raises_with_message(self, a):
        with pytest.raises(AssertionFailedError) as excinfo:
            a.fail("Foo")
        assert excinfo.value.message == "Foo"
        assert excinfo.value.assertion_result is None

    def test_is_not_counted(self, a):
        with pytest.raises(AssertionFailedError):
            a.fail("Foo")
        assert a.count == 0


class TestCounting:
    def test_starts_at_zero(self, a):
        assert a.count == 0

    def test_counts_passes_and_failures(self, a):
        a.ok(True)
        with pytest.raises(AssertionFailedError):
            a.ok(False)
        a.equal(1, 1)
        assert a.count == 3

    def test_asserted_after_reset_raises(self, a):
        a.ok(True)
        a.reset()
        with pytest.raises(AssertionFailedError, match="Expected one or more assertions."):
            a.asserted()

    def test_asserted_after_assertion_passes(self, a):
        a.reset()
        a.ok(True)
        a.asserted()

    def test_asserted_custom_message(self, a):
        with pytest.raises(AssertionFailedError, match="^Nothing checked$"):
            a.asserted("Nothing checked")

    def test_asserted_counts_itself(self, a):
        a.ok(True)
        a.asserted()
        assert a.count == 2

    def test_reset_is_idempotent(self, a):
        a.ok(True)
        a.reset()
        a.reset()
        assert a.count == 0

    def test_engines_are_independent(self):
        first, second = Assertions(), Assertions()
        first.ok(True)
        assert first.count == 1
        assert second.count == 0

    def test_repr(self, a):
        a.ok(True)
        assert repr(a) == "Assertions(count=1)"


class TestBooleans:
    def test_is_true(self, a):
        a.is_true(True)

    @pytest.mark.parametrize("value", [1, "true", [True], False])
    def test_is_true_requires_exact_true(self, a, value):
        with pytest.raises(AssertionFailedError, match="Expected value to be true."):
            a.is_true(value)

    def test_is_false(self, a):
        a.is_false(False)

    @pytest.mark.parametrize("value", [0, "", None, True])
    def test_is_false_requires_exact_false(self, a, value):
        with pytest.raises(AssertionFailedError, match="Expected value to be false."):
            a.is_false(value)

    def test_custom_messages(self, a):
        with pytest.raises(AssertionFailedError, match="^Foo$"):
            a.is_true(0, "Foo")
        with pytest.raises(AssertionFailedError, match="^Bar$"):
            a.is_false(1, "Bar")


class TestEquality:
    def test_equal_is_loose(self, a):
        a.equal(5, "5")
        a.equal(None, UNDEFINED)

    def test_equal_default_message(self, a):
        with pytest.raises(AssertionFailedError, match="Expected values to be equal."):
            a.equal(5, 6)

    def test_not_equal(self, a):
        a.not_equal(5, 6)
        with pytest.raises(AssertionFailedError) as excinfo:
            a.not_equal(5, 5)
        assert excinfo.value.message == "Expected values not to be equal."

    def test_not_equal_is_loose(self, a):
        with pytest.raises(AssertionFailedError):
            a.not_equal(5, "5")

    def test_strict_equal(self, a):
        a.strict_equal(5, 5)
        with pytest.raises(AssertionFailedError) as excinfo:
            a.strict_equal(5, "5")
        assert excinfo.value.message == "Expected values to be strictly equal."

    def test_not_strict_equal(self, a):
        a.not_strict_equal(5, "5")
        a.not_strict_equal(None, UNDEFINED)
        with pytest.raises(AssertionFailedError, match="Expected values not to be strictly equal."):
            a.not_strict_equal(5, 5)

    def test_custom_message(self, a):
        with pytest.raises(AssertionFailedError, match="^Foo$"):
            a.strict_equal(1, True, "Foo")


class TestThrows:
    def test_any_error_passes_without_counting(self, a):
        a.throws(raiser(ValueError("Foo")))
        assert a.count == 0

    def test_nothing_thrown_fails(self, a):
        with pytest.raises(AssertionFailedError, match="^Expected error to be thrown.$"):
            a.throws(noop)

    def test_nothing_thrown_custom_message(self, a):
        with pytest.raises(AssertionFailedError, match="^Bar$"):
            a.throws(noop, "Foo", "Bar")
        assert a.count == 0

    def test_matching_type(self, a):
        a.throws(raiser(CustomError("x")), CustomError)
        a.throws(raiser(CustomError("x")), Exception)
        assert a.count == 2

    def test_wrong_type_default_message(self, a):
        with pytest.raises(AssertionFailedError) as excinfo:
            a.throws(raiser(ValueError("x")), CustomError)
        assert excinfo.value.message == "Expected thrown error to be instance of CustomError."
        assert isinstance(excinfo.value.__context__, ValueError)

    def test_wrong_type_uses_declared_name(self, a):
        with pytest.raises(AssertionFailedError, match="instance of FancyError."):
            a.throws(raiser(ValueError("x")), NamedError)

    def test_wrong_type_custom_message(self, a):
        with pytest.raises(AssertionFailedError, match="^Bar$"):
            a.throws(raiser(ValueError("x")), CustomError, "Bar")

    def test_matching_message(self, a):
        a.throws(raiser(Exception("Foo")), "Foo")
        assert a.count == 1

    def test_wrong_message_default(self, a):
        with pytest.raises(AssertionFailedError) as excinfo:
            a.throws(raiser(Exception("Foo")), "Bar")
        assert excinfo.value.message == "Expected error message to be 'Bar'."

    def test_message_of_nested_assertion_error(self, a):
        inner = Assertions()
        a.throws(lambda: inner.fail("Inner"), "Inner")
        a.throws(lambda: inner.ok(False), AssertionFailedError)

    def test_keyboard_interrupt_propagates(self, a):
        with pytest.raises(KeyboardInterrupt):
            a.throws(raiser(KeyboardInterrupt()))


class TestDoesNotThrow:
    def test_passes_without_counting(self, a):
        a.does_not_throw(noop)
        assert a.count == 0

    def test_error_fails_with_default_message(self, a):
        with pytest.raises(AssertionFailedError, match="^Expected not to throw an error.$"):
            a.does_not_throw(raiser(Exception("x")))

    def test_custom_message(self, a):
        with pytest.raises(AssertionFailedError, match="^Foo$"):
            a.does_not_throw(raiser(Exception("x")), "Foo")


class TestHelpers:
    def test_error_message_prefers_message_attribute(self):
        ex = Exception("args")
        ex.message = "attr"
        assert error_message(ex) == "attr"

    def test_error_message_single_string_arg(self):
        assert error_message(KeyError("key")) == "key"

    def test_error_message_falls_back_to_str(self):
        assert error_message(ValueError("a", 1)) == "('a', 1)"
        assert error_message(ValueError()) == ""

    def test_display_name(self):
        assert display_name(CustomError) == "CustomError"
        assert display_name(NamedError) == "FancyError"
        assert display_name(AssertionFailedError) == "AssertionError"


class TestResults:
    def test_collector_receives_every_evaluation(self, a):
        results = []
        with assertions_collector(results):
            a.ok(True)
            with pytest.raises(AssertionFailedError):
                a.strict_equal(1, "1")
            a.throws(raiser(Exception("Foo")), "Foo")

        assert len(results) == a.count == 3
        assert [r.operation for r in results] == ["ok", "strict_equal", "strict_equal"]
        assert [r.passed for r in results] == [True, False, True]
        assert results[1].message == "Expected values to be strictly equal."

    def test_results_not_collected_outside_scope(self, a):
        results = []
        with assertions_collector(results):
            pass
        a.ok(True)
        assert results == []

    def test_failure_carries_result(self, a):
        with pytest.raises(AssertionFailedError) as excinfo:
            a.is_true(False)
        result = excinfo.value.assertion_result
        assert result.operation == "is_true"
        assert result.passed is False
        assert result.timestamp.tzinfo is not None

    def test_failure_is_logged_at_debug(self, a, caplog):
        with caplog.at_level(logging.DEBUG, logger="tdd_assert"):
            with pytest.raises(AssertionFailedError):
                a.ok(0, "Foo")
        assert "Assertion ok failed: Foo" in caplog.text
