"""Tests for the failure-propagating combinators."""

import pytest

from boolbuilder import FinalResult, all_of, any_of, either, fold_all, fold_any, try_all_of, try_any_of
from fakes import (
    CountingCondition,
    FailingCondition,
    MyError,
    ShouldNotHappen,
    always_throws,
    should_not_happen,
)


def always_true() -> bool:
    return True


def always_false() -> bool:
    return False


def test_values_without_failures() -> None:
    assert try_all_of(always_true) is True
    assert try_any_of(always_true) is True
    assert try_all_of(always_false) is False
    assert try_any_of(always_false) is False


def test_single_failure_propagates() -> None:
    with pytest.raises(MyError):
        try_all_of(always_throws)
    with pytest.raises(MyError):
        try_any_of(always_throws)


def test_all_of_failure_after_true() -> None:
    with pytest.raises(MyError):
        try_all_of(True, always_throws)


def test_all_of_short_circuit_hides_failure() -> None:
    failing = FailingCondition(MyError("never"))
    assert try_all_of(False, failing) is False
    assert failing.calls == 0


def test_any_of_failure_after_false() -> None:
    with pytest.raises(MyError):
        try_any_of(False, always_throws)


def test_any_of_short_circuit_hides_failure() -> None:
    failing = FailingCondition(MyError("never"))
    assert try_any_of(True, failing) is True
    assert failing.calls == 0


def test_only_first_failure_is_observed() -> None:
    first = MyError("first")
    second = FailingCondition(ShouldNotHappen("second"))

    with pytest.raises(MyError) as exc_info:
        try_all_of(True, FailingCondition(first), second)
    assert exc_info.value is first
    assert second.calls == 0

    with pytest.raises(MyError) as exc_info:
        try_any_of(False, FailingCondition(first), second)
    assert exc_info.value is first
    assert second.calls == 0


def test_failure_identity_is_preserved() -> None:
    error = MyError("original")
    with pytest.raises(MyError) as exc_info:
        try_all_of(FailingCondition(error))
    assert exc_info.value is error
    assert type(exc_info.value) is MyError


def test_failure_stops_evaluation() -> None:
    counter = CountingCondition()
    with pytest.raises(MyError):
        try_all_of(always_throws, counter)
    assert counter.calls == 0


def test_nested_failure_propagates() -> None:
    with pytest.raises(MyError):
        try_all_of(
            lambda: all_of(True),
            lambda: either(
                lambda: try_any_of(True, always_throws),
                always_throws,
            ),
        )


def test_many_conditions_then_failure() -> None:
    conditions = [True] * 20
    assert try_all_of(*conditions) is True
    with pytest.raises(MyError):
        try_all_of(*conditions, always_throws)


def test_mix_and_match() -> None:
    assert try_all_of(lambda: False and always_throws(), should_not_happen) is False
    assert try_any_of(lambda: True or always_throws(), should_not_happen) is True


def test_condition_that_raises_before_producing_a_value() -> None:
    def condition() -> bool:
        result = always_throws()
        return result

    with pytest.raises(MyError):
        try_all_of(condition)
    with pytest.raises(MyError):
        try_any_of(condition)


class TestFold:
    def test_success(self) -> None:
        result = fold_all(True, always_true)
        assert result.is_success
        assert result.value is True
        assert fold_any(False, always_false) == FinalResult.Success(False)

    def test_failure_is_captured(self) -> None:
        error = MyError("captured")
        result = fold_all(True, FailingCondition(error), should_not_happen)
        assert result.is_failure
        assert result.error is error

        with pytest.raises(MyError) as exc_info:
            result.get()
        assert exc_info.value is error

    def test_short_circuit_is_success(self) -> None:
        result = fold_any(False, True, should_not_happen)
        assert result == FinalResult.Success(True)


def test_plain_and_failing_variants_agree() -> None:
    for values in ([True, True], [True, False], [False, True], [False, False]):
        assert try_all_of(*values) == all_of(*values)
        assert try_any_of(*values) == any_of(*values)
