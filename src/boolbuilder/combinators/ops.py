"""Combinator primitives: all_of, any_of, try_all_of, try_any_of, either, inverted."""

# Combinators satisfy the following laws:
#
# 1. all_of(*xs) == functools.reduce(operator.and_, xs, True)
# 2. any_of(*xs) == functools.reduce(operator.or_, xs, False)
# 3. No condition after the deciding one is ever called
# 4. try_* re-raise the first exception object, never a wrapper


from __future__ import annotations

import logging
import time
import warnings
from types import TracebackType

from boolbuilder.config import EmptyPolicy, get_config, validate_policy
from boolbuilder.errors import EmptyConditionsError
from boolbuilder.kernel import FinalResult, Trace

from .types import AND, OR, BoolOperator, Condition, Outcome, Thunk, as_thunks

logger = logging.getLogger(__name__)


class _Evaluation:
    """Bookkeeping for one combinator call: counts and optional trace events.

    Used as a context manager; leaving the block without finish() (any
    exception, including KeyboardInterrupt) closes the call as "failed".
    """

    def __init__(self, op_name: str, count: int, trace: Trace | None) -> None:
        self.op_name = op_name
        self.count = count
        self.evaluated = 0
        self.trace = trace
        self.begin_id: int | None = None
        self.finished = False
        self.start_time = time.perf_counter()

    def __enter__(self) -> _Evaluation:
        if self.trace is not None:
            self.begin_id = self.trace.begin(
                "combine_begin", info={"operator": self.op_name, "count": self.count}
            )
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if not self.finished:
            self.finish("failed")

    def invoke(self, index: int, thunk: Thunk) -> bool:
        """Call one condition, recording its value or the exception it raised."""
        try:
            value = bool(thunk())
        except Exception as exc:
            logger.debug("%s: condition %d raised %r", self.op_name, index, exc)
            if self.trace is not None:
                self.trace.record(
                    "condition_error",
                    info={"index": index, "error": str(exc)},
                    parent_id=self.begin_id,
                )
            raise
        self.evaluated += 1
        if self.trace is not None:
            self.trace.record(
                "condition",
                info={"index": index, "value": value},
                parent_id=self.begin_id,
            )
        return value

    def finish(self, outcome: Outcome, value: bool | None = None) -> None:
        self.finished = True
        if outcome == "short_circuited":
            logger.debug(
                "%s short-circuited after %d of %d conditions",
                self.op_name, self.evaluated, self.count,
            )
        if self.trace is not None:
            self.trace.end(
                self.begin_id,
                "combine_end",
                info={"outcome": outcome, "evaluated": self.evaluated, "value": value},
                duration_ms=(time.perf_counter() - self.start_time) * 1000,
            )

    def settle(self, value: bool) -> None:
        """Finish a call that produced a value."""
        outcome: Outcome = "short_circuited" if self.evaluated < self.count else "exhausted"
        self.finish(outcome, value)


def _check_empty(op: BoolOperator, policy: EmptyPolicy | None, fallible: bool = False) -> None:
    """Apply the empty-input policy; must be called directly by a public combinator.

    Raises:
        pydantic.ValidationError: If `policy` is not a known policy
    """
    if policy is None:
        config = get_config()
        policy = config.fallible_empty_policy if fallible else config.empty_policy
    else:
        policy = validate_policy(policy)
    if policy == "forbid":
        raise EmptyConditionsError(op.name, op.identity)
    if policy == "warn":
        # stacklevel 3: the caller of the public combinator
        warnings.warn(
            f"Empty {op.name} always evaluates to {op.identity}. "
            f"Consider replacing with {op.identity} instead.",
            DeprecationWarning,
            stacklevel=3,
        )


def _combine(op: BoolOperator, thunks: list[Thunk], trace: Trace | None) -> bool:
    """Plain short-circuit fold. Exceptions from conditions propagate as raised."""
    with _Evaluation(op.name, len(thunks), trace) as run:
        accumulated = op.identity
        for index, thunk in enumerate(thunks):
            if op.decided(accumulated):
                break
            accumulated = run.invoke(index, thunk)
        run.settle(accumulated)
    return accumulated


def _fold(op: BoolOperator, thunks: list[Thunk], trace: Trace | None) -> FinalResult:
    """Short-circuit fold threading a FinalResult; never raises for a condition."""
    with _Evaluation(op.name, len(thunks), trace) as run:

        def step(index: int, thunk: Thunk):
            def next_result(accumulated: bool) -> FinalResult:
                if op.decided(accumulated):
                    return FinalResult.Success(accumulated)
                return FinalResult.capture(lambda: run.invoke(index, thunk))
            return next_result

        result = FinalResult.Success(op.identity)
        for index, thunk in enumerate(thunks):
            result = result.flat_map(step(index, thunk))

        if result.is_success:
            run.settle(result.get())
    return result

def all_of(
    *conditions: Condition,
    empty: EmptyPolicy | None = None,
    trace: Trace | None = None,
) -> bool:
    """Logical AND over conditions with short-circuit semantics.

    Conditions are called left to right; the first False stops evaluation
    and the remaining conditions are never called. An exception raised by a
    condition propagates unchanged.

    Args:
        *conditions: Zero-argument callables returning bool, or bool constants
        empty: Per-call override of the configured empty-input policy
        trace: Optional Trace recording which conditions were evaluated

    Returns:
        True if every condition is True, otherwise False.
        With no conditions, True unless the policy forbids it.
    """
    thunks = as_thunks(conditions)
    if not thunks:
        _check_empty(AND, empty)
    return _combine(AND, thunks, trace)


def any_of(
    *conditions: Condition,
    empty: EmptyPolicy | None = None,
    trace: Trace | None = None,
) -> bool:
    """Logical OR over conditions with short-circuit semantics.

    Conditions are called left to right; the first True stops evaluation.

    Returns:
        True if at least one condition is True, otherwise False.
        With no conditions, False unless the policy forbids it.
    """
    thunks = as_thunks(conditions)
    if not thunks:
        _check_empty(OR, empty)
    return _combine(OR, thunks, trace)


def fold_all(
    *conditions: Condition,
    empty: EmptyPolicy | None = None,
    trace: Trace | None = None,
) -> FinalResult:
    """AND fold that captures the first raised exception instead of raising it.

    Empty input follows `fallible_empty_policy`, like try_all_of.
    """
    thunks = as_thunks(conditions)
    if not thunks:
        _check_empty(AND, empty, fallible=True)
    return _fold(AND, thunks, trace)


def fold_any(
    *conditions: Condition,
    empty: EmptyPolicy | None = None,
    trace: Trace | None = None,
) -> FinalResult:
    """OR fold that captures the first raised exception instead of raising it.

    Empty input follows `fallible_empty_policy`, like try_any_of.
    """
    thunks = as_thunks(conditions)
    if not thunks:
        _check_empty(OR, empty, fallible=True)
    return _fold(OR, thunks, trace)


def try_all_of(
    *conditions: Condition,
    empty: EmptyPolicy | None = None,
    trace: Trace | None = None,
) -> bool:
    """Logical AND that re-raises the first exception raised by a condition.

    Evaluation stops at the first False or the first exception, whichever
    comes first. A condition after the deciding False can never raise,
    because it is never called.

    With no conditions this raises EmptyConditionsError unless
    `fallible_empty_policy` or `empty=` says otherwise: an empty list can
    never raise, so it is almost certainly a mistake.

    Raises:
        Exception: The exact object raised by the earliest failing condition
    """
    thunks = as_thunks(conditions)
    if not thunks:
        _check_empty(AND, empty, fallible=True)
    return _fold(AND, thunks, trace).get()


def try_any_of(
    *conditions: Condition,
    empty: EmptyPolicy | None = None,
    trace: Trace | None = None,
) -> bool:
    """Logical OR that re-raises the first exception raised by a condition.

    Raises:
        Exception: The exact object raised by the earliest failing condition
    """
    thunks = as_thunks(conditions)
    if not thunks:
        _check_empty(OR, empty, fallible=True)
    return _fold(OR, thunks, trace).get()


def either(
    condition: Condition,
    or_: Condition,
    *,
    trace: Trace | None = None,
) -> bool:
    """Exclusive OR of two conditions.

    Both conditions are always called, first `condition` then `or_`. If
    `condition` raises, `or_` is not called.

    Returns:
        True if the two conditions return different values, otherwise False.
    """
    first, second = as_thunks((condition, or_))
    with _Evaluation("either", 2, trace) as run:
        value = run.invoke(0, first) != run.invoke(1, second)
        run.finish("exhausted", value)
    return value


def inverted(value: bool) -> bool:
    """`False` if `value` is true; `True` if it is false."""
    return not value
