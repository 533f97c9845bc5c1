"""Combinator types and condition normalisation."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Literal, TypeAlias

from boolbuilder.errors import ConditionTypeError

Thunk: TypeAlias = Callable[[], bool]
Condition: TypeAlias = Thunk | bool

Outcome = Literal["short_circuited", "exhausted", "failed"]


@dataclass(frozen=True)
class BoolOperator:
    """A short-circuiting boolean operator.

    Attributes:
        name: Public combinator name, used in warnings, errors and trace info.
        identity: Value for an empty fold; True for AND, False for OR.

    Any accumulated value other than the identity is absorbing: once reached,
    the result is decided and the remaining conditions are skipped.
    """
    name: str
    identity: bool

    def decided(self, accumulated: bool) -> bool:
        return accumulated != self.identity


AND = BoolOperator(name="all_of", identity=True)
OR = BoolOperator(name="any_of", identity=False)


def _constant(value: bool) -> Thunk:
    def thunk() -> bool:
        return value
    return thunk


def as_thunks(conditions: Sequence[Condition]) -> list[Thunk]:
    """Normalise conditions to zero-argument callables.

    Bools are wrapped as constants. Validation happens up front, so a bad
    argument is reported before any condition has run.

    Raises:
        ConditionTypeError: If a condition is neither callable nor a bool
    """
    thunks: list[Thunk] = []
    for index, condition in enumerate(conditions):
        if isinstance(condition, bool):
            thunks.append(_constant(condition))
        elif callable(condition):
            thunks.append(condition)
        else:
            raise ConditionTypeError(index, condition)
    return thunks
