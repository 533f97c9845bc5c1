"""Combinators - short-circuiting boolean composition primitives."""

from .ops import (
    all_of,
    any_of,
    either,
    fold_all,
    fold_any,
    inverted,
    try_all_of,
    try_any_of,
)
from .types import AND, OR, BoolOperator, Condition, Outcome, Thunk

__all__ = [
    "all_of",
    "any_of",
    "try_all_of",
    "try_any_of",
    "fold_all",
    "fold_any",
    "either",
    "inverted",
    # Types
    "BoolOperator",
    "AND",
    "OR",
    "Condition",
    "Thunk",
    "Outcome",
]
