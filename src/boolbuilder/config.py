"""Combinator configuration.

The process-wide default is set with configure(). override() layers a
config on top of it for the current thread or task only.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, TypeAdapter

EmptyPolicy = Literal["warn", "allow", "forbid"]

_policy_adapter = TypeAdapter(EmptyPolicy)


class CombinatorConfig(BaseModel):
    """Settings read by every combinator call.

    Attributes:
        empty_policy: What an empty condition list does for all_of/any_of.
            - warn: return the identity value and emit a DeprecationWarning
            - allow: return the identity value silently
            - forbid: raise EmptyConditionsError
        fallible_empty_policy: The same setting for try_*/fold_*. An empty
            list can never raise, so asking for failure propagation on one
            is forbidden by default.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    empty_policy: EmptyPolicy = "warn"
    fallible_empty_policy: EmptyPolicy = "forbid"


_default = CombinatorConfig()
_active: ContextVar[CombinatorConfig | None] = ContextVar("boolbuilder_config", default=None)


def validate_policy(value: Any) -> EmptyPolicy:
    """Check a per-call empty policy.

    Raises:
        pydantic.ValidationError: If the value is not a known policy
    """
    return _policy_adapter.validate_python(value)


def get_config() -> CombinatorConfig:
    active = _active.get()
    return active if active is not None else _default


def configure(**changes: Any) -> CombinatorConfig:
    """Replace the process-wide default with a validated copy carrying `changes`.

    Active override() blocks keep their own config until they exit.

    Raises:
        pydantic.ValidationError: If a key is unknown or a value is invalid
    """
    global _default
    _default = CombinatorConfig(**{**_default.model_dump(), **changes})
    return _default


@contextmanager
def override(**changes: Any) -> Iterator[CombinatorConfig]:
    """Apply `changes` in the current context for the duration of a with-block."""
    config = CombinatorConfig(**{**get_config().model_dump(), **changes})
    token = _active.set(config)
    try:
        yield config
    finally:
        _active.reset(token)
