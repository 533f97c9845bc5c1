"""Error types raised by the combinators themselves.

Exceptions raised by conditions are never wrapped in these; they reach the
caller as the original object.
"""

from __future__ import annotations


class EmptyConditionsError(ValueError):
    """Error raised when a combinator is given no conditions under the "forbid" policy.

    Preserves the identity value the combinator would otherwise have returned.
    """

    def __init__(self, operator: str, identity: bool) -> None:
        self.operator = operator
        self.identity = identity
        super().__init__(
            f"{operator} requires at least one condition; "
            f"replace the empty call with {identity} instead"
        )

    def __repr__(self) -> str:
        return f"EmptyConditionsError(operator={self.operator!r}, identity={self.identity!r})"


class ConditionTypeError(TypeError):
    """Error raised when a condition is neither callable nor a bool."""

    def __init__(self, index: int, raw_value: object) -> None:
        self.index = index
        self.raw_value = raw_value
        super().__init__(
            f"Condition {index} must be a zero-argument callable or a bool, "
            f"got {type(raw_value).__name__}"
        )

    def __repr__(self) -> str:
        return f"ConditionTypeError({super().__repr__()}, raw_value={self.raw_value!r})"
