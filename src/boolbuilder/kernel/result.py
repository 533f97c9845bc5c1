"""Tagged fold result - pure and dependency-free."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class FinalResult:
    """
    Outcome of folding fallible conditions.

    Kinds:
    - success: Every evaluated condition returned; `value` holds the combined boolean
    - failure: A condition raised; `error` holds the original exception object

    A failure is terminal: flat_map never calls its continuation on it, so no
    further condition is evaluated once one has raised.
    """

    kind: Literal["success", "failure"]
    value: bool | None = None
    error: Exception | None = None

    @staticmethod
    def Success(value: bool) -> FinalResult:
        return FinalResult(kind="success", value=value)

    @staticmethod
    def Failure(error: Exception) -> FinalResult:
        return FinalResult(kind="failure", error=error)

    @staticmethod
    def capture(thunk: Callable[[], bool]) -> FinalResult:
        """Run a condition, turning a raised exception into a failure."""
        try:
            return FinalResult.Success(bool(thunk()))
        except Exception as exc:
            return FinalResult.Failure(exc)

    @property
    def is_success(self) -> bool:
        return self.kind == "success"

    @property
    def is_failure(self) -> bool:
        return self.kind == "failure"

    def flat_map(self, fn: Callable[[bool], FinalResult]) -> FinalResult:
        """Chain the next step on success; a failure is passed through untouched."""
        if self.is_failure:
            return self
        return fn(self._require_value())

    def get(self) -> bool:
        """Return the value, or re-raise the captured exception unchanged."""
        if self.is_failure:
            if self.error is None:
                raise ValueError("FinalResult has no error.")
            raise self.error
        return self._require_value()

    def _require_value(self) -> bool:
        if self.value is None:
            raise ValueError("FinalResult has no value.")
        return self.value
