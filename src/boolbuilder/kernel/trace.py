"""Evaluation trace - separate from the combined value.

This module captures which conditions a combinator actually evaluated, so
short-circuit and failure paths can be inspected after the fact.
Trace is diagnostic infrastructure - it never changes a combinator's result.
Tree relationships are reconstructed only on demand via as_tree().
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any


@dataclass(frozen=True)
class Evidence:
    """A single evaluation event captured at runtime.

    Attributes:
        action: What happened (e.g., "combine_begin", "condition")
        id: Sequential event id within its Trace
        parent_id: Id of the enclosing combine_begin event, if any
        timestamp: When the event was recorded
        info: Event details (operator, index, value, outcome, ...)
        duration_ms: Elapsed time, set on combine_end events
    """

    action: str
    id: int = 0
    parent_id: int | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
    info: dict[str, Any] = field(default_factory=dict)
    duration_ms: float | None = None


class Trace:
    """Runtime trace for capturing combinator evaluation events.

    begin()/end() bracket one combinator call; events recorded in between
    without an explicit parent become its children, so a combinator
    evaluated inside another one's condition nests under it.
    Not thread-safe: use one Trace per thread.
    """

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self._events: list[Evidence] = []
        self._open: list[int] = []

    def record(
        self,
        action: str,
        info: dict[str, Any] | None = None,
        parent_id: int | None = None,
        duration_ms: float | None = None,
    ) -> int | None:
        """Record an evidence event.

        Without an explicit parent_id the innermost open begin() is the parent.

        Returns:
            Event ID for linking child events, or None if tracing disabled
        """
        if not self.enabled:
            return None

        if parent_id is None and self._open:
            parent_id = self._open[-1]

        event = Evidence(
            action=action,
            id=len(self._events),
            parent_id=parent_id,
            info=info or {},
            duration_ms=duration_ms,
        )
        self._events.append(event)
        return event.id

    def begin(self, action: str, info: dict[str, Any] | None = None) -> int | None:
        """Record an event and keep it open as the parent of later events."""
        event_id = self.record(action, info=info)
        if event_id is not None:
            self._open.append(event_id)
        return event_id

    def end(
        self,
        begin_id: int | None,
        action: str,
        info: dict[str, Any] | None = None,
        duration_ms: float | None = None,
    ) -> int | None:
        """Close the scope opened by begin() and record its closing event."""
        if begin_id is None:
            return None
        if begin_id in self._open:
            del self._open[self._open.index(begin_id):]
        return self.record(action, info=info, parent_id=begin_id, duration_ms=duration_ms)

    def get_events(self) -> list[Evidence]:
        """Get all recorded events."""
        return list(self._events)

    def find(self, **criteria: Any) -> list[Evidence]:
        """Find events whose attributes or info entries match every criterion.

        Example:
            trace.find(action="condition", index=2)
        """
        return [
            ev
            for ev in self._events
            if all(
                getattr(ev, k, None) == v or ev.info.get(k) == v
                for k, v in criteria.items()
            )
        ]

    def as_tree(self) -> dict[int | None, list[int]]:
        """Reconstruct parent-child relationships.

        Returns:
            Dict mapping parent_id to list of child_ids
        """
        tree: dict[int | None, list[int]] = {}
        for ev in self._events:
            tree.setdefault(ev.parent_id, []).append(ev.id)
        return tree

    def __len__(self) -> int:
        return len(self._events)
