"""Kernel layer - pure abstractions for boolbuilder."""

from boolbuilder.kernel.result import FinalResult
from boolbuilder.kernel.trace import Evidence, Trace

__all__ = [
    "FinalResult",
    "Evidence",
    "Trace",
]
