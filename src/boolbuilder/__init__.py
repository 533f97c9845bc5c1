from .combinators import (
    Condition,
    all_of,
    any_of,
    either,
    fold_all,
    fold_any,
    inverted,
    try_all_of,
    try_any_of,
)
from .config import CombinatorConfig, EmptyPolicy, configure, get_config, override
from .errors import ConditionTypeError, EmptyConditionsError
from .kernel import Evidence, FinalResult, Trace

__all__ = [
    # Combinators
    "all_of",
    "any_of",
    "try_all_of",
    "try_any_of",
    "fold_all",
    "fold_any",
    "either",
    "inverted",
    "Condition",
    # Core
    "FinalResult",
    # Tracing
    "Trace",
    "Evidence",
    # Config
    "CombinatorConfig",
    "EmptyPolicy",
    "configure",
    "get_config",
    "override",
    # Errors
    "EmptyConditionsError",
    "ConditionTypeError",
]
