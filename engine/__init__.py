"""
engine/
-------
Execution, control, replay and recording layer.

    from engine import AlgorithmRegistry, SortingExecutor, StepStore
"""

from engine.errors   import (
    SortingError,
    InvalidArraySize,
    InvalidRange,
    AlgorithmNotSupported,
    SortInProgress,
    SortStopped,
    PersistenceFailure,
)
from engine.control  import SortControl, POLL_INTERVAL
from engine.runner   import SortRunner
from engine.registry import AlgorithmRegistry
from engine.store    import StepStore
from engine.executor import SortingExecutor
from engine.stepper  import Stepper, StepperState, SPEED_PRESETS, SortStatistics, tally
from engine.recorder import Recorder, RunMetrics

__all__ = [
    "SortingError",
    "InvalidArraySize",
    "InvalidRange",
    "AlgorithmNotSupported",
    "SortInProgress",
    "SortStopped",
    "PersistenceFailure",
    "SortControl",
    "POLL_INTERVAL",
    "SortRunner",
    "AlgorithmRegistry",
    "StepStore",
    "SortingExecutor",
    "Stepper",
    "StepperState",
    "SPEED_PRESETS",
    "SortStatistics",
    "tally",
    "Recorder",
    "RunMetrics",
]
