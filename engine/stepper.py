"""
stepper.py — Step-by-Step Replay Engine
========================================
Replays a recorded list of Steps.  The UI drives it with
play/pause/next/prev and reads the current frame plus the running
statistics for the statistics panel.

State machine:
    IDLE  →  start()  →  PAUSED
    PAUSED  →  play()   →  PLAYING
    PLAYING →  pause()  →  PAUSED
    PLAYING →  (steps exhausted) → FINISHED
    any     →  reset()  →  IDLE

Timing:
  With `use_step_delay` on (the default) tick() waits each step's own
  `delay`; otherwise it waits `speed` seconds, set from SPEED_PRESETS.

Thread safety:
  This class is NOT thread-safe.  Drive it from one thread.
"""

import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, List, Optional

from algorithms.step import Step, StepType


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class StepperState(Enum):
    IDLE     = "idle"
    PAUSED   = "paused"
    PLAYING  = "playing"
    FINISHED = "finished"


# ---------------------------------------------------------------------------
# Speed presets (seconds per step)
# ---------------------------------------------------------------------------
SPEED_PRESETS = {
    "slow":   2.0,
    "medium": 0.5,
    "fast":   0.2,
    "turbo":  0.1,
}


# ---------------------------------------------------------------------------
# Statistics
# ---------------------------------------------------------------------------
@dataclass
class SortStatistics:
    comparisons: int  = 0
    swaps:       int  = 0
    moves:       int  = 0
    steps:       int  = 0
    completed:   bool = False

    def to_dict(self) -> dict:
        return dict(self.__dict__)


def tally(steps: Iterable[Step]) -> SortStatistics:
    """Count operations over a step sequence."""
    stats = SortStatistics()
    for step in steps:
        stats.steps += 1
        if step.type == StepType.COMPARE:
            stats.comparisons += 1
        elif step.type == StepType.SWAP:
            stats.swaps += 1
        elif step.type == StepType.MOVE:
            stats.moves += 1
        elif step.type == StepType.SORTED:
            stats.completed = True
    return stats


# ---------------------------------------------------------------------------
# Stepper
# ---------------------------------------------------------------------------
class Stepper:
    """
    Attributes:
        state          : Current StepperState.
        steps          : The step list being replayed.
        current_idx    : Index into `steps` that is currently displayed.
        speed          : Seconds between ticks when not using step delays.
        use_step_delay : Pace by each step's own `delay` instead of `speed`.
        on_step        : Optional callback(Step) fired whenever the current
                         step changes.
    """

    def __init__(
        self,
        on_step: Optional[Callable[[Step], None]] = None,
        use_step_delay: bool = True,
    ):
        self.steps:          List[Step]   = []
        self.current_idx:    int          = -1
        self.state:          StepperState = StepperState.IDLE
        self.speed:          float        = SPEED_PRESETS["medium"]
        self.use_step_delay: bool         = use_step_delay
        self.on_step:        Optional[Callable[[Step], None]] = on_step

        self._last_tick: float = 0.0

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self, steps: Iterable[Step]) -> None:
        """Load a step list and show its first frame."""
        self.steps       = list(steps)
        self.current_idx = -1
        if not self.steps:
            self.state = StepperState.FINISHED
            return
        self.state = StepperState.PAUSED
        self._goto(0)

    def reset(self) -> None:
        self.steps       = []
        self.current_idx = -1
        self.state       = StepperState.IDLE

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def next_step(self) -> bool:
        """Advance one step.  Returns False if already at the end."""
        target = self.current_idx + 1
        if target >= len(self.steps):
            if self.steps:
                self.state = StepperState.FINISHED
            return False
        self._goto(target)
        if target == len(self.steps) - 1:
            self.state = StepperState.FINISHED
        return True

    def prev_step(self) -> bool:
        if self.current_idx <= 0:
            return False
        self._goto(self.current_idx - 1)
        if self.state == StepperState.FINISHED:
            self.state = StepperState.PAUSED
        return True

    def goto_step(self, idx: int) -> bool:
        if not 0 <= idx < len(self.steps):
            return False
        self._goto(idx)
        if idx == len(self.steps) - 1:
            self.state = StepperState.FINISHED
        elif self.state == StepperState.FINISHED:
            self.state = StepperState.PAUSED
        return True

    def rewind(self) -> None:
        if self.steps:
            self._goto(0)
            self.state = StepperState.PAUSED

    def jump_to_end(self) -> None:
        if self.steps:
            self._goto(len(self.steps) - 1)
            self.state = StepperState.FINISHED

    # ------------------------------------------------------------------
    # Play / Pause
    # ------------------------------------------------------------------
    def play(self) -> None:
        if self.state in (StepperState.IDLE, StepperState.FINISHED):
            return
        self.state      = StepperState.PLAYING
        self._last_tick = time.monotonic()

    def pause(self) -> None:
        if self.state == StepperState.PLAYING:
            self.state = StepperState.PAUSED

    def toggle_play(self) -> None:
        if self.state == StepperState.PLAYING:
            self.pause()
        else:
            self.play()

    # ------------------------------------------------------------------
    # Tick  (call this from your event loop / timer)
    # ------------------------------------------------------------------
    def tick(self, now: Optional[float] = None) -> bool:
        """
        If playing and the current frame's wait has elapsed, advance one
        step.  Returns True if a step was taken.
        """
        if self.state != StepperState.PLAYING:
            return False
        now = time.monotonic() if now is None else now
        if now - self._last_tick < self.interval:
            return False
        self._last_tick = now
        return self.next_step()

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def set_speed(self, preset: str) -> None:
        self.speed          = SPEED_PRESETS.get(preset, SPEED_PRESETS["medium"])
        self.use_step_delay = False

    def set_speed_value(self, seconds: float) -> None:
        self.speed          = max(0.02, seconds)
        self.use_step_delay = False

    @property
    def interval(self) -> float:
        step = self.current_step
        if self.use_step_delay and step is not None:
            return step.delay / 1000.0
        return self.speed

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def current_step(self) -> Optional[Step]:
        if 0 <= self.current_idx < len(self.steps):
            return self.steps[self.current_idx]
        return None

    @property
    def total_steps(self) -> int:
        return len(self.steps)

    @property
    def statistics(self) -> SortStatistics:
        """Counts over the steps shown so far, current one included."""
        return tally(self.steps[: self.current_idx + 1])

    @property
    def is_finished(self) -> bool:
        return self.state == StepperState.FINISHED

    @property
    def is_playing(self) -> bool:
        return self.state == StepperState.PLAYING

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _goto(self, idx: int) -> None:
        self.current_idx = idx
        if self.on_step is not None:
            self.on_step(self.steps[idx])
