"""
recorder.py — Run Recorder & Metrics
=====================================
Records one execution through the SortingExecutor and computes the
numbers the statistics panel shows.

Usage:
    rec = Recorder(executor)
    rec.start("quick_sort", [5, 3, 8, 1], animation_speed=200)
    metrics = rec.run_to_completion()
    rec.export()                      # serialisable snapshot for save/replay

Steps are appended as the executor produces them, so another thread may
read `rec.steps` while the run is still going.  A stopped run still
yields metrics, with `stopped=True` and the partial step list.
"""

import logging
import sys
import time
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Union

from algorithms.step import Step, DEFAULT_DELAY_MS
from engine.errors import SortStopped
from engine.executor import SortingExecutor
from engine.stepper import tally
from model.element import Element


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metrics dataclass
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:     str   = ""
    algo_label:   str   = ""
    input_size:   int   = 0
    total_steps:  int   = 0
    comparisons:  int   = 0
    swaps:        int   = 0
    moves:        int   = 0
    wall_time_ms: float = 0.0
    memory_bytes: int   = 0          # approx size of the step buffer
    completed:    bool  = False      # terminal "sorted" step reached
    stopped:      bool  = False


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        executor : The SortingExecutor runs go through.
        steps    : Steps recorded so far (grows live during a run).
        metrics  : RunMetrics, set by run_to_completion().
    """

    def __init__(self, executor: SortingExecutor):
        self.executor = executor
        self.steps:   List[Step]           = []
        self.metrics: Optional[RunMetrics] = None

        self._algo_key:        str           = ""
        self._values:          List[Union[int, Element]] = []
        self._animation_speed: int           = DEFAULT_DELAY_MS
        self._pace:            bool          = False

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start(
        self,
        algo_key: str,
        values: Iterable[Union[int, Element]],
        animation_speed: int = DEFAULT_DELAY_MS,
        pace: bool = False,
    ) -> None:
        """Prepare a run.  Unknown keys fail here, before anything runs."""
        self.executor.registry.info(algo_key)
        self._algo_key        = algo_key
        self._values          = list(values)
        self._animation_speed = animation_speed
        self._pace            = pace
        self.steps            = []
        self.metrics          = None

    def run_to_completion(self, reservation: Optional[int] = None) -> RunMetrics:
        """
        Execute the prepared run, recording every step, then compute metrics.

        `reservation` is a token from executor.reserve() taken for this run.
        """
        if not self._algo_key:
            raise RuntimeError("Call start() first.")

        self.steps = []
        stopped = False
        began = time.monotonic()
        try:
            self.executor.execute(
                self._algo_key,
                self._values,
                self._animation_speed,
                on_step=self.record_step,
                pace=self._pace,
                reservation=reservation,
            )
        except SortStopped:
            stopped = True
        wall_ms = (time.monotonic() - began) * 1000

        self.metrics = self._compute_metrics(wall_ms, stopped)
        return self.metrics

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    def record_step(self, step: Step) -> None:
        self.steps.append(step)

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        return {
            "algo_key": self._algo_key,
            "input":    [v.value if isinstance(v, Element) else v for v in self._values],
            "metrics":  dict(self.metrics.__dict__) if self.metrics else {},
            "steps":    [s.to_dict() for s in self.steps],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float, stopped: bool) -> RunMetrics:
        info  = self.executor.registry.info(self._algo_key)
        stats = tally(self.steps)

        mem = sys.getsizeof(self.steps)
        for s in self.steps:
            mem += sys.getsizeof(s) + sys.getsizeof(s.array)

        metrics = RunMetrics(
            algo_key=info.key,
            algo_label=info.label,
            input_size=len(self._values),
            total_steps=stats.steps,
            comparisons=stats.comparisons,
            swaps=stats.swaps,
            moves=stats.moves,
            wall_time_ms=round(wall_ms, 2),
            memory_bytes=mem,
            completed=stats.completed,
            stopped=stopped,
        )
        logger.debug("%s metrics: %s", info.key, metrics)
        return metrics
