"""
runner.py — Single-Algorithm Runner
====================================
Binds one catalogue entry to one SortControl and drives its generator.

The generator does one unit of work (a comparison, a swap, a move) per
`next()`, so the runner's checkpoint before every `next()` is exactly
the "check before each step" rule: a pause holds the algorithm between
two steps, a stop means no further step is produced.

    runner = SortRunner(get_algorithm("quick_sort"))
    steps  = runner.sort([5, 3, 8, 1])
"""

import logging
from typing import Callable, Iterable, List, Optional, Union

from algorithms import AlgoInfo
from algorithms.step import Step, DEFAULT_DELAY_MS
from engine.control import SortControl, POLL_INTERVAL
from engine.errors import SortInProgress, SortStopped
from model.element import Element, wrap


logger = logging.getLogger(__name__)


class SortRunner:
    """
    Attributes:
        info    : The AlgoInfo this runner executes.
        control : Run gate and pause/stop flags for this algorithm.
    """

    def __init__(self, info: AlgoInfo, poll_interval: float = POLL_INTERVAL):
        self.info:    AlgoInfo    = info
        self.control: SortControl = SortControl(poll_interval)

    @property
    def key(self) -> str:
        return self.info.key

    # ------------------------------------------------------------------
    # Run
    # ------------------------------------------------------------------
    def sort(
        self,
        values: Iterable[Union[int, Element]],
        animation_speed: int = DEFAULT_DELAY_MS,
        on_step: Optional[Callable[[Step], None]] = None,
        pace: bool = False,
        on_begin: Optional[Callable[[], None]] = None,
    ) -> List[Step]:
        """
        Run the algorithm to completion and return its steps.

        Args:
            values          : ints, or Elements whose identity should be kept.
            animation_speed : delay (ms) recorded on every step.
            on_step         : called with each step right after it is recorded.
            pace            : sleep each step's delay between steps (stop
                              still interrupts the sleep).
            on_begin        : called once the run gate is held, before the
                              first checkpoint.  Steering applied here is
                              not cleared by the gate.

        Raises:
            SortInProgress : this algorithm already has a run in flight.
            SortStopped    : the run was stopped; `.steps` holds the partial list.
        """
        if not self.control.try_begin_run():
            raise SortInProgress(self.info.key)

        steps: List[Step] = []
        try:
            if on_begin is not None:
                on_begin()
            elements = wrap(values)
            logger.debug("%s: sorting %d element(s)", self.info.key, len(elements))
            generator = self.info.fn(elements, animation_speed)
            try:
                while self.control.checkpoint():
                    step = next(generator, None)
                    if step is None:
                        break
                    steps.append(step)
                    if on_step is not None:
                        on_step(step)
                    if pace and not self.control.sleep(step.delay / 1000.0):
                        break
            finally:
                generator.close()
            stopped = self.control.is_stopped
        finally:
            self.control.end_run()

        if stopped:
            logger.info("%s: stopped after %d step(s)", self.info.key, len(steps))
            raise SortStopped(steps, self.info.key)

        logger.debug("%s: finished with %d step(s)", self.info.key, len(steps))
        return steps

    # ------------------------------------------------------------------
    # Steering (safe from any thread)
    # ------------------------------------------------------------------
    def stop(self) -> None:
        self.control.set_paused(False)
        self.control.set_stopped(True)

    def pause(self) -> None:
        self.control.set_paused(True)

    def resume(self) -> None:
        self.control.set_paused(False)

    def reset(self) -> None:
        self.control.reset()

    @property
    def is_running(self) -> bool:
        return self.control.is_running

    def __repr__(self) -> str:
        return f"SortRunner({self.info.key}, {self.control!r})"
