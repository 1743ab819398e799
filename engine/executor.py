"""
executor.py — Sorting Executor
===============================
The coordinator the UI talks to.  It sits in front of an
AlgorithmRegistry and allows a single execution at a time across all
algorithms.

    executor = SortingExecutor(AlgorithmRegistry(), store=StepStore(path))
    steps = executor.execute("merge_sort", [5, 2, 9, 1])

Lifecycle:
    idle  →  execute()        →  executing
    executing  →  (finished)  →  idle          steps returned, store saved
    executing  →  stop()      →  idle          SortStopped raised
    idle  →  reserve()        →  executing     (runner not started yet)
    executing  ⇄  pause()/resume()
    any   →  reset()          →  idle

Design decisions:
  • The executor keeps its own stopped flag and re-checks it after the
    runner returns.  A stop that lands after the last step was produced
    still ends the execution as stopped.
  • reserve() lets a caller claim the executor before handing the run
    to another thread.  Steering that arrives before the runner starts
    is kept and applied the moment it does.
  • Saving is best-effort.  A failing store is logged and kept on
    `last_persistence_error`; the steps are still returned.
"""

import logging
import threading
from typing import Callable, Iterable, List, Optional, Union

from algorithms.step import Step, DEFAULT_DELAY_MS
from engine.errors import PersistenceFailure, SortInProgress, SortStopped
from engine.registry import AlgorithmRegistry
from engine.runner import SortRunner
from engine.store import StepStore
from model.element import Element


logger = logging.getLogger(__name__)


class SortingExecutor:

    def __init__(self, registry: AlgorithmRegistry, store: Optional[StepStore] = None):
        self.registry = registry
        self.store    = store
        self.last_persistence_error: Optional[PersistenceFailure] = None

        self._lock      = threading.Lock()
        self._executing = False
        self._paused    = False
        self._stopped   = False
        self._live      = False
        self._active: Optional[SortRunner] = None
        self._generation = 0

    # ------------------------------------------------------------------
    # Execute
    # ------------------------------------------------------------------
    def reserve(self, algorithm: str) -> int:
        """
        Claim the executor for `algorithm` without running it yet.

        Returns a reservation token for execute().  From here on the
        executor reports itself executing, and pause()/stop() are held
        until the runner starts, then applied to it.

        Raises:
            AlgorithmNotSupported : unknown algorithm key.
            SortInProgress        : another execution is active.
        """
        runner = self.registry.get(algorithm)
        with self._lock:
            if self._executing:
                raise SortInProgress(algorithm)
            self._executing = True
            self._paused    = False
            self._stopped   = False
            self._live      = False
            self._active    = runner
            self._generation += 1
            return self._generation

    def execute(
        self,
        algorithm: str,
        values: Iterable[Union[int, Element]],
        animation_speed: int = DEFAULT_DELAY_MS,
        on_step: Optional[Callable[[Step], None]] = None,
        pace: bool = False,
        reservation: Optional[int] = None,
    ) -> List[Step]:
        """
        Sort `values` with `algorithm` and return the recorded steps.

        `reservation` is a token from reserve() for this same algorithm;
        without one the executor is claimed here.

        Raises:
            AlgorithmNotSupported : unknown algorithm key.
            SortInProgress        : another execution is active.
            SortStopped           : stop() or reset() ended the run; `.steps`
                                    is the partial list.
        """
        if reservation is None:
            reservation = self.reserve(algorithm)

        generation = reservation
        with self._lock:
            if generation != self._generation:
                # reset() released the reservation before the run began
                raise SortStopped([], algorithm)
            runner = self._active

        def attach() -> None:
            with self._lock:
                if generation != self._generation:
                    runner.stop()
                    return
                self._live = True
                if self._stopped:
                    runner.stop()
                elif self._paused:
                    runner.pause()

        logger.info("executing %s", algorithm)
        try:
            steps = runner.sort(values, animation_speed, on_step=on_step, pace=pace, on_begin=attach)
            with self._lock:
                stopped = self._stopped or generation != self._generation
            if stopped:
                raise SortStopped(steps, algorithm)
        finally:
            with self._lock:
                # a reset may already have handed the executor to a newer run
                if generation == self._generation:
                    self._executing = False
                    self._paused    = False
                    self._live      = False
                    self._active    = None

        self._save(steps)
        return steps

    def _save(self, steps: List[Step]) -> None:
        self.last_persistence_error = None
        if self.store is None:
            return
        try:
            self.store.save(steps)
        except PersistenceFailure as exc:
            logger.warning("could not persist steps: %s", exc.reason)
            self.last_persistence_error = exc

    # ------------------------------------------------------------------
    # Steering
    # ------------------------------------------------------------------
    # Until the runner is live, steering only sets the executor flags and
    # attach() hands them over when the run begins.
    def stop(self) -> None:
        with self._lock:
            self._stopped = True
            self._paused  = False
            runner = self._active
            if runner is not None and self._live:
                logger.info("stop requested for %s", runner.key)
                runner.stop()

    def pause(self) -> None:
        with self._lock:
            runner = self._active
            if runner is None:
                return
            self._paused = True
            if self._live:
                logger.info("pause requested for %s", runner.key)
                runner.pause()

    def resume(self) -> None:
        with self._lock:
            runner = self._active
            self._paused = False
            if runner is not None and self._live:
                logger.info("resume requested for %s", runner.key)
                runner.resume()

    def reset(self) -> None:
        with self._lock:
            runner = self._active
            self._active    = None
            self._executing = False
            self._paused    = False
            self._stopped   = False
            self._live      = False
            self._generation += 1
        if runner is not None:
            runner.stop()
        self.registry.reset_all()

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------
    @property
    def is_executing(self) -> bool:
        with self._lock:
            return self._executing

    @property
    def is_paused(self) -> bool:
        with self._lock:
            return self._paused

    @property
    def active_algorithm(self) -> Optional[str]:
        with self._lock:
            return self._active.key if self._active is not None else None

    def __repr__(self) -> str:
        return (
            f"SortingExecutor(executing={self._executing}, paused={self._paused}, "
            f"active={self._active.key if self._active else None})"
        )
