import threading
import time
from pathlib import Path

import pytest

from algorithms.step import StepType
from engine.errors import (
    AlgorithmNotSupported,
    PersistenceFailure,
    SortInProgress,
    SortStopped,
)
from engine.executor import SortingExecutor
from engine.registry import AlgorithmRegistry
from engine.store import StepStore

SCENARIO = [64, 34, 25, 12, 22, 11, 90]


class BrokenStore(StepStore):
    def save(self, steps) -> None:
        raise PersistenceFailure("disk full")


def make_executor(store=None) -> SortingExecutor:
    return SortingExecutor(AlgorithmRegistry(poll_interval=0.01), store=store)


def test_execute_returns_steps_and_saves_them(tmp_path: Path) -> None:
    store = StepStore(tmp_path / "run.json")
    executor = make_executor(store)

    steps = executor.execute("heap_sort", SCENARIO, animation_speed=300)

    assert steps[-1].type == StepType.SORTED
    assert steps[-1].values == sorted(SCENARIO)
    assert store.load() == steps
    assert executor.last_persistence_error is None
    assert not executor.is_executing
    assert executor.active_algorithm is None


def test_unknown_algorithm_fails_before_any_work() -> None:
    executor = make_executor()
    with pytest.raises(AlgorithmNotSupported):
        executor.execute("sleep_sort", [3, 1])
    assert not executor.is_executing


def test_only_one_execution_at_a_time_across_algorithms() -> None:
    executor = make_executor()
    rejected = []

    def on_step(step) -> None:
        if not rejected:
            assert executor.is_executing
            assert executor.active_algorithm == "bubble_sort"
            with pytest.raises(SortInProgress):
                executor.execute("quick_sort", [2, 1])
            rejected.append(True)

    steps = executor.execute("bubble_sort", SCENARIO, on_step=on_step)

    assert rejected == [True]
    assert steps[-1].values == sorted(SCENARIO)


def test_stop_raises_sort_stopped_with_partial_steps(tmp_path: Path) -> None:
    store = StepStore(tmp_path / "run.json")
    executor = make_executor(store)
    seen = []

    def on_step(step) -> None:
        seen.append(step)
        if len(seen) == 4:
            executor.stop()

    with pytest.raises(SortStopped) as exc_info:
        executor.execute("selection_sort", SCENARIO, on_step=on_step)

    assert len(exc_info.value.steps) == 4
    assert not executor.is_executing
    assert store.load() == []


def test_next_execution_after_a_stop_runs_normally() -> None:
    executor = make_executor()

    def stop_now(step) -> None:
        executor.stop()

    with pytest.raises(SortStopped):
        executor.execute("merge_sort", SCENARIO, on_step=stop_now)

    steps = executor.execute("merge_sort", SCENARIO)
    assert steps[-1].values == sorted(SCENARIO)


def test_persistence_failure_keeps_the_result() -> None:
    executor = make_executor(BrokenStore("unused.json"))

    steps = executor.execute("counting_sort", SCENARIO)

    assert steps[-1].values == sorted(SCENARIO)
    assert isinstance(executor.last_persistence_error, PersistenceFailure)
    assert executor.last_persistence_error.reason == "disk full"


def test_pause_and_resume_forward_to_the_active_run() -> None:
    executor = make_executor()
    seen = []
    paused = threading.Event()
    result = {}

    def on_step(step) -> None:
        seen.append(step)
        if len(seen) == 2:
            executor.pause()
            paused.set()

    thread = threading.Thread(
        target=lambda: result.setdefault("steps", executor.execute("radix_sort", SCENARIO, on_step=on_step))
    )
    thread.start()
    assert paused.wait(1.0)
    assert executor.is_paused

    time.sleep(0.2)
    assert len(seen) == 2

    executor.resume()
    thread.join(2.0)

    assert not executor.is_paused
    assert result["steps"][-1].values == sorted(SCENARIO)


def test_pause_without_a_run_is_a_no_op() -> None:
    executor = make_executor()
    executor.pause()
    assert not executor.is_paused


def test_reset_ends_a_paused_run_and_returns_to_idle() -> None:
    executor = make_executor()
    paused = threading.Event()
    errors = []

    def on_step(step) -> None:
        executor.pause()
        paused.set()

    def work() -> None:
        try:
            executor.execute("shell_sort", SCENARIO, on_step=on_step)
        except SortStopped as exc:
            errors.append(exc)

    thread = threading.Thread(target=work)
    thread.start()
    assert paused.wait(1.0)

    executor.reset()
    thread.join(2.0)

    assert not thread.is_alive()
    assert len(errors) == 1
    assert not executor.is_executing
    assert not executor.registry.get("shell_sort").is_running
    assert executor.execute("shell_sort", [3, 1, 2])[-1].values == [1, 2, 3]


def test_reserve_claims_the_executor_until_the_run_ends() -> None:
    executor = make_executor()
    token = executor.reserve("insertion_sort")

    assert executor.is_executing
    assert executor.active_algorithm == "insertion_sort"
    with pytest.raises(SortInProgress):
        executor.reserve("quick_sort")
    with pytest.raises(SortInProgress):
        executor.execute("quick_sort", [2, 1])

    steps = executor.execute("insertion_sort", SCENARIO, reservation=token)

    assert steps[-1].values == sorted(SCENARIO)
    assert not executor.is_executing


def test_stop_before_the_runner_starts_is_not_lost() -> None:
    executor = make_executor()
    token = executor.reserve("bubble_sort")
    executor.stop()

    with pytest.raises(SortStopped) as exc_info:
        executor.execute("bubble_sort", SCENARIO, reservation=token)

    assert exc_info.value.steps == []
    assert not executor.is_executing
    assert not executor.registry.get("bubble_sort").is_running


def test_pause_before_the_runner_starts_holds_the_first_step() -> None:
    executor = make_executor()
    token = executor.reserve("merge_sort")
    executor.pause()
    seen = []
    result = {}

    thread = threading.Thread(
        target=lambda: result.setdefault(
            "steps", executor.execute("merge_sort", SCENARIO, on_step=seen.append, reservation=token)
        )
    )
    thread.start()
    time.sleep(0.2)

    assert seen == []
    assert executor.is_paused

    executor.resume()
    thread.join(2.0)

    assert result["steps"][-1].values == sorted(SCENARIO)


def test_reset_releases_a_reservation() -> None:
    executor = make_executor()
    token = executor.reserve("heap_sort")

    executor.reset()

    assert not executor.is_executing
    with pytest.raises(SortStopped):
        executor.execute("heap_sort", SCENARIO, reservation=token)
    assert executor.execute("heap_sort", [2, 1])[-1].values == [1, 2]
