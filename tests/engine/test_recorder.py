import pytest

from engine.errors import AlgorithmNotSupported
from engine.executor import SortingExecutor
from engine.recorder import Recorder
from engine.registry import AlgorithmRegistry

SCENARIO = [64, 34, 25, 12, 22, 11, 90]


class StoppingRecorder(Recorder):
    """Stops the executor once `limit` steps have been recorded."""

    def __init__(self, executor, limit: int):
        super().__init__(executor)
        self.limit = limit

    def record_step(self, step) -> None:
        super().record_step(step)
        if len(self.steps) == self.limit:
            self.executor.stop()


def make_executor() -> SortingExecutor:
    return SortingExecutor(AlgorithmRegistry(poll_interval=0.01))


def test_run_to_completion_computes_metrics() -> None:
    rec = Recorder(make_executor())
    rec.start("bubble_sort", SCENARIO, animation_speed=100)

    metrics = rec.run_to_completion()

    assert rec.get_metrics() is metrics
    assert metrics.algo_key == "bubble_sort"
    assert metrics.algo_label == "Bubble Sort"
    assert metrics.input_size == len(SCENARIO)
    assert metrics.total_steps == len(rec.steps)
    assert metrics.comparisons > 0
    assert metrics.swaps > 0
    assert metrics.completed
    assert not metrics.stopped
    assert metrics.memory_bytes > 0
    assert rec.steps[-1].values == sorted(SCENARIO)


def test_distribution_sorts_count_moves_not_swaps() -> None:
    rec = Recorder(make_executor())
    rec.start("counting_sort", SCENARIO)
    metrics = rec.run_to_completion()

    assert metrics.swaps == 0
    assert metrics.moves == len(SCENARIO)


def test_stopped_run_still_reports_metrics() -> None:
    rec = StoppingRecorder(make_executor(), limit=6)
    rec.start("quick_sort", SCENARIO)

    metrics = rec.run_to_completion()

    assert metrics.stopped
    assert not metrics.completed
    assert metrics.total_steps == 6


def test_unknown_algorithm_fails_at_start() -> None:
    with pytest.raises(AlgorithmNotSupported):
        Recorder(make_executor()).start("stooge_sort", [1])


def test_run_requires_start() -> None:
    with pytest.raises(RuntimeError):
        Recorder(make_executor()).run_to_completion()


def test_export_is_serialisable_snapshot() -> None:
    rec = Recorder(make_executor())
    rec.start("insertion_sort", [3, 1, 2])
    rec.run_to_completion()

    data = rec.export()

    assert data["algo_key"] == "insertion_sort"
    assert data["input"] == [3, 1, 2]
    assert data["metrics"]["completed"] is True
    assert len(data["steps"]) == len(rec.steps)
    assert data["steps"][-1]["type"] == "sorted"
