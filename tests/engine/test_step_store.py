from pathlib import Path

import pytest

from algorithms import get_algorithm
from engine.errors import PersistenceFailure
from engine.store import StepStore
from model.element import wrap


def quick_steps():
    return list(get_algorithm("quick_sort").fn(wrap([5, 1, 4, 1, 3]), 150))


def test_round_trip_reproduces_every_field(tmp_path: Path) -> None:
    store = StepStore(tmp_path / "steps.json")
    steps = quick_steps()

    store.save(steps)
    loaded = store.load()

    assert len(loaded) == len(steps)
    for original, restored in zip(steps, loaded):
        assert restored.to_dict() == original.to_dict()


def test_load_without_a_file_is_empty(tmp_path: Path) -> None:
    assert StepStore(tmp_path / "missing.json").load() == []


def test_save_replaces_the_previous_run(tmp_path: Path) -> None:
    store = StepStore(tmp_path / "steps.json")
    store.save(quick_steps())

    store.save([])

    assert store.load() == []
    assert not (tmp_path / "steps.json.tmp").exists()


def test_clear_removes_the_file_and_tolerates_absence(tmp_path: Path) -> None:
    store = StepStore(tmp_path / "steps.json")
    store.save(quick_steps())

    store.clear()
    store.clear()

    assert store.load() == []


def test_corrupt_file_is_a_persistence_failure(tmp_path: Path) -> None:
    path = tmp_path / "steps.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(PersistenceFailure) as exc_info:
        StepStore(path).load()
    assert exc_info.value.kind == "persistence_failure"


def test_unknown_step_type_is_a_persistence_failure(tmp_path: Path) -> None:
    path = tmp_path / "steps.json"
    path.write_text('{"version": 1, "steps": [{"type": "shuffle"}]}', encoding="utf-8")

    with pytest.raises(PersistenceFailure):
        StepStore(path).load()


def test_unwritable_location_is_a_persistence_failure(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")

    with pytest.raises(PersistenceFailure):
        StepStore(blocker / "steps.json").save(quick_steps())
