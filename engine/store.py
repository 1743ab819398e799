"""
store.py — Step Store
======================
Keeps the most recent completed run on disk as JSON so it can be
replayed later.

    store = StepStore("last_run.json")
    store.save(steps)
    store.load()      # [] when nothing has been saved
    store.clear()

Every Step / Element field round-trips.  I/O and decode problems surface
as PersistenceFailure, never as raw OSError / ValueError.
"""

import json
import logging
import os
from pathlib import Path
from typing import List, Sequence, Union

from algorithms.step import Step
from engine.errors import PersistenceFailure


logger = logging.getLogger(__name__)

FORMAT_VERSION = 1


def steps_to_dict(steps: Sequence[Step]) -> dict:
    return {"version": FORMAT_VERSION, "steps": [s.to_dict() for s in steps]}


def steps_from_dict(data: dict) -> List[Step]:
    return [Step.from_dict(s) for s in data.get("steps", [])]


class StepStore:

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def save(self, steps: Sequence[Step]) -> None:
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp, "w", encoding="utf-8") as fh:
                json.dump(steps_to_dict(steps), fh)
            os.replace(tmp, self.path)
        except (OSError, TypeError, ValueError) as exc:
            raise PersistenceFailure(f"could not save steps to {self.path}: {exc}") from exc
        logger.debug("saved %d step(s) to %s", len(steps), self.path)

    def load(self) -> List[Step]:
        if not self.path.exists():
            return []
        try:
            with open(self.path, encoding="utf-8") as fh:
                data = json.load(fh)
            return steps_from_dict(data)
        except (OSError, ValueError, KeyError, TypeError) as exc:
            raise PersistenceFailure(f"could not load steps from {self.path}: {exc}") from exc

    def clear(self) -> None:
        try:
            self.path.unlink(missing_ok=True)
        except OSError as exc:
            raise PersistenceFailure(f"could not clear {self.path}: {exc}") from exc
