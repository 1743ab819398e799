"""
step.py — Sorting Step Snapshot
================================
Every algorithm is a generator that yields Step objects.
A Step is a frozen-in-time picture of everything the visualizer
needs to render one frame:

    • What kind of operation just happened (compare / swap / move / …)
    • Which slots it concerns
    • A full copy of the array at that instant
    • A plain-English description
    • The suggested animation delay

Design decisions:
  - Step is a frozen dataclass.  It is a SNAPSHOT: `array` holds copies
    of the live elements, so the algorithm can keep mutating its working
    array without rewriting history.
  - The algorithm generator is the only writer; runner / stepper /
    renderer are pure readers.
  - `delay` is advisory.  Producing a step never sleeps; pacing belongs
    to whoever consumes the sequence.
"""

from copy import copy
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Tuple

from model.element import Element, ElementState


DEFAULT_DELAY_MS = 500


class StepType(Enum):
    COMPARE   = "compare"
    SWAP      = "swap"
    MOVE      = "move"
    HIGHLIGHT = "highlight"
    SORTED    = "sorted"
    # reserved tags, never emitted
    PARTITION = "partition"
    MERGE     = "merge"
    HEAPIFY   = "heapify"


@dataclass(frozen=True)
class Step:
    """
    Attributes:
        type        : StepType of the recorded operation.
        indices     : Slots the operation concerns (may be empty).
        description : Human-readable text for the explanation panel.
        array       : Full-length snapshot of the working array.
        delay       : Suggested animation pause in milliseconds.
    """

    type:        StepType
    indices:     Tuple[int, ...]      = ()
    description: str                  = ""
    array:       Tuple[Element, ...]  = field(default_factory=tuple)
    delay:       int                  = DEFAULT_DELAY_MS

    @property
    def values(self) -> List[int]:
        return [e.value for e in self.array]

    def to_dict(self) -> dict:
        return {
            "type":        self.type.value,
            "indices":     list(self.indices),
            "description": self.description,
            "array":       [e.to_dict() for e in self.array],
            "delay":       self.delay,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Step":
        return cls(
            type=StepType(data["type"]),
            indices=tuple(int(i) for i in data.get("indices", [])),
            description=data.get("description", ""),
            array=tuple(Element.from_dict(e) for e in data.get("array", [])),
            delay=int(data.get("delay", DEFAULT_DELAY_MS)),
        )


# ---------------------------------------------------------------------------
# Convenience builder so algorithms don't have to spell out every kwarg
# ---------------------------------------------------------------------------
class StepBuilder:
    """
    Mutable scratch-pad wrapped around the live working array of one run.

    Usage inside an algorithm generator:
        sb = StepBuilder(elements, delay)
        sb.set_state(ElementState.COMPARING, j, j + 1)
        yield sb.compare([j, j + 1], f"Compare {sb.value(j)} and {sb.value(j + 1)}")
        sb.exchange(j, j + 1)
    """

    def __init__(self, elements: List[Element], delay: int = DEFAULT_DELAY_MS):
        self.elements: List[Element] = elements
        self.delay:    int           = delay

    def __len__(self) -> int:
        return len(self.elements)

    def value(self, index: int) -> int:
        return self.elements[index].value

    # -- mutation helpers --
    def set_state(self, state: ElementState, *indices: int) -> None:
        for i in indices:
            self.elements[i].state = state

    def exchange(self, i: int, j: int) -> None:
        """Swap two whole elements.  The settled flag stays with the slot."""
        if i == j:
            return
        a, b = self.elements[i], self.elements[j]
        a.is_sorted, b.is_sorted = b.is_sorted, a.is_sorted
        a.position, b.position = j, i
        self.elements[i], self.elements[j] = b, a

    def place(self, index: int, element: Element, state: ElementState = ElementState.NORMAL) -> None:
        """Write a copy of `element` into slot `index`."""
        placed = copy(element)
        placed.position = index
        placed.state = state
        placed.is_sorted = element.is_sorted or self.elements[index].is_sorted
        self.elements[index] = placed

    def replace_all(self, elements: Iterable[Element]) -> None:
        """Swap in a whole new arrangement (output buffer of a distribution pass)."""
        for index, element in enumerate(elements):
            self.place(index, element, element.state)

    def mark_sorted(self, *indices: int) -> None:
        for i in indices:
            self.elements[i].state = ElementState.SORTED
            self.elements[i].is_sorted = True

    def copy_range(self, start: int, stop: int) -> List[Element]:
        return [copy(e) for e in self.elements[start:stop]]

    def snapshot(self) -> Tuple[Element, ...]:
        return tuple(copy(e) for e in self.elements)

    # -- step builders --
    def build(self, step_type: StepType, indices: Iterable[int] = (), description: str = "") -> Step:
        return Step(
            type=step_type,
            indices=tuple(indices),
            description=description,
            array=self.snapshot(),
            delay=self.delay,
        )

    def compare(self, indices: Iterable[int], description: str) -> Step:
        return self.build(StepType.COMPARE, indices, description)

    def swap(self, indices: Iterable[int], description: str) -> Step:
        return self.build(StepType.SWAP, indices, description)

    def move(self, indices: Iterable[int], description: str) -> Step:
        return self.build(StepType.MOVE, indices, description)

    def highlight(self, indices: Iterable[int], description: str) -> Step:
        return self.build(StepType.HIGHLIGHT, indices, description)

    def sorted(self, description: str) -> Step:
        return self.build(StepType.SORTED, (), description)

    def finish(self, description: str) -> Step:
        """Settle every slot and emit the terminal step."""
        self.mark_sorted(*range(len(self.elements)))
        return self.sorted(description)

    def trivial(self, label: Optional[str] = None) -> Iterator[Step]:
        """
        Steps for inputs too short to sort: nothing for an empty array,
        a single terminal step for one element.
        """
        if not self.elements:
            return
        yield self.finish(f"{label or 'Array'}: a single element is already sorted")
