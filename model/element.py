from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Union
import uuid


# ---------------------------------------------------------------------------
# Element State Enum — maps 1-to-1 with the bar palette
# ---------------------------------------------------------------------------
class ElementState(Enum):
    NORMAL    = "normal"      # default blue
    COMPARING = "comparing"   # yellow — part of the current comparison
    SWAPPING  = "swapping"    # red — about to trade places
    SORTED    = "sorted"      # green — settled in its final slot
    PIVOT     = "pivot"       # purple — quick sort pivot
    MIN       = "min"         # orange — selection sort running minimum
    MAX       = "max"         # pink


def _new_id() -> str:
    return uuid.uuid4().hex


# ---------------------------------------------------------------------------
# Element
# ---------------------------------------------------------------------------
@dataclass(slots=True)
class Element:
    """
    One array slot during a sort.

    Attributes:
        value     : The integer being sorted.  Never changes; moves exchange
                    whole elements.
        position  : Index of the slot currently holding this element.
        state     : Transient highlight, reset after each operation.
        is_sorted : Settled flag.  Algorithms keep it attached to the slot,
                    so once a slot is marked it stays marked for the run.
        id        : Stable identity, carried through every snapshot.

    Equality compares (value, position, state) only.
    """

    value:     int
    position:  int
    state:     ElementState = ElementState.NORMAL
    is_sorted: bool         = field(default=False, compare=False)
    id:        str          = field(default_factory=_new_id, compare=False)

    # ------------------------------------------------------------------
    # Serialisation  (for save / export / import)
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "id":        self.id,
            "value":     self.value,
            "position":  self.position,
            "state":     self.state.value,
            "is_sorted": self.is_sorted,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Element":
        return cls(
            value=int(data["value"]),
            position=int(data["position"]),
            state=ElementState(data.get("state", "normal")),
            is_sorted=bool(data.get("is_sorted", False)),
            id=data.get("id") or _new_id(),
        )

    def __repr__(self) -> str:
        flag = "*" if self.is_sorted else ""
        return f"Element({self.value}@{self.position} {self.state.value}{flag})"


def wrap(values: Iterable[Union[int, Element]]) -> List[Element]:
    """
    Build a fresh working array.  Plain ints get new identities; Elements
    keep theirs but start over at position i in the normal state.
    """
    elements: List[Element] = []
    for i, item in enumerate(values):
        if isinstance(item, Element):
            elements.append(Element(value=item.value, position=i, id=item.id))
        else:
            elements.append(Element(value=int(item), position=i))
    return elements
