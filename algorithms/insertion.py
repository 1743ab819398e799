"""
insertion.py — Insertion Sort
==============================
Shift-based insertion into a growing sorted prefix.  The element being
inserted walks left one slot per MOVE step until its left neighbour is
no larger.

Stable: the walk stops at the first neighbour <= the key, so equal
values never pass each other.  `insert_left` is shared with bucket sort,
which insertion-sorts each bucket's slice in place.
"""

from typing import Iterator, List

from model.element import Element, ElementState
from algorithms.step import Step, StepBuilder, DEFAULT_DELAY_MS


PSEUDOCODE: List[str] = [
    "def insertion_sort(a):",
    "    for i in 1 .. n-1:",
    "        key ← a[i]; j ← i - 1",
    "        while j >= 0 and a[j] > key:",
    "            a[j+1] ← a[j]; j ← j - 1",
    "        a[j+1] ← key",
    "        mark a[0..i] sorted",
]


def insert_left(sb: StepBuilder, start: int, i: int, prefix: str = "") -> Iterator[Step]:
    """Shift the element at `i` left until sb.elements[start:i+1] is ordered."""
    key = sb.value(i)
    sb.set_state(ElementState.COMPARING, i)
    yield sb.highlight([i], f"{prefix}Insert {key}")

    j = i - 1
    while j >= start:
        sb.set_state(ElementState.COMPARING, j, j + 1)
        yield sb.compare([j, j + 1], f"{prefix}Compare {sb.value(j)} and {key}")

        if sb.value(j) <= key:
            sb.set_state(ElementState.NORMAL, j, j + 1)
            yield sb.highlight([j + 1], f"{prefix}{key} belongs at position {j + 1}")
            return

        shifted = sb.value(j)
        sb.exchange(j, j + 1)
        sb.set_state(ElementState.NORMAL, j + 1)
        yield sb.move([j, j + 1], f"{prefix}{shifted} > {key}, shift {shifted} right")
        j -= 1

    sb.set_state(ElementState.NORMAL, start)


def insertion_sort(elements: List[Element], delay: int = DEFAULT_DELAY_MS) -> Iterator[Step]:
    sb = StepBuilder(elements, delay)
    n  = len(sb)
    if n < 2:
        yield from sb.trivial("Insertion sort")
        return

    yield sb.highlight([], "Start insertion sort")

    sb.mark_sorted(0)
    yield sb.highlight([0], f"First element {sb.value(0)} forms the sorted prefix")

    for i in range(1, n):
        yield from insert_left(sb, 0, i)
        sb.mark_sorted(*range(i + 1))
        yield sb.highlight(list(range(i + 1)), f"First {i + 1} elements are sorted")

    yield sb.finish("Insertion sort complete")
