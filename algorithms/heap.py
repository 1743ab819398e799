"""
heap.py — Heap Sort
====================
Build a max-heap bottom-up (heapify n/2-1 .. 0), then repeatedly swap
the root with the last unsorted slot, settle that slot, and sift the new
root down through the shrunken heap.

Unstable.
"""

from typing import Iterator, List

from model.element import Element, ElementState
from algorithms.step import Step, StepBuilder, DEFAULT_DELAY_MS


PSEUDOCODE: List[str] = [
    "def heap_sort(a):",
    "    for i in n/2-1 .. 0: heapify(a, n, i)",
    "    for i in n-1 .. 1:",
    "        swap(a[0], a[i]); mark a[i] sorted",
    "        heapify(a, i, 0)",
    "def heapify(a, n, i):",
    "    largest ← max of i, 2i+1, 2i+2 (within n)",
    "    if largest ≠ i: swap(a[i], a[largest]); heapify(a, n, largest)",
]


def heap_sort(elements: List[Element], delay: int = DEFAULT_DELAY_MS) -> Iterator[Step]:
    sb = StepBuilder(elements, delay)
    n  = len(sb)
    if n < 2:
        yield from sb.trivial("Heap sort")
        return

    yield sb.highlight([], "Start heap sort")
    yield sb.highlight([], "Build the max-heap")

    for i in range(n // 2 - 1, -1, -1):
        yield from _heapify(sb, n, i)

    for i in range(n - 1, 0, -1):
        sb.set_state(ElementState.SWAPPING, 0, i)
        yield sb.swap([0, i], f"Swap root {sb.value(0)} with {sb.value(i)} at position {i}")
        sb.exchange(0, i)
        sb.set_state(ElementState.NORMAL, 0)

        sb.mark_sorted(i)
        yield sb.highlight([i], f"Position {i} is settled with {sb.value(i)}")

        yield from _heapify(sb, i, 0)

    yield sb.finish("Heap sort complete")


def _heapify(sb: StepBuilder, n: int, i: int) -> Iterator[Step]:
    largest = i
    left    = 2 * i + 1
    right   = 2 * i + 2

    sb.set_state(ElementState.COMPARING, i)
    yield sb.highlight([i], f"Heapify node {i} ({sb.value(i)})")

    if left < n:
        sb.set_state(ElementState.COMPARING, left)
        yield sb.compare([i, left], f"Compare parent {sb.value(i)} with left child {sb.value(left)}")
        if sb.value(left) > sb.value(largest):
            largest = left
            yield sb.highlight([left], "Left child is larger")
        sb.set_state(ElementState.NORMAL, left)

    if right < n:
        sb.set_state(ElementState.COMPARING, right)
        yield sb.compare(
            [largest, right],
            f"Compare current largest {sb.value(largest)} with right child {sb.value(right)}",
        )
        if sb.value(right) > sb.value(largest):
            largest = right
            yield sb.highlight([right], "Right child is larger")
        sb.set_state(ElementState.NORMAL, right)

    if largest == i:
        sb.set_state(ElementState.NORMAL, i)
        return

    sb.set_state(ElementState.SWAPPING, i, largest)
    yield sb.swap([i, largest], f"Swap node {i} with node {largest}")
    sb.exchange(i, largest)
    sb.set_state(ElementState.NORMAL, i, largest)

    yield from _heapify(sb, n, largest)
