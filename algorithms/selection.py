"""
selection.py — Selection Sort
==============================
For each position, scan the unsorted tail for its minimum (tagged MIN as
the candidate changes), then swap it into place at most once per pass.

Unstable: the long-distance swap can carry an element past its equals.
"""

from typing import Iterator, List

from model.element import Element, ElementState
from algorithms.step import Step, StepBuilder, DEFAULT_DELAY_MS


PSEUDOCODE: List[str] = [
    "def selection_sort(a):",
    "    for i in 0 .. n-2:",
    "        min ← i",
    "        for j in i+1 .. n-1:",
    "            if a[j] < a[min]: min ← j",
    "        if min ≠ i: swap(a[i], a[min])",
    "        mark a[i] sorted",
]


def selection_sort(elements: List[Element], delay: int = DEFAULT_DELAY_MS) -> Iterator[Step]:
    sb = StepBuilder(elements, delay)
    n  = len(sb)
    if n < 2:
        yield from sb.trivial("Selection sort")
        return

    yield sb.highlight([], "Start selection sort")

    for i in range(n - 1):
        min_index = i
        sb.set_state(ElementState.MIN, i)
        yield sb.highlight([i], f"Pass {i + 1}: assume position {i} holds the minimum")

        for j in range(i + 1, n):
            sb.set_state(ElementState.COMPARING, j, min_index)
            yield sb.compare(
                [j, min_index],
                f"Compare {sb.value(j)} with current minimum {sb.value(min_index)}",
            )

            if sb.value(j) < sb.value(min_index):
                sb.set_state(ElementState.NORMAL, min_index)
                min_index = j
                sb.set_state(ElementState.MIN, min_index)
                yield sb.highlight([min_index], f"New minimum {sb.value(min_index)}")
            else:
                sb.set_state(ElementState.NORMAL, j)
                sb.set_state(ElementState.MIN, min_index)

        if min_index != i:
            sb.set_state(ElementState.SWAPPING, i, min_index)
            yield sb.swap([i, min_index], f"Swap positions {i} and {min_index}")
            sb.exchange(i, min_index)
            sb.set_state(ElementState.NORMAL, min_index)

        sb.mark_sorted(i)
        yield sb.highlight([i], f"Position {i} is settled with {sb.value(i)}")

    yield sb.finish("Selection sort complete")
