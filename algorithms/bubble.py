"""
bubble.py — Bubble Sort
========================
Generator-based bubble sort.  Yields a Step at every meaningful event:
  1. Compare an adjacent pair
  2. Swap the pair when the left value is larger
  3. Settle the last unsorted slot at the end of each pass
  4. Early exit when a pass makes no swaps
  5. Final step  →  whole array sorted

Stable: equal neighbours are never swapped.
"""

from typing import Iterator, List

from model.element import Element, ElementState
from algorithms.step import Step, StepBuilder, DEFAULT_DELAY_MS


PSEUDOCODE: List[str] = [
    "def bubble_sort(a):",
    "    for i in 0 .. n-1:",
    "        swapped ← false",
    "        for j in 0 .. n-i-2:",
    "            if a[j] > a[j+1]:",
    "                swap(a[j], a[j+1]); swapped ← true",
    "        mark a[n-i-1] sorted",
    "        if not swapped: return",
]


def bubble_sort(elements: List[Element], delay: int = DEFAULT_DELAY_MS) -> Iterator[Step]:
    sb = StepBuilder(elements, delay)
    n  = len(sb)
    if n < 2:
        yield from sb.trivial("Bubble sort")
        return

    yield sb.highlight([], "Start bubble sort")

    for i in range(n):
        swapped = False
        yield sb.highlight([i], f"Pass {i + 1} begins")

        for j in range(n - i - 1):
            sb.set_state(ElementState.COMPARING, j, j + 1)
            yield sb.compare([j, j + 1], f"Compare {sb.value(j)} and {sb.value(j + 1)}")

            if sb.value(j) > sb.value(j + 1):
                sb.set_state(ElementState.SWAPPING, j, j + 1)
                yield sb.swap([j, j + 1], f"Swap {sb.value(j)} and {sb.value(j + 1)}")
                sb.exchange(j, j + 1)
                swapped = True

            sb.set_state(ElementState.NORMAL, j, j + 1)

        last = n - i - 1
        sb.mark_sorted(last)
        yield sb.highlight([last], f"Position {last} is settled")

        if not swapped:
            rest = list(range(last))
            sb.mark_sorted(*rest)
            yield sb.highlight(rest, "No swaps in this pass, the array is already ordered")
            break

    yield sb.finish("Bubble sort complete")
