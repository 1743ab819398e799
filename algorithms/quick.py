"""
quick.py — Quick Sort
======================
Lomuto partition with the last element of the sub-range as pivot.
Values <= pivot are swapped into the low side, the pivot lands in its
final slot (marked sorted), then the left and right sides are sorted in
that order.  Sub-ranges shorter than two elements are not visited; the
final step settles them.

Unstable.
"""

from typing import Generator, Iterator, List

from model.element import Element, ElementState
from algorithms.step import Step, StepBuilder, DEFAULT_DELAY_MS


PSEUDOCODE: List[str] = [
    "def quick_sort(a, low, high):",
    "    if low < high:",
    "        p ← partition(a, low, high)",
    "        quick_sort(a, low, p - 1)",
    "        quick_sort(a, p + 1, high)",
    "def partition(a, low, high):",
    "    pivot ← a[high]; i ← low - 1",
    "    for j in low .. high-1: if a[j] <= pivot: i ← i + 1; swap(a[i], a[j])",
    "    swap(a[i+1], a[high]); return i + 1",
]


def quick_sort(elements: List[Element], delay: int = DEFAULT_DELAY_MS) -> Iterator[Step]:
    sb = StepBuilder(elements, delay)
    n  = len(sb)
    if n < 2:
        yield from sb.trivial("Quick sort")
        return

    yield sb.highlight([], "Start quick sort")
    yield from _quick_sort(sb, 0, n - 1)
    yield sb.finish("Quick sort complete")


def _quick_sort(sb: StepBuilder, low: int, high: int) -> Iterator[Step]:
    if low >= high:
        return

    sb.set_state(ElementState.PIVOT, high)
    yield sb.highlight([high], f"Pivot {sb.value(high)}")

    p = yield from _partition(sb, low, high)

    if low < p - 1:
        yield sb.highlight(range(low, p), "Sort the left side")
        yield from _quick_sort(sb, low, p - 1)

    if p + 1 < high:
        yield sb.highlight(range(p + 1, high + 1), "Sort the right side")
        yield from _quick_sort(sb, p + 1, high)


def _partition(sb: StepBuilder, low: int, high: int) -> Generator[Step, None, int]:
    pivot = sb.value(high)
    yield sb.highlight(range(low, high + 1), f"Partition around {pivot}")

    i = low - 1
    for j in range(low, high):
        sb.set_state(ElementState.COMPARING, j)
        sb.set_state(ElementState.PIVOT, high)
        yield sb.compare([j, high], f"Compare {sb.value(j)} with pivot {pivot}")

        if sb.value(j) <= pivot:
            i += 1
            if i != j:
                sb.set_state(ElementState.SWAPPING, i, j)
                yield sb.swap([i, j], f"Swap {sb.value(i)} and {sb.value(j)}")
                sb.exchange(i, j)
            sb.set_state(ElementState.NORMAL, i, j)
        else:
            sb.set_state(ElementState.NORMAL, j)

    p = i + 1
    if p != high:
        sb.set_state(ElementState.SWAPPING, p, high)
        yield sb.swap([p, high], f"Move pivot {pivot} to position {p}")
        sb.exchange(p, high)

    sb.mark_sorted(p)
    yield sb.highlight([p], f"Pivot {pivot} is in its final position")
    return p
