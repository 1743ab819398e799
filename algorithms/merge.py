"""
merge.py — Merge Sort
======================
Top-down merge sort.  Recursion is emitted depth-first: the left half's
steps are all yielded before the right half's, then the merge.

Stable: on a tie the merge takes from the left run (`<=`).
"""

from typing import Iterator, List

from model.element import Element, ElementState
from algorithms.step import Step, StepBuilder, DEFAULT_DELAY_MS


PSEUDOCODE: List[str] = [
    "def merge_sort(a, left, right):",
    "    if left < right:",
    "        mid ← left + (right - left) / 2",
    "        merge_sort(a, left, mid)",
    "        merge_sort(a, mid + 1, right)",
    "        merge(a, left, mid, right)",
    "def merge(a, left, mid, right):",
    "    take the smaller head of a[left..mid], a[mid+1..right]; ties go left",
]


def merge_sort(elements: List[Element], delay: int = DEFAULT_DELAY_MS) -> Iterator[Step]:
    sb = StepBuilder(elements, delay)
    n  = len(sb)
    if n < 2:
        yield from sb.trivial("Merge sort")
        return

    yield sb.highlight([], "Start merge sort")
    yield from _merge_sort(sb, 0, n - 1)
    yield sb.finish("Merge sort complete")


def _merge_sort(sb: StepBuilder, left: int, right: int) -> Iterator[Step]:
    if left < right:
        mid = left + (right - left) // 2
        yield sb.highlight(range(left, right + 1), f"Split [{left}, {right}] at {mid}")
        yield from _merge_sort(sb, left, mid)
        yield from _merge_sort(sb, mid + 1, right)
        yield from _merge(sb, left, mid, right)
    elif left == right:
        sb.mark_sorted(left)
        yield sb.highlight([left], f"Single element {sb.value(left)} is sorted")


def _merge(sb: StepBuilder, left: int, mid: int, right: int) -> Iterator[Step]:
    left_run  = sb.copy_range(left, mid + 1)
    right_run = sb.copy_range(mid + 1, right + 1)

    yield sb.highlight(
        range(left, right + 1),
        f"Merge [{left}, {mid}] with [{mid + 1}, {right}]",
    )

    i = j = 0
    k = left
    while i < len(left_run) and j < len(right_run):
        a, b = left_run[i], right_run[j]
        li, ri = left + i, mid + 1 + j
        sb.set_state(ElementState.COMPARING, li, ri)
        yield sb.compare([li, ri], f"Compare {a.value} and {b.value}")
        sb.set_state(ElementState.NORMAL, li, ri)

        if a.value <= b.value:
            sb.place(k, a)
            i += 1
        else:
            sb.place(k, b)
            j += 1
        yield sb.move([k], f"Take {sb.value(k)} into position {k}")
        k += 1

    while i < len(left_run):
        sb.place(k, left_run[i])
        yield sb.move([k], f"Copy remaining left element {left_run[i].value}")
        i += 1
        k += 1

    while j < len(right_run):
        sb.place(k, right_run[j])
        yield sb.move([k], f"Copy remaining right element {right_run[j].value}")
        j += 1
        k += 1

    sb.mark_sorted(*range(left, right + 1))
    yield sb.highlight(range(left, right + 1), f"Range [{left}, {right}] merged")
