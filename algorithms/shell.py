"""
shell.py — Shell Sort
======================
Gapped insertion sort over the gap sequence n/2, n/4, …, 1.  Nothing is
marked sorted until the final gap-1 pass is done, because any earlier
pass can still move an element.

Unstable: long-distance gapped moves can reorder equal values.
"""

from typing import Iterator, List

from model.element import Element, ElementState
from algorithms.step import Step, StepBuilder, DEFAULT_DELAY_MS


PSEUDOCODE: List[str] = [
    "def shell_sort(a):",
    "    gap ← n / 2",
    "    while gap > 0:",
    "        for i in gap .. n-1:",
    "            j ← i",
    "            while j >= gap and a[j-gap] > a[j]:",
    "                move a[j-gap] to j; j ← j - gap",
    "        gap ← gap / 2",
]


def shell_sort(elements: List[Element], delay: int = DEFAULT_DELAY_MS) -> Iterator[Step]:
    sb = StepBuilder(elements, delay)
    n  = len(sb)
    if n < 2:
        yield from sb.trivial("Shell sort")
        return

    yield sb.highlight([], "Start shell sort")

    gap = n // 2
    while gap > 0:
        yield sb.highlight([], f"Insertion sort with gap {gap}")

        for i in range(gap, n):
            key = sb.value(i)
            sb.set_state(ElementState.COMPARING, i)
            yield sb.highlight([i], f"Insert {key} (gap {gap})")

            j = i
            while j >= gap:
                sb.set_state(ElementState.COMPARING, j - gap, j)
                yield sb.compare([j - gap, j], f"Compare {sb.value(j - gap)} and {key} (gap {gap})")

                if sb.value(j - gap) <= key:
                    sb.set_state(ElementState.NORMAL, j - gap, j)
                    break

                shifted = sb.value(j - gap)
                sb.exchange(j - gap, j)
                sb.set_state(ElementState.NORMAL, j)
                yield sb.move([j - gap, j], f"{shifted} > {key}, move {shifted} to position {j}")
                j -= gap

            sb.set_state(ElementState.NORMAL, j)

        gap //= 2

    yield sb.finish("Shell sort complete")
