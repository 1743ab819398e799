"""
counting.py — Counting Sort
============================
Count occurrences of each value in [min, max], turn the counts into end
positions with a prefix sum, then walk the input right-to-left dropping
each element into its output slot.  The right-to-left walk is what makes
the placement stable.

`distribute` is the reusable counting pass; radix sort runs it once per
decimal digit.
"""

from copy import copy
from typing import Callable, Iterator, List, Optional

from model.element import Element, ElementState
from algorithms.step import Step, StepBuilder, DEFAULT_DELAY_MS


PSEUDOCODE: List[str] = [
    "def counting_sort(a):",
    "    lo, hi ← min(a), max(a)",
    "    count[0 .. hi-lo] ← 0",
    "    for v in a: count[v - lo] += 1",
    "    for k in 1 .. hi-lo: count[k] += count[k-1]",
    "    for i in n-1 .. 0:",
    "        count[a[i] - lo] -= 1; out[count[a[i] - lo]] ← a[i]",
    "    a ← out",
]


def distribute(
    sb: StepBuilder,
    key: Callable[[int], int],
    size: int,
    label: str,
    settle: bool = False,
) -> Iterator[Step]:
    """
    One stable counting pass over the whole working array.

    Args:
        key    : maps a value to its counter index in [0, size).
        size   : number of counters.
        label  : what the key is called in step descriptions.
        settle : mark every placed element sorted (last pass only).
    """
    n = len(sb)
    counts = [0] * size

    yield sb.highlight([], f"Count occurrences of each {label}")
    for i in range(n):
        value = sb.value(i)
        k = key(value)
        sb.set_state(ElementState.COMPARING, i)
        yield sb.compare([i], f"Value {value} has {label} {k}")
        counts[k] += 1
        sb.set_state(ElementState.NORMAL, i)
        yield sb.highlight([i], f"{label.capitalize()} {k} seen {counts[k]} time(s)")

    yield sb.highlight([], "Accumulate counts into end positions")
    for k in range(1, size):
        counts[k] += counts[k - 1]

    output: List[Optional[Element]] = [None] * n
    yield sb.highlight([], "Place elements right to left using the counts")
    for i in range(n - 1, -1, -1):
        value = sb.value(i)
        k = key(value)
        target = counts[k] - 1
        sb.set_state(ElementState.COMPARING, i)
        yield sb.compare([i], f"Value {value} belongs at output position {target}")

        placed = copy(sb.elements[i])
        placed.position = target
        placed.state = ElementState.SORTED if settle else ElementState.NORMAL
        placed.is_sorted = settle
        output[target] = placed
        counts[k] -= 1

        sb.set_state(ElementState.NORMAL, i)
        yield sb.move([target], f"Place {value} at output position {target}")

    sb.replace_all(output)
    yield sb.highlight(range(n), f"Pass by {label} complete")


def counting_sort(elements: List[Element], delay: int = DEFAULT_DELAY_MS) -> Iterator[Step]:
    sb = StepBuilder(elements, delay)
    n  = len(sb)
    if n < 2:
        yield from sb.trivial("Counting sort")
        return

    yield sb.highlight([], "Start counting sort")

    values = [e.value for e in sb.elements]
    lo, hi = min(values), max(values)
    size = hi - lo + 1
    yield sb.highlight([], f"Value range [{lo}, {hi}], {size} counters")

    yield from distribute(sb, lambda v: v - lo, size, "value offset", settle=True)

    yield sb.finish("Counting sort complete")
