"""
radix.py — Radix Sort (LSD, base 10)
=====================================
One stable counting pass per decimal digit, least significant first,
while max // exp > 0.  Negative inputs are shifted by -min before digits
are taken, so every key is non-negative.
"""

from typing import Iterator, List

from model.element import Element
from algorithms.step import Step, StepBuilder, DEFAULT_DELAY_MS
from algorithms.counting import distribute


PSEUDOCODE: List[str] = [
    "def radix_sort(a):",
    "    exp ← 1",
    "    while max(a) / exp > 0:",
    "        counting_sort(a, key = (v / exp) mod 10)",
    "        exp ← exp * 10",
]


def radix_sort(elements: List[Element], delay: int = DEFAULT_DELAY_MS) -> Iterator[Step]:
    sb = StepBuilder(elements, delay)
    n  = len(sb)
    if n < 2:
        yield from sb.trivial("Radix sort")
        return

    yield sb.highlight([], "Start radix sort")

    values  = [e.value for e in sb.elements]
    offset  = -min(values) if min(values) < 0 else 0
    max_key = max(values) + offset
    yield sb.highlight([], f"Largest key {max_key} has {len(str(max_key))} digit(s)")

    exp = 1
    while max_key // exp > 0:
        yield sb.highlight([], f"Sort by the {exp}s digit")
        yield from distribute(
            sb,
            lambda v, exp=exp: ((v + offset) // exp) % 10,
            10,
            f"{exp}s digit",
        )
        exp *= 10

    yield sb.finish("Radix sort complete")
