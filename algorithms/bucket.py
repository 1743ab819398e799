"""
bucket.py — Bucket Sort
========================
One bucket per element.  A value goes to bucket

    floor((v - min) / (max - min) * (n - 1))      clamped to [0, n-1]

and to bucket 0 when every value is equal (max == min).  Buckets are
gathered in index order into the working array, then each non-empty
bucket's slice is insertion-sorted in place, so every snapshot stays
full length.

Stable: distribution keeps input order inside a bucket and insertion
sort never passes equal values.
"""

from typing import Iterator, List

from model.element import Element, ElementState
from algorithms.step import Step, StepBuilder, DEFAULT_DELAY_MS
from algorithms.insertion import insert_left


PSEUDOCODE: List[str] = [
    "def bucket_sort(a):",
    "    lo, hi ← min(a), max(a); k ← n",
    "    for v in a:",
    "        b ← floor((v - lo) / (hi - lo) * (k - 1))",
    "        buckets[b].append(v)",
    "    a ← concat(buckets)",
    "    for each bucket slice: insertion_sort(slice)",
]


def bucket_index(value: int, lo: int, hi: int, count: int) -> int:
    if hi == lo:
        return 0
    index = (value - lo) * (count - 1) // (hi - lo)
    return max(0, min(index, count - 1))


def bucket_sort(elements: List[Element], delay: int = DEFAULT_DELAY_MS) -> Iterator[Step]:
    sb = StepBuilder(elements, delay)
    n  = len(sb)
    if n < 2:
        yield from sb.trivial("Bucket sort")
        return

    yield sb.highlight([], "Start bucket sort")

    values = [e.value for e in sb.elements]
    lo, hi = min(values), max(values)
    yield sb.highlight([], f"Value range [{lo}, {hi}]")

    count = n
    buckets: List[List[Element]] = [[] for _ in range(count)]
    yield sb.highlight([], f"Create {count} buckets")

    for i in range(n):
        value = sb.value(i)
        b = bucket_index(value, lo, hi, count)
        sb.set_state(ElementState.COMPARING, i)
        yield sb.compare([i], f"Value {value} goes to bucket {b}")
        sb.set_state(ElementState.NORMAL, i)
        buckets[b].append(sb.elements[i])
        yield sb.move([i], f"Put {value} into bucket {b}")

    sb.replace_all([e for bucket in buckets for e in bucket])
    yield sb.highlight(range(n), "Gather the buckets in order")

    start = 0
    for b, bucket in enumerate(buckets):
        if not bucket:
            continue
        stop = start + len(bucket)
        yield sb.highlight(range(start, stop), f"Sort bucket {b} ({len(bucket)} element(s))")

        for i in range(start + 1, stop):
            yield from insert_left(sb, start, i, prefix=f"Bucket {b}: ")

        sb.mark_sorted(*range(start, stop))
        yield sb.highlight(range(start, stop), f"Bucket {b} sorted")
        start = stop

    yield sb.finish("Bucket sort complete")
