"""
algorithms/__init__.py — Algorithm Catalogue
=============================================
Single source of truth for every sorting algorithm the visualizer knows
about.

    from algorithms import REGISTRY, get_algorithm

REGISTRY is a dict:
    {
        "bubble_sort": AlgoInfo(key, label, fn, pseudocode, tags, stable, …),
        …
    }

AlgoInfo is a lightweight dataclass.  The engine and UI both consume it,
so adding a new algorithm is: write the generator, add one entry here.
Tags split the catalogue into "comparison" and "non-comparison" sorts.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Dict, Optional

# ---------------------------------------------------------------------------
# Import all algorithm modules
# ---------------------------------------------------------------------------
from algorithms.bubble    import bubble_sort    as _bubble,    PSEUDOCODE as _bubble_pc
from algorithms.selection import selection_sort as _selection, PSEUDOCODE as _selection_pc
from algorithms.insertion import insertion_sort as _insertion, PSEUDOCODE as _insertion_pc
from algorithms.shell     import shell_sort     as _shell,     PSEUDOCODE as _shell_pc
from algorithms.merge     import merge_sort     as _merge,     PSEUDOCODE as _merge_pc
from algorithms.quick     import quick_sort     as _quick,     PSEUDOCODE as _quick_pc
from algorithms.heap      import heap_sort      as _heap,      PSEUDOCODE as _heap_pc
from algorithms.counting  import counting_sort  as _counting,  PSEUDOCODE as _counting_pc
from algorithms.bucket    import bucket_sort    as _bucket,    PSEUDOCODE as _bucket_pc
from algorithms.radix     import radix_sort     as _radix,     PSEUDOCODE as _radix_pc


COMPARISON     = "comparison"
NON_COMPARISON = "non-comparison"


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:                str                    # registry key, e.g. "bubble_sort"
    label:              str                    # human label, e.g. "Bubble Sort"
    fn:                 Callable               # the generator function
    pseudocode:         List[str]              # lines for the side-panel
    tags:               List[str] = field(default_factory=list)
    stable:             bool      = False      # equal values keep their input order
    complexity_best:    str       = ""
    complexity_average: str       = ""
    complexity_worst:   str       = ""
    complexity_space:   str       = ""
    description:        str       = ""         # one-liner for the UI card


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bubble_sort": AlgoInfo(
        key="bubble_sort", label="Bubble Sort", fn=_bubble, pseudocode=_bubble_pc,
        tags=[COMPARISON], stable=True,
        complexity_best="O(n)", complexity_average="O(n²)", complexity_worst="O(n²)",
        complexity_space="O(1)",
        description="Repeatedly swaps adjacent out-of-order pairs; the largest value bubbles to the end.",
    ),

    "selection_sort": AlgoInfo(
        key="selection_sort", label="Selection Sort", fn=_selection, pseudocode=_selection_pc,
        tags=[COMPARISON], stable=False,
        complexity_best="O(n²)", complexity_average="O(n²)", complexity_worst="O(n²)",
        complexity_space="O(1)",
        description="Finds the minimum of the unsorted part and swaps it to the front.",
    ),

    "insertion_sort": AlgoInfo(
        key="insertion_sort", label="Insertion Sort", fn=_insertion, pseudocode=_insertion_pc,
        tags=[COMPARISON], stable=True,
        complexity_best="O(n)", complexity_average="O(n²)", complexity_worst="O(n²)",
        complexity_space="O(1)",
        description="Grows a sorted prefix, shifting each new element left into place.",
    ),

    "shell_sort": AlgoInfo(
        key="shell_sort", label="Shell Sort", fn=_shell, pseudocode=_shell_pc,
        tags=[COMPARISON], stable=False,
        complexity_best="O(n log n)", complexity_average="O(n^1.3)", complexity_worst="O(n²)",
        complexity_space="O(1)",
        description="Insertion sort over a shrinking sequence of gaps.",
    ),

    "merge_sort": AlgoInfo(
        key="merge_sort", label="Merge Sort", fn=_merge, pseudocode=_merge_pc,
        tags=[COMPARISON], stable=True,
        complexity_best="O(n log n)", complexity_average="O(n log n)", complexity_worst="O(n log n)",
        complexity_space="O(n)",
        description="Divide and conquer: sort both halves recursively, then merge them.",
    ),

    "quick_sort": AlgoInfo(
        key="quick_sort", label="Quick Sort", fn=_quick, pseudocode=_quick_pc,
        tags=[COMPARISON], stable=False,
        complexity_best="O(n log n)", complexity_average="O(n log n)", complexity_worst="O(n²)",
        complexity_space="O(log n)",
        description="Partitions around a pivot, then sorts each side recursively.",
    ),

    "heap_sort": AlgoInfo(
        key="heap_sort", label="Heap Sort", fn=_heap, pseudocode=_heap_pc,
        tags=[COMPARISON], stable=False,
        complexity_best="O(n log n)", complexity_average="O(n log n)", complexity_worst="O(n log n)",
        complexity_space="O(1)",
        description="Builds a max-heap, then repeatedly moves the root to the end.",
    ),

    "counting_sort": AlgoInfo(
        key="counting_sort", label="Counting Sort", fn=_counting, pseudocode=_counting_pc,
        tags=[NON_COMPARISON], stable=True,
        complexity_best="O(n + k)", complexity_average="O(n + k)", complexity_worst="O(n + k)",
        complexity_space="O(k)",
        description="Counts each value, then places elements by prefix sums.",
    ),

    "bucket_sort": AlgoInfo(
        key="bucket_sort", label="Bucket Sort", fn=_bucket, pseudocode=_bucket_pc,
        tags=[NON_COMPARISON], stable=True,
        complexity_best="O(n + k)", complexity_average="O(n + k)", complexity_worst="O(n²)",
        complexity_space="O(n + k)",
        description="Spreads values over buckets, sorts each bucket, concatenates them.",
    ),

    "radix_sort": AlgoInfo(
        key="radix_sort", label="Radix Sort", fn=_radix, pseudocode=_radix_pc,
        tags=[NON_COMPARISON], stable=True,
        complexity_best="O(d(n + k))", complexity_average="O(d(n + k))", complexity_worst="O(d(n + k))",
        complexity_space="O(n + k)",
        description="Stable counting pass per decimal digit, least significant first.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def algorithms_by_tag(tag: str) -> List[AlgoInfo]:
    """Filter registry by tag."""
    return [a for a in REGISTRY.values() if tag in a.tags]


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "COMPARISON",
    "NON_COMPARISON",
    "get_algorithm",
    "list_algorithms",
    "algorithms_by_tag",
]
