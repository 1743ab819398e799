"""
generator.py — Input Array Factories
=====================================
Produces the integer arrays the demo sorts.

    generate(ArrayKind.RANDOM, 20)                  # 20 values in 1..100
    generate("random_range", 20, low=-50, high=50)
    generate("partially_sorted", 40, seed=7)

Validation happens before any work: size <= 0 raises InvalidArraySize,
low > high raises InvalidRange.
"""

import random
from enum import Enum
from typing import List, Optional, Tuple, Union

from engine.errors import InvalidArraySize, InvalidRange


DEFAULT_RANGE: Tuple[int, int] = (1, 100)


class ArrayKind(Enum):
    RANDOM           = "random"             # uniform in DEFAULT_RANGE
    RANDOM_RANGE     = "random_range"       # uniform in [low, high]
    SORTED           = "sorted"             # 1..size
    REVERSED         = "reversed"           # size..1
    PARTIALLY_SORTED = "partially_sorted"   # 1..size with size//4 random swaps


def _check_size(size: int) -> None:
    if size <= 0:
        raise InvalidArraySize(f"got {size}")


def random_array(
    size: int,
    low: Optional[int] = None,
    high: Optional[int] = None,
    seed: Optional[int] = None,
) -> List[int]:
    _check_size(size)
    lo = DEFAULT_RANGE[0] if low is None else low
    hi = DEFAULT_RANGE[1] if high is None else high
    if lo > hi:
        raise InvalidRange(f"{lo} > {hi}")
    rng = random.Random(seed)
    return [rng.randint(lo, hi) for _ in range(size)]


def sorted_array(size: int) -> List[int]:
    _check_size(size)
    return list(range(1, size + 1))


def reversed_array(size: int) -> List[int]:
    _check_size(size)
    return list(range(size, 0, -1))


def partially_sorted_array(size: int, seed: Optional[int] = None) -> List[int]:
    _check_size(size)
    rng = random.Random(seed)
    values = list(range(1, size + 1))
    for _ in range(size // 4):
        i = rng.randrange(size)
        j = rng.randrange(size)
        values[i], values[j] = values[j], values[i]
    return values


def generate(
    kind: Union[ArrayKind, str],
    size: int,
    low: Optional[int] = None,
    high: Optional[int] = None,
    seed: Optional[int] = None,
) -> List[int]:
    """Dispatch on `kind` (enum member or its string value)."""
    kind = ArrayKind(kind)

    if kind is ArrayKind.RANDOM:
        return random_array(size, seed=seed)
    if kind is ArrayKind.RANDOM_RANGE:
        return random_array(size, low=low, high=high, seed=seed)
    if kind is ArrayKind.SORTED:
        return sorted_array(size)
    if kind is ArrayKind.REVERSED:
        return reversed_array(size)
    return partially_sorted_array(size, seed=seed)
