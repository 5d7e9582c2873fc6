"""
Sequence helpers -- seeded permutations and console formatting.

The shuffle draws from a Mersenne Twister seeded explicitly by the caller, so
a given seed always yields the same permutation. Picking a seed from the
clock is left to the caller (see ``time_seed``).
"""

import time
from typing import List, MutableSequence, Sequence, TypeVar

import numpy as np

T = TypeVar('T')


def perfect_shuffle(values: MutableSequence[T], seed: int) -> None:
    """Permute ``values`` in place with a Fisher-Yates pass seeded by ``seed``."""
    if seed < 0:
        raise ValueError("seed must be non-negative")
    generator = np.random.Generator(np.random.MT19937(seed))
    n_values = len(values)
    for n in range(n_values - 1):
        k = int(generator.integers(n, n_values))
        values[n], values[k] = values[k], values[n]


def shuffled(values: Sequence[T], seed: int) -> List[T]:
    result = list(values)
    perfect_shuffle(result, seed)
    return result


def time_seed() -> int:
    return time.time_ns()


def format_sequence(values: Sequence[T]) -> str:
    if len(values) == 0:
        return "[ ]"
    return "[ " + " ".join(str(value) for value in values) + " ]"
