"""Segment-reversal (2-opt) neighbourhood used by the annealer."""
from __future__ import annotations
import random
from typing import Callable, List, Tuple


def draw_segment(rng: random.Random, n: int) -> Tuple[int, int]:
    """Two distinct positions in [0, n), ordered so that i < j."""
    if n < 2:
        raise ValueError(f"need at least 2 positions to draw a segment, got {n}")
    i, j = rng.sample(range(n), 2)
    if i > j:
        i, j = j, i
    return i, j


def reverse_segment(tour: List[int], i: int, j: int) -> None:
    """Reverse tour[i..j] (both ends included) in place. Applying it twice is a no-op."""
    if not 0 <= i < j < len(tour):
        raise IndexError(f"invalid segment [{i}, {j}] for tour of length {len(tour)}")
    tour[i:j + 1] = tour[i:j + 1][::-1]


def reversal_delta(tour: List[int], i: int, j: int, dist: Callable[[int, int], float]) -> float:
    """Length change caused by reverse_segment(tour, i, j), from the two edges it swaps."""
    n = len(tour)
    if i == 0 and j == n - 1:
        # whole tour reversed: same cycle
        return 0.0
    a, b = tour[i - 1], tour[i]
    c, d = tour[j], tour[(j + 1) % n]
    return dist(a, c) + dist(b, d) - dist(a, b) - dist(c, d)


def is_permutation(tour: List[int], n: int) -> bool:
    return len(tour) == n and sorted(tour) == list(range(n))
