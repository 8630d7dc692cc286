from __future__ import annotations

import math


def block_heights(n: int) -> tuple[float, ...]:
    """Heights of blocks with face areas 1..n (a square of area i has side sqrt(i))."""

    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"n must be an int, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    return tuple(math.sqrt(i) for i in range(1, n + 1))


def stack_height(blocks) -> float:
    total = 0.0
    for h in blocks:
        total += h
    return total


def half_height(heights) -> float:
    return stack_height(heights) / 2
