from __future__ import annotations

import logging
import time
from typing import Sequence

from towers.blocks import block_heights, half_height, stack_height
from towers.subset_iterator import SubsetIterator
from towers.types import SelectionRecord, TowersResult

_logger = logging.getLogger(__name__)


def find_best_pair(
    heights: Sequence[float],
    limit: float,
) -> tuple[SelectionRecord, SelectionRecord, int, int]:
    """Scan every subset of ``heights`` and keep the two tallest at or under ``limit``.

    A stack taller than the best pushes the best down to second place. A stack
    that is not taller than the best but taller than the second replaces the
    second. Comparisons are strict, so among equal heights the one met first
    keeps its place. Returns ``(best, second_best, checked, qualifying)``.
    """

    best = SelectionRecord()
    second = SelectionRecord()
    checked = 0
    qualifying = 0

    subsets = SubsetIterator(heights)
    while subsets.has_next():
        stack = subsets.advance()
        checked += 1
        height = stack_height(stack)
        if height > limit:
            continue
        qualifying += 1
        if height > best.height:
            second = best
            best = SelectionRecord(height=height, blocks=tuple(stack))
        elif height > second.height:
            second = SelectionRecord(height=height, blocks=tuple(stack))

    return best, second, checked, qualifying


class TwoTowers:
    """Best and second-best left stacks for blocks with face areas 1..n.

    A left stack qualifies when its height is at most half the height of all
    blocks. The search itself lives in :func:`find_best_pair`.
    """

    def __init__(self, n: int) -> None:
        self._heights = block_heights(n)
        self._n = n
        self._half_height = half_height(self._heights)
        self._best = SelectionRecord()
        self._second_best = SelectionRecord()

    @property
    def n(self) -> int:
        return self._n

    @property
    def heights(self) -> tuple[float, ...]:
        return self._heights

    @property
    def half_height(self) -> float:
        return self._half_height

    @property
    def best(self) -> SelectionRecord:
        return self._best

    @property
    def second_best(self) -> SelectionRecord:
        return self._second_best

    @property
    def best_height(self) -> float:
        return self._best.height

    @property
    def second_best_height(self) -> float:
        return self._second_best.height

    @property
    def best_set(self) -> tuple[int, ...]:
        return self._best.face_areas

    @property
    def second_best_set(self) -> tuple[int, ...]:
        return self._second_best.face_areas

    def find_best_sets(self) -> TowersResult:
        start = time.perf_counter()
        best, second, checked, qualifying = find_best_pair(self._heights, self._half_height)
        self._best = best
        self._second_best = second
        runtime_sec = time.perf_counter() - start
        _logger.debug(
            "n=%d checked=%d qualifying=%d best=%.6f second=%.6f in %.4fs",
            self._n, checked, qualifying, best.height, second.height, runtime_sec,
        )

        return TowersResult(
            n=self._n,
            half_height=self._half_height,
            best=best,
            second_best=second,
            subsets_checked=checked,
            qualifying_count=qualifying,
            runtime_sec=runtime_sec,
        )


def build_towers(n: int) -> TwoTowers:
    towers = TwoTowers(n)
    towers.find_best_sets()
    return towers
