"""Merge sort tree: count values not above a bound within an index range."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterable
from heapq import merge


class MergeSortTree:
    """Segment tree whose nodes hold the sorted values of their range."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)
        self._n = len(self._values)
        self._tree: list[list[int]] = [[] for _ in range(4 * max(self._n, 1))]
        if self._n:
            self._build(0, 0, self._n - 1)

    def _build(self, cur: int, l: int, r: int) -> None:
        if l == r:
            self._tree[cur] = [self._values[l]]
            return
        mid = l + (r - l) // 2
        self._build(2 * cur + 1, l, mid)
        self._build(2 * cur + 2, mid + 1, r)
        self._tree[cur] = list(merge(self._tree[2 * cur + 1], self._tree[2 * cur + 2]))

    def _count(self, cur: int, l: int, r: int, x: int, y: int, k: int) -> int:
        if r < x or l > y:
            return 0
        if x <= l and r <= y:
            return bisect_right(self._tree[cur], k)
        mid = l + (r - l) // 2
        return self._count(2 * cur + 1, l, mid, x, y, k) + self._count(
            2 * cur + 2, mid + 1, r, x, y, k
        )

    def count_le(self, x: int, y: int, k: int) -> int:
        """Number of values at indices ``x..y`` (inclusive) that are ``<= k``."""
        if not self._n:
            return 0
        return self._count(0, 0, self._n - 1, x, y, k)