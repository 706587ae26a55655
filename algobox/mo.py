"""Offline range queries by Mo's algorithm."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Iterable, Sequence
from math import isqrt


def distinct_in_ranges(
    values: Sequence[Hashable], queries: Iterable[tuple[int, int]]
) -> list[int]:
    """Number of distinct values in each 1-indexed inclusive range.

    Answers are returned in the order the queries were given. Raises
    ValueError for a range outside ``1..len(values)`` or with left > right.
    """
    values = list(values)
    queries = list(queries)
    n = len(values)
    for left, right in queries:
        if not 1 <= left <= right <= n:
            raise ValueError(f"invalid query range ({left}, {right})")

    block = max(1, isqrt(n))
    order = sorted(
        range(len(queries)),
        key=lambda q: ((queries[q][0] - 1) // block, queries[q][1]),
    )

    counts: Counter = Counter()
    distinct = 0

    def add(i: int) -> None:
        nonlocal distinct
        counts[values[i]] += 1
        if counts[values[i]] == 1:
            distinct += 1

    def remove(i: int) -> None:
        nonlocal distinct
        counts[values[i]] -= 1
        if counts[values[i]] == 0:
            distinct -= 1

    answers = [0] * len(queries)
    cur_l, cur_r = 0, -1
    for q in order:
        l, r = queries[q][0] - 1, queries[q][1] - 1
        while cur_r < r:
            cur_r += 1
            add(cur_r)
        while cur_l > l:
            cur_l -= 1
            add(cur_l)
        while cur_r > r:
            remove(cur_r)
            cur_r -= 1
        while cur_l < l:
            remove(cur_l)
            cur_l += 1
        answers[q] = distinct
    return answers