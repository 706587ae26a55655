"""Convex hull trick for ``dp[i] = min_{j<i} dp[j] + a[i] * b[j]``."""

from __future__ import annotations

from collections.abc import Sequence


def min_cost(a: Sequence[int], b: Sequence[int]) -> int:
    """Return ``dp[n-1]`` where ``dp[0] = 0`` and
    ``dp[i] = min(dp[j] + a[i] * b[j] for j < i)``.

    ``a`` must be non-decreasing and ``b`` strictly decreasing.
    """
    n = len(a)
    if n == 0 or len(b) != n:
        raise ValueError("a and b must be non-empty and of equal length")
    if any(x > y for x, y in zip(a, a[1:])):
        raise ValueError("a must be non-decreasing")
    if any(x <= y for x, y in zip(b, b[1:])):
        raise ValueError("b must be strictly decreasing")

    dp = [0] * n

    def value(line: int, x: int) -> int:
        return dp[line] + x * b[line]

    def redundant(k2: int, k1: int, k: int) -> bool:
        # intersect(k, k1) <= intersect(k1, k2); denominators are positive
        return (dp[k] - dp[k1]) * (b[k2] - b[k1]) <= (dp[k1] - dp[k2]) * (b[k1] - b[k])

    hull = [0]
    j = 0
    for i in range(1, n):
        x = a[i]
        while j < len(hull) - 1 and value(hull[j], x) > value(hull[j + 1], x):
            j += 1
        dp[i] = value(hull[j], x)
        hull.append(i)
        while len(hull) > j + 2 and redundant(hull[-3], hull[-2], hull[-1]):
            hull[-2] = hull[-1]
            hull.pop()
    return dp[-1]