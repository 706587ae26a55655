"""Closest pair of points by a line sweep."""

from __future__ import annotations

import math
from collections.abc import Iterable

from sortedcontainers import SortedList


def closest_pair(points: Iterable[tuple[float, float]]) -> float:
    """Smallest Euclidean distance between two of the given points.

    Raises ValueError when fewer than two points are given.
    """
    pts = sorted((float(x), float(y)) for x, y in points)
    if len(pts) < 2:
        raise ValueError("at least two points are required")
    best = math.inf
    window = SortedList()
    left = 0
    for i, (x, y) in enumerate(pts):
        while left < i and x - pts[left][0] > best:
            lx, ly = pts[left]
            window.remove((ly, lx))
            left += 1
        for wy, wx in window.irange((y - best, -math.inf), (y + best, math.inf)):
            d = math.dist((x, y), (wx, wy))
            if d < best:
                best = d
        window.add((y, x))
    return best