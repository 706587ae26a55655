"""Signed area, area and centroid of a simple polygon."""

from __future__ import annotations

from collections.abc import Iterator, Sequence


def _edges(
    xs: Sequence[float], ys: Sequence[float]
) -> Iterator[tuple[tuple[float, float], tuple[float, float]]]:
    if len(xs) != len(ys):
        raise ValueError("xs and ys differ in length")
    points = list(zip(xs, ys))
    return zip(points, points[1:] + points[:1])


def signed_area(xs: Sequence[float], ys: Sequence[float]) -> float:
    """Area of the polygon, positive when the vertices run counter-clockwise."""
    return sum(x1 * y2 - x2 * y1 for (x1, y1), (x2, y2) in _edges(xs, ys)) / 2.0


def area(xs: Sequence[float], ys: Sequence[float]) -> float:
    """Unsigned area of the polygon."""
    return abs(signed_area(xs, ys))


def centroid(xs: Sequence[float], ys: Sequence[float]) -> tuple[float, float]:
    """Centre of mass of the polygon's region.

    Raises ValueError for a polygon of zero area.
    """
    scale = 6.0 * signed_area(xs, ys)
    if scale == 0:
        raise ValueError("polygon has zero area")
    cx = cy = 0.0
    for (x1, y1), (x2, y2) in _edges(xs, ys):
        cross = x1 * y2 - x2 * y1
        cx += (x1 + x2) * cross
        cy += (y1 + y2) * cross
    return cx / scale, cy / scale