"""Segment intersection tests and a Bentley-Ottmann sweep for any crossing."""

from __future__ import annotations

from collections.abc import Iterable

from sortedcontainers import SortedList

EPS = 1e-8

Point = tuple[float, float]

_ENTRY, _EXIT = 0, 1


def _dcmp(a: float, b: float) -> int:
    if abs(a - b) <= EPS:
        return 0
    return -1 if a < b else 1


def ccw(a: Point, b: Point, c: Point) -> int:
    """Orientation of ``c`` relative to the directed line ``a -> b``.

    +1 for a left turn, -1 for a right turn; for collinear points +1 when
    ``c`` lies beyond ``b``, -1 when it lies behind ``a``, 0 when on the
    segment.
    """
    v1 = (b[0] - a[0], b[1] - a[1])
    v2 = (c[0] - a[0], c[1] - a[1])
    t = v1[0] * v2[1] - v1[1] * v2[0]
    if t > EPS:
        return 1
    if t < -EPS:
        return -1
    if v1[0] * v2[0] < -EPS or v1[1] * v2[1] < -EPS:
        return -1
    if v1[0] ** 2 + v1[1] ** 2 < v2[0] ** 2 + v2[1] ** 2 - EPS:
        return 1
    return 0


def segments_intersect(p1: Point, p2: Point, p3: Point, p4: Point) -> bool:
    """Whether segment ``p1-p2`` meets segment ``p3-p4`` (touching counts)."""
    first_is_point = p1 == p2
    second_is_point = p3 == p4
    if first_is_point and second_is_point:
        return p1 == p3
    if first_is_point:
        return ccw(p3, p4, p1) == 0
    if second_is_point:
        return ccw(p1, p2, p3) == 0
    return (
        ccw(p1, p2, p3) * ccw(p1, p2, p4) <= 0
        and ccw(p3, p4, p1) * ccw(p3, p4, p2) <= 0
    )


def _point_less(a: Point, b: Point) -> bool:
    if _dcmp(a[0], b[0]) != 0:
        return _dcmp(a[0], b[0]) < 0
    return _dcmp(a[1], b[1]) < 0


def _same(a: Point, b: Point) -> bool:
    return (a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2 < EPS


class _Segment:
    __slots__ = ("p", "q", "index")

    def __init__(self, p: Point, q: Point, index: int) -> None:
        if _point_less(q, p):
            p, q = q, p
        self.p = p
        self.q = q
        self.index = index

    def y_at(self, x: float) -> float:
        p, q = self.p, self.q
        if _dcmp(p[0], q[0]) == 0:
            return p[1]
        t = (x - p[0]) / (q[0] - p[0])
        return p[1] + (q[1] - p[1]) * t

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _Segment):
            return NotImplemented
        return _same(self.p, other.p) and _same(self.q, other.q)

    def __lt__(self, other: _Segment) -> bool:
        if self == other:
            return False
        x = max(self.p[0], other.p[0])
        yc = _dcmp(self.y_at(x), other.y_at(x))
        if yc == 0:
            return self.index < other.index
        return yc < 0

    def meets(self, other: _Segment) -> bool:
        return segments_intersect(self.p, self.q, other.p, other.q)


def find_intersection(
    segments: Iterable[tuple[Point, Point]],
) -> tuple[int, int] | None:
    """Indices of some pair of intersecting segments, or None if none meet.

    Each segment is a pair of end points.
    """
    segs = [
        _Segment(tuple(p), tuple(q), i)  # type: ignore[arg-type]
        for i, (p, q) in enumerate(segments)
    ]
    events = sorted(
        event
        for s in segs
        for event in ((s.p[0], _ENTRY, s.p[1], s.index), (s.q[0], _EXIT, s.q[1], s.index))
    )
    sweep = SortedList()
    for _, kind, _, idx in events:
        seg = segs[idx]
        pos = sweep.bisect_left(seg)
        if kind == _ENTRY:
            if pos < len(sweep) and sweep[pos] == seg:
                return sweep[pos].index, idx
            sweep.add(seg)
            if pos + 1 < len(sweep) and seg.meets(sweep[pos + 1]):
                return seg.index, sweep[pos + 1].index
            if pos > 0 and seg.meets(sweep[pos - 1]):
                return seg.index, sweep[pos - 1].index
        else:
            if pos >= len(sweep) or sweep[pos] != seg:
                continue
            if 0 < pos < len(sweep) - 1:
                above, below = sweep[pos + 1], sweep[pos - 1]
                if above.meets(below):
                    return above.index, below.index
            del sweep[pos]
    return None