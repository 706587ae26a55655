"""Area of a union of axis-aligned rectangles by a line sweep."""

from __future__ import annotations

from collections.abc import Iterable

_ENTRY, _EXIT = 0, 1

Rect = tuple[int, int, int, int]


def _covered_length(boxes: Iterable[Rect]) -> int:
    events = sorted(
        event for x1, y1, x2, y2 in boxes for event in ((y1, _ENTRY), (y2, _EXIT))
    )
    total = 0
    depth = 0
    start = 0
    for y, kind in events:
        if kind == _ENTRY:
            if depth == 0:
                start = y
            depth += 1
        else:
            depth -= 1
            if depth == 0:
                total += y - start
    return total


def union_area(rects: Iterable[tuple[int, int, int, int]]) -> int:
    """Total area covered by rectangles given as ``(x1, y1, x2, y2)`` corners."""
    boxes = [
        (min(x1, x2), min(y1, y2), max(x1, x2), max(y1, y2)) for x1, y1, x2, y2 in rects
    ]
    events = sorted(
        event
        for i, (x1, _, x2, _) in enumerate(boxes)
        for event in ((x1, _ENTRY, i), (x2, _EXIT, i))
    )
    active: set[int] = set()
    total = 0
    previous = None
    for x, kind, i in events:
        if previous is not None and x > previous and active:
            total += (x - previous) * _covered_length(boxes[j] for j in active)
        if kind == _ENTRY:
            active.add(i)
        else:
            active.discard(i)
        previous = x
    return total