"""Lazily allocated segment tree with range add and range sum."""

from __future__ import annotations

MAX_COORDINATE = 10**9


class _Node:
    __slots__ = ("start", "end", "value", "lazy", "left", "right")

    def __init__(self, start: int, end: int) -> None:
        self.start = start
        self.end = end
        self.value = 0
        self.lazy = 0
        self.left: _Node | None = None
        self.right: _Node | None = None

    def _extend(self) -> None:
        if self.left is None and self.start != self.end:
            mid = (self.start + self.end) >> 1
            self.left = _Node(self.start, mid)
            self.right = _Node(mid + 1, self.end)

    def _propagate(self) -> None:
        self._extend()
        if self.left is not None:
            self.left.lazy += self.lazy
            self.right.lazy += self.lazy
        self.value += self.lazy * (self.end - self.start + 1)
        self.lazy = 0

    def query(self, l: int, r: int) -> int:
        if r < self.start or l > self.end:
            return 0
        self._propagate()
        if l <= self.start and self.end <= r:
            return self.value
        return self.left.query(l, r) + self.right.query(l, r)

    def update(self, l: int, r: int, v: int) -> None:
        self._propagate()
        if r < self.start or l > self.end:
            return
        if l <= self.start and self.end <= r:
            self.lazy = v
            self._propagate()
            return
        self.left.update(l, r, v)
        self.right.update(l, r, v)
        self.value = self.left.value + self.right.value


class DynamicSegmentTree:
    """Range add and range sum over ``start..end``, all values starting at 0.

    Nodes are created only where updates and queries reach, so the
    coordinate range may be huge.
    """

    def __init__(self, start: int = -MAX_COORDINATE, end: int = MAX_COORDINATE) -> None:
        if start > end:
            raise ValueError("start must not exceed end")
        self._root = _Node(start, end)

    def query(self, l: int, r: int) -> int:
        """Sum of the values at positions ``l..r`` inclusive."""
        return self._root.query(l, r)

    def update(self, l: int, r: int, v: int) -> None:
        """Add ``v`` to every position in ``l..r`` inclusive."""
        self._root.update(l, r, v)