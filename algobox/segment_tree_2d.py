"""Static two-dimensional segment tree for rectangle sums."""

from __future__ import annotations


class SegmentTree2D:
    """Sums over axis-aligned sub-rectangles of a square grid.

    Cells are filled with :meth:`set`, then :meth:`build` prepares the
    tree. Cells changed after a build need another build.
    """

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("size must be positive")
        self.size = size
        c = 1
        while c < size:
            c <<= 1
        self._c = c
        self._tree = [[0] * (2 * c) for _ in range(2 * c)]

    def _check(self, *indices: int) -> None:
        for idx in indices:
            if not 0 <= idx < self.size:
                raise IndexError(f"index {idx} out of range")

    def set(self, i: int, j: int, val: int) -> None:
        """Store ``val`` in cell ``(i, j)``."""
        self._check(i, j)
        self._tree[i + self._c][j + self._c] = val

    def build(self) -> None:
        """Compute every internal node from the stored cells."""
        c = self._c
        tree = self._tree
        for row in tree[c:]:
            for j in range(c - 1, 0, -1):
                row[j] = row[2 * j] + row[2 * j + 1]
        for i in range(c - 1, 0, -1):
            tree[i] = [x + y for x, y in zip(tree[2 * i], tree[2 * i + 1])]

    def _row_sum(self, node: int, l: int, r: int) -> int:
        row = self._tree[node]
        l += self._c
        r += self._c
        total = 0
        while l <= r:
            if l % 2 == 1:
                total += row[l]
                l += 1
            if r % 2 == 0:
                total += row[r]
                r -= 1
            l //= 2
            r //= 2
        return total

    def query_row(self, row: int, l: int, r: int) -> int:
        """Sum of columns ``l..r`` (inclusive) of grid row ``row``."""
        self._check(row, l, r)
        return self._row_sum(row + self._c, l, r)

    def query(self, u: int, d: int, l: int, r: int) -> int:
        """Sum of rows ``u..d`` and columns ``l..r``, all inclusive."""
        self._check(u, d, l, r)
        u += self._c
        d += self._c
        total = 0
        while u <= d:
            if u % 2 == 1:
                total += self._row_sum(u, l, r)
                u += 1
            if d % 2 == 0:
                total += self._row_sum(d, l, r)
                d -= 1
            u //= 2
            d //= 2
        return total