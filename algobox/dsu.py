"""Disjoint-set union with path compression and union by rank."""

from __future__ import annotations


class DSU:
    """Disjoint sets over the elements ``0..size-1``."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self.size = size
        self._parent = list(range(size))
        self._rank = [1] * size

    def root(self, i: int) -> int:
        """Representative of the set holding ``i``."""
        if not 0 <= i < self.size:
            raise IndexError(f"element {i} out of range")
        parent = self._parent
        while i != parent[i]:
            parent[i] = parent[parent[i]]
            i = parent[i]
        return i

    def unite(self, a: int, b: int) -> bool:
        """Merge the sets of ``a`` and ``b``; False if already together."""
        a, b = self.root(a), self.root(b)
        if a == b:
            return False
        if self._rank[a] < self._rank[b]:
            a, b = b, a
        if self._rank[a] == self._rank[b]:
            self._rank[a] += 1
        self._parent[b] = a
        return True