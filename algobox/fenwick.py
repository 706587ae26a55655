"""Fenwick (binary indexed) tree over 1-based positions."""

from __future__ import annotations


class FenwickTree:
    """Point additions and prefix sums over positions ``1..size``."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self.size = size
        self._tree = [0] * (size + 1)

    def prefix_sum(self, idx: int) -> int:
        """Sum of the values at positions ``1..idx``."""
        if not 0 <= idx <= self.size:
            raise IndexError(f"index {idx} out of range")
        total = 0
        while idx:
            total += self._tree[idx]
            idx -= idx & -idx
        return total

    def add(self, idx: int, val: int) -> None:
        """Add ``val`` to the value at position ``idx``."""
        if not 1 <= idx <= self.size:
            raise IndexError(f"index {idx} out of range")
        while idx <= self.size:
            self._tree[idx] += val
            idx += idx & -idx