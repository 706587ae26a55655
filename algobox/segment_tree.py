"""Bottom-up segment tree over an associative operation."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any


class SegmentTree:
    """Point updates and range folds over ``2 ** log_size`` positions.

    Every position starts at ``identity``; ``op`` must be associative with
    ``identity`` as its neutral element.
    """

    def __init__(self, log_size: int, op: Callable[[Any, Any], Any], identity: Any) -> None:
        if log_size < 0:
            raise ValueError("log_size must be non-negative")
        self.n = 1 << log_size
        self.op = op
        self.identity = identity
        self._tree: list[Any] = []
        self.clear()

    def _check(self, idx: int) -> None:
        if not 0 <= idx < self.n:
            raise IndexError(f"index {idx} out of range")

    def clear(self) -> None:
        """Reset every position and node to the identity."""
        self._tree = [self.identity] * (2 * self.n)

    def get(self, idx: int) -> Any:
        """Value stored at position ``idx``."""
        self._check(idx)
        return self._tree[idx + self.n]

    def set(self, idx: int, val: Any) -> None:
        """Store ``val`` at ``idx`` without updating ancestors; call build after."""
        self._check(idx)
        self._tree[idx + self.n] = val

    def query(self, l: int, r: int) -> Any:
        """Fold of positions ``l..r`` inclusive, in order."""
        if l > r:
            return self.identity
        self._check(l)
        self._check(r)
        l += self.n
        r += self.n
        left = right = self.identity
        tree, op = self._tree, self.op
        while l <= r:
            if l % 2 == 1:
                left = op(left, tree[l])
                l += 1
            if r % 2 == 0:
                right = op(tree[r], right)
                r -= 1
            l //= 2
            r //= 2
        return op(left, right)

    def update(self, idx: int, val: Any) -> None:
        """Store ``val`` at ``idx`` and refresh its ancestors."""
        self._check(idx)
        idx += self.n
        tree, op = self._tree, self.op
        tree[idx] = val
        idx //= 2
        while idx >= 1:
            tree[idx] = op(tree[2 * idx], tree[2 * idx + 1])
            idx //= 2

    def build(self) -> None:
        """Recompute every internal node from the leaves."""
        tree, op = self._tree, self.op
        for i in range(self.n - 1, 0, -1):
            tree[i] = op(tree[2 * i], tree[2 * i + 1])