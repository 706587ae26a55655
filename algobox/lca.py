"""Binary lifting on a weighted tree: ancestors, LCA and path maxima."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping, Sequence
from typing import Any

WeightedAdjacency = Mapping[Any, Iterable[tuple[Any, int]]] | Sequence[Iterable[tuple[Any, int]]]


class LCATree:
    """Rooted tree answering ancestor and path-maximum queries in O(log n).

    ``adjacency`` maps each vertex to ``(neighbour, cost)`` pairs, every
    edge listed from both ends.
    """

    def __init__(self, adjacency: WeightedAdjacency, root: Hashable) -> None:
        items = adjacency.items() if isinstance(adjacency, Mapping) else enumerate(adjacency)
        graph: dict[Any, list[tuple[Any, int]]] = {}
        for u, neighbours in items:
            graph.setdefault(u, []).extend(neighbours)
        for neighbours in list(graph.values()):
            for v, _ in neighbours:
                graph.setdefault(v, [])
        if root not in graph:
            raise ValueError(f"unknown root {root!r}")

        self.root = root
        parent = {root: root}
        cost = {root: 0}
        self._depth = {root: 0}
        order = [root]
        for u in order:
            for v, c in graph[u]:
                if v in parent:
                    continue
                parent[v] = u
                cost[v] = c
                self._depth[v] = self._depth[u] + 1
                order.append(v)

        self._log = max(1, len(order).bit_length())
        self._up = [parent]
        self._max = [cost]
        for _ in range(1, self._log):
            up, mx = self._up[-1], self._max[-1]
            self._up.append({v: up[up[v]] for v in order})
            self._max.append({v: max(mx[v], mx[up[v]]) for v in order})

    def _check(self, u: Hashable) -> None:
        if u not in self._depth:
            raise ValueError(f"vertex {u!r} is not in the tree")

    def kth_ancestor(self, u: Hashable, k: int) -> Hashable:
        """The ancestor ``k`` levels above ``u`` (``u`` itself for ``k = 0``)."""
        self._check(u)
        if not 0 <= k <= self._depth[u]:
            raise ValueError(f"vertex {u!r} has no ancestor {k} levels up")
        level = 0
        while k:
            if k & 1:
                u = self._up[level][u]
            k >>= 1
            level += 1
        return u

    def lca(self, u: Hashable, v: Hashable) -> Hashable:
        """Lowest common ancestor of ``u`` and ``v``."""
        return self._climb(u, v)[0]

    def path_max(self, u: Hashable, v: Hashable) -> int:
        """Largest edge cost on the path between ``u`` and ``v`` (0 if none)."""
        return self._climb(u, v)[1]

    def _climb(self, u: Hashable, v: Hashable) -> tuple[Hashable, int]:
        self._check(u)
        self._check(v)
        depth = self._depth
        if depth[u] < depth[v]:
            u, v = v, u
        best = 0
        for level in reversed(range(self._log)):
            up = self._up[level]
            if depth[up[u]] >= depth[v]:
                best = max(best, self._max[level][u])
                u = up[u]
        if u == v:
            return u, best
        for level in reversed(range(self._log)):
            up, mx = self._up[level], self._max[level]
            if up[u] != up[v]:
                best = max(best, mx[u], mx[v])
                u, v = up[u], up[v]
        best = max(best, self._max[0][u], self._max[0][v])
        return self._up[0][u], best