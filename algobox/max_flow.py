"""Maximum flow by Dinic's algorithm and by Ford-Fulkerson on a matrix."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence


class FlowNetwork:
    """Directed network on vertices ``0..size-1`` solved with Dinic's algorithm.

    Flow found by :meth:`max_flow` stays in the network, so a later call
    only reports what can still be added.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self.size = size
        # each edge: [target, residual capacity, index of reverse edge]
        self._adj: list[list[list[int]]] = [[] for _ in range(size)]

    def _check(self, v: int) -> None:
        if not 0 <= v < self.size:
            raise IndexError(f"vertex {v} out of range")

    def add_edge(self, u: int, v: int, capacity: int) -> None:
        """Add a directed edge ``u -> v`` with the given capacity."""
        self._check(u)
        self._check(v)
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        iu = len(self._adj[u])
        iv = len(self._adj[v]) + (1 if u == v else 0)
        self._adj[u].append([v, capacity, iv])
        self._adj[v].append([u, 0, iu])

    def _levels(self, source: int) -> list[int]:
        level = [-1] * self.size
        level[source] = 0
        queue = deque([source])
        while queue:
            u = queue.popleft()
            for to, residual, _ in self._adj[u]:
                if level[to] < 0 and residual > 0:
                    level[to] = level[u] + 1
                    queue.append(to)
        return level

    def _augment(self, source: int, sink: int, level: list[int], start: list[int]) -> int:
        adj = self._adj
        path: list[tuple[int, int]] = []
        u = source
        while True:
            if u == sink:
                flow = min(adj[x][i][1] for x, i in path)
                for x, i in path:
                    edge = adj[x][i]
                    edge[1] -= flow
                    adj[edge[0]][edge[2]][1] += flow
                return flow
            edges = adj[u]
            while start[u] < len(edges):
                to, residual, _ = edges[start[u]]
                if residual > 0 and level[to] == level[u] + 1:
                    break
                start[u] += 1
            else:
                if not path:
                    return 0
                u, _ = path.pop()
                start[u] += 1
                continue
            path.append((u, start[u]))
            u = edges[start[u]][0]

    def max_flow(self, source: int, sink: int) -> int:
        """Largest flow that can be pushed from ``source`` to ``sink``."""
        self._check(source)
        self._check(sink)
        if source == sink:
            raise ValueError("source and sink must differ")
        total = 0
        while True:
            level = self._levels(source)
            if level[sink] < 0:
                return total
            start = [0] * self.size
            while flow := self._augment(source, sink, level, start):
                total += flow


def _find_path(cap: list[list[int]], source: int, sink: int) -> list[int] | None:
    n = len(cap)
    visited = [False] * n
    visited[source] = True
    path = [source]
    pending = [iter(range(n))]
    while pending:
        u = path[-1]
        for i in pending[-1]:
            if visited[i] or cap[u][i] <= 0:
                continue
            path.append(i)
            if i == sink:
                return path
            visited[i] = True
            pending.append(iter(range(n)))
            break
        else:
            pending.pop()
            path.pop()
    return None


def ford_fulkerson(capacity: Sequence[Sequence[int]], source: int, sink: int) -> int:
    """Maximum flow on a square capacity matrix using depth-first augmenting paths.

    The input matrix is left unchanged.
    """
    cap = [list(row) for row in capacity]
    n = len(cap)
    if any(len(row) != n for row in cap):
        raise ValueError("capacity matrix must be square")
    for v in (source, sink):
        if not 0 <= v < n:
            raise IndexError(f"vertex {v} out of range")
    if source == sink:
        raise ValueError("source and sink must differ")
    total = 0
    while (path := _find_path(cap, source, sink)) is not None:
        flow = min(cap[a][b] for a, b in zip(path, path[1:]))
        for a, b in zip(path, path[1:]):
            cap[a][b] -= flow
            cap[b][a] += flow
        total += flow
    return total