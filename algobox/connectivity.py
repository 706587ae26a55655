"""Cut vertices, bridges, biconnected components and the bridge tree."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any


def _normalize(
    adjacency: Mapping[Any, Iterable[Any]] | Sequence[Iterable[Any]],
) -> dict[Any, list[Any]]:
    items = adjacency.items() if isinstance(adjacency, Mapping) else enumerate(adjacency)
    graph: dict[Any, list[Any]] = {}
    for u, neighbours in items:
        graph.setdefault(u, []).extend(neighbours)
    for neighbours in list(graph.values()):
        for v in neighbours:
            graph.setdefault(v, [])
    return graph


def _edge_key(u: Any, v: Any) -> tuple[Any, Any]:
    return (u, v) if u <= v else (v, u)


@dataclass
class ConnectivityResult:
    """Articulation points, bridges and biconnected components of a graph.

    Bridges are stored as ``(min, max)`` vertex pairs; each biconnected
    component is the list of its edges in the order they were found.
    """

    cut_vertices: set[Hashable] = field(default_factory=set)
    bridges: set[tuple[Hashable, Hashable]] = field(default_factory=set)
    components: list[list[tuple[Hashable, Hashable]]] = field(default_factory=list)


def analyze(
    adjacency: Mapping[Any, Iterable[Any]] | Sequence[Iterable[Any]],
) -> ConnectivityResult:
    """Find cut vertices, bridges and biconnected components.

    ``adjacency`` maps each vertex to its neighbours (or is a list indexed
    by vertex); every undirected edge is listed from both ends.
    """
    graph = _normalize(adjacency)
    result = ConnectivityResult()
    disc: dict[Any, int] = {}
    low: dict[Any, int] = {}
    edges: list[tuple[Any, Any]] = []
    timer = 0

    for start in graph:
        if start in disc:
            continue
        disc[start] = low[start] = timer
        timer += 1
        root_children = 0
        stack: list[tuple[Any, Any, Iterator[Any]]] = [(start, None, iter(graph[start]))]
        while stack:
            u, parent, neighbours = stack[-1]
            for v in neighbours:
                if v not in disc:
                    if u == start:
                        root_children += 1
                    edges.append((u, v))
                    disc[v] = low[v] = timer
                    timer += 1
                    stack.append((v, u, iter(graph[v])))
                    break
                if v != parent:
                    low[u] = min(low[u], disc[v])
                    if disc[v] < disc[u]:
                        edges.append((u, v))
            else:
                stack.pop()
                if parent is None:
                    continue
                low[parent] = min(low[parent], low[u])
                if low[u] >= disc[parent]:
                    if parent != start or root_children > 1:
                        result.cut_vertices.add(parent)
                    component = []
                    while True:
                        edge = edges.pop()
                        component.append(edge)
                        if edge == (parent, u):
                            break
                    result.components.append(component)
                if low[u] > disc[parent]:
                    result.bridges.add(_edge_key(parent, u))
    return result


def bridge_tree(
    adjacency: Mapping[Any, Iterable[Any]] | Sequence[Iterable[Any]],
    start: Hashable,
) -> tuple[dict[Hashable, int], dict[int, list[int]]]:
    """Contract the 2-edge-connected components reachable from ``start``.

    Returns ``(component_of, tree)``: the component id of every reached
    vertex, numbered from 1, and the adjacency of the tree whose edges are
    the bridges.
    """
    graph = _normalize(adjacency)
    if start not in graph:
        raise ValueError(f"unknown start vertex {start!r}")
    bridges = analyze(graph).bridges
    component_of: dict[Hashable, int] = {}
    tree: dict[int, list[int]] = {}

    def explore(v: Any, cid: int) -> Iterator[Any]:
        component_of[v] = cid
        queue = deque([v])
        while queue:
            u = queue.popleft()
            for w in graph[u]:
                if w in component_of:
                    continue
                if _edge_key(u, w) in bridges:
                    yield w
                else:
                    component_of[w] = cid
                    queue.append(w)

    tree[1] = []
    next_id = 2
    stack = [(1, explore(start, 1))]
    while stack:
        cid, walker = stack[-1]
        w = next(walker, None)
        if w is None and not (w in graph and w not in component_of):
            stack.pop()
            continue
        new_id = next_id
        next_id += 1
        tree[cid].append(new_id)
        tree[new_id] = [cid]
        stack.append((new_id, explore(w, new_id)))
    return component_of, tree