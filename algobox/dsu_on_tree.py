"""Small-to-large ("DSU on tree") colour counting over rooted subtrees."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Mapping, Sequence
from types import MappingProxyType
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


def dsu_on_tree(
    adjacency: Mapping[Any, Iterable[Any]] | Sequence[Iterable[Any]],
    colors: Mapping[Any, Hashable] | Sequence[Hashable],
    root: Hashable,
    visit: Callable[[Any, Mapping[Hashable, int]], None],
) -> None:
    """Call ``visit(u, counts)`` for every vertex of the tree rooted at ``root``.

    ``counts`` is a read-only mapping from each colour present in the
    subtree of ``u`` to the number of its vertices with that colour.
    Children are visited before their parent.
    """
    graph = _normalize(adjacency)
    if root not in graph:
        raise ValueError(f"unknown root {root!r}")

    parent: dict[Any, Any] = {root: None}
    children: dict[Any, list[Any]] = {}
    order = [root]
    for u in order:
        kids = []
        for v in graph[u]:
            if v == parent[u] and u != root:
                continue
            if v in parent:
                raise ValueError("adjacency does not describe a tree")
            parent[v] = u
            kids.append(v)
            order.append(v)
        children[u] = kids

    size = dict.fromkeys(order, 1)
    for u in reversed(order):
        if parent[u] is not None:
            size[parent[u]] += size[u]

    big: dict[Any, Any] = {}
    for u in order:
        best = None
        for v in children[u]:
            if best is None or size[v] > size[best]:
                best = v
        big[u] = best

    counts: dict[Hashable, int] = {}
    view = MappingProxyType(counts)

    def add(color: Hashable) -> None:
        counts[color] = counts.get(color, 0) + 1

    def remove(color: Hashable) -> None:
        counts[color] -= 1
        if not counts[color]:
            del counts[color]

    members: dict[Any, list[Any]] = {}

    def finish(u: Any) -> None:
        heavy = big[u]
        collected = members.pop(heavy) if heavy is not None else []
        collected.append(u)
        add(colors[u])
        for v in children[u]:
            if v == heavy:
                continue
            for x in members.pop(v):
                add(colors[x])
                collected.append(x)
        members[u] = collected
        visit(u, view)
        keep = parent[u] is not None and big[parent[u]] == u
        if not keep:
            for x in collected:
                remove(colors[x])

    def ordered(u: Any) -> list[Any]:
        light = [v for v in children[u] if v != big[u]]
        return light + ([big[u]] if big[u] is not None else [])

    stack = [(root, iter(ordered(root)))]
    while stack:
        u, pending = stack[-1]
        child = next(pending, None)
        if child is None:
            stack.pop()
            finish(u)
        else:
            stack.append((child, iter(ordered(child))))


def distinct_color_counts(
    adjacency: Mapping[Any, Iterable[Any]] | Sequence[Iterable[Any]],
    colors: Mapping[Any, Hashable] | Sequence[Hashable],
    root: Hashable,
) -> dict[Any, int]:
    """Number of distinct colours in the subtree of every vertex."""
    result: dict[Any, int] = {}

    def record(u: Any, counts: Mapping[Hashable, int]) -> None:
        result[u] = len(counts)

    dsu_on_tree(adjacency, colors, root, record)
    return result