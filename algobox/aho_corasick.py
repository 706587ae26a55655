"""Aho-Corasick automaton counting occurrences of many patterns at once."""

from __future__ import annotations

from collections import deque


class _Node:
    __slots__ = ("children", "fail", "own", "output")

    def __init__(self) -> None:
        self.children: dict[str, _Node] = {}
        self.fail: _Node | None = None
        self.own: list[int] = []
        self.output: list[int] = []


class AhoCorasick:
    """Patterns are added, the automaton built, then texts scanned."""

    def __init__(self) -> None:
        self._root = _Node()
        self._patterns: list[str] = []
        self._built = False

    def add(self, pattern: str) -> int:
        """Register ``pattern`` and return its index."""
        if not pattern:
            raise ValueError("pattern must not be empty")
        node = self._root
        for ch in pattern:
            node = node.children.setdefault(ch, _Node())
        index = len(self._patterns)
        node.own.append(index)
        self._patterns.append(pattern)
        self._built = False
        return index

    def build(self) -> None:
        """Compute failure links and the pattern outputs of every state."""
        root = self._root
        root.fail = root
        root.output = list(root.own)
        queue: deque[_Node] = deque()
        for child in root.children.values():
            child.fail = root
            child.output = list(child.own)
            queue.append(child)
        while queue:
            node = queue.popleft()
            for ch, child in node.children.items():
                f = node.fail
                while ch not in f.children and f is not root:
                    f = f.fail
                child.fail = f.children.get(ch, root)
                child.output = child.own + child.fail.output
                queue.append(child)
        self._built = True

    def count(self, text: str) -> list[int]:
        """Occurrences of each pattern in ``text``, indexed as added."""
        if not self._built:
            self.build()
        root = self._root
        counts = [0] * len(self._patterns)
        node = root
        for ch in text:
            while ch not in node.children and node is not root:
                node = node.fail
            node = node.children.get(ch, root)
            for index in node.output:
                counts[index] += 1
        return counts