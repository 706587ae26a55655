"""Prefix tree counting inserted words and prefixes."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class _Node:
    children: dict[str, _Node] = field(default_factory=dict)
    passing: int = 0
    ending: int = 0


class Trie:
    """Multiset of words supporting prefix and exact-word counts."""

    def __init__(self) -> None:
        self._root = _Node()

    def insert(self, word: str) -> None:
        """Add one occurrence of ``word``."""
        node = self._root
        node.passing += 1
        for ch in word:
            node = node.children.setdefault(ch, _Node())
            node.passing += 1
        node.ending += 1

    def _find(self, text: str) -> _Node | None:
        node = self._root
        for ch in text:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def prefix_count(self, prefix: str) -> int:
        """Number of inserted words that start with ``prefix``."""
        node = self._find(prefix)
        return node.passing if node else 0

    def word_count(self, word: str) -> int:
        """Number of times ``word`` was inserted."""
        node = self._find(word)
        return node.ending if node else 0