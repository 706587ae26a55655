"""Knuth-Morris-Pratt substring search."""

from __future__ import annotations

from collections.abc import Sequence


def prefix_function(pattern: Sequence) -> list[int]:
    """For each position, the length of the longest proper border of the prefix."""
    f = [0] * len(pattern)
    k = 0
    for i in range(1, len(pattern)):
        while k and pattern[i] != pattern[k]:
            k = f[k - 1]
        if pattern[i] == pattern[k]:
            k += 1
        f[i] = k
    return f


def find_all(text: Sequence, pattern: Sequence) -> list[int]:
    """Start indices of every (possibly overlapping) occurrence of ``pattern``."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    f = prefix_function(pattern)
    matches = []
    k = 0
    for i, ch in enumerate(text):
        while k and pattern[k] != ch:
            k = f[k - 1]
        if pattern[k] == ch:
            k += 1
        if k == len(pattern):
            matches.append(i - k + 1)
            k = f[k - 1]
    return matches