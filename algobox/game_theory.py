"""Impartial game helpers: mex, nim variants and xor prefixes."""

from __future__ import annotations

from collections.abc import Iterable
from functools import reduce
from itertools import count
from operator import xor


def mex(values: Iterable[int]) -> int:
    """Smallest non-negative integer not in ``values``."""
    present = set(values)
    return next(i for i in count() if i not in present)


def nim(piles: Iterable[int]) -> bool:
    """Whether the first player wins normal-play nim."""
    return reduce(xor, piles, 0) != 0


def misere(piles: Iterable[int]) -> bool:
    """Whether the first player wins misère nim."""
    piles = list(piles)
    total = reduce(xor, piles, 0)
    if all(p <= 1 for p in piles):
        return total == 0
    return total != 0


def nim_k(piles: Iterable[int], k: int) -> bool:
    """Whether the first player wins nim where a move touches 1..k piles.

    The first player loses exactly when every binary column sum is
    divisible by ``k + 1``.
    """
    piles = list(piles)
    width = max((p.bit_length() for p in piles), default=0)
    return any(sum((p >> bit) & 1 for p in piles) % (k + 1) for bit in range(width))


def xor_prefix(i: int) -> int:
    """``0 ^ 1 ^ ... ^ i``."""
    return (i, 1, i + 1, 0)[i % 4]


def xor_range(i: int, j: int) -> int:
    """``i ^ (i+1) ^ ... ^ j``."""
    return xor_prefix(j) ^ xor_prefix(i - 1)