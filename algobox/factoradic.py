"""Permutations in the factorial number system.

Digits are listed in the same order as the permutation's positions; the
last digit is the least significant (radix 1).
"""

from __future__ import annotations

from collections.abc import Sequence

from sortedcontainers import SortedList


def _check_permutation(perm: Sequence[int]) -> None:
    if sorted(perm) != list(range(len(perm))):
        raise ValueError("expected a permutation of 0..n-1")


def permutation_to_factoradic(perm: Sequence[int]) -> list[int]:
    """Lehmer code of ``perm``: each value's rank among those not yet used."""
    _check_permutation(perm)
    remaining = SortedList(range(len(perm)))
    digits = []
    for value in perm:
        digits.append(remaining.bisect_left(value))
        remaining.remove(value)
    return digits


def factoradic_add(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Sum of two factoradic numbers of ``n`` digits, modulo ``n!``."""
    if len(a) != len(b):
        raise ValueError("factoradic numbers differ in length")
    reversed_digits = []
    carry = 0
    for radix, (x, y) in enumerate(zip(reversed(a), reversed(b)), start=1):
        carry, digit = divmod(x + y + carry, radix)
        reversed_digits.append(digit)
    return reversed_digits[::-1]


def factoradic_to_permutation(digits: Sequence[int]) -> list[int]:
    """Permutation whose Lehmer code is ``digits``."""
    remaining = SortedList(range(len(digits)))
    perm = []
    for digit in digits:
        if not 0 <= digit < len(remaining):
            raise ValueError(f"digit {digit} out of range")
        perm.append(remaining.pop(digit))
    return perm


def add_permutations(p: Sequence[int], q: Sequence[int]) -> list[int]:
    """Permutation of rank ``(rank(p) + rank(q)) mod n!`` in lexicographic order."""
    if len(p) != len(q):
        raise ValueError("permutations differ in length")
    return factoradic_to_permutation(
        factoradic_add(permutation_to_factoradic(p), permutation_to_factoradic(q))
    )