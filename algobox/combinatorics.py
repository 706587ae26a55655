"""Tables of binomial coefficients, Bell numbers and Catalan numbers."""

from __future__ import annotations

from algobox.number_theory import fast_pow


def binomial_table(size: int, mod: int) -> list[list[int]]:
    """Return a ``size`` x ``size`` table with ``C[i][j] = binom(i, j) % mod``."""
    if size <= 0:
        return []
    table = [[1] + [0] * (size - 1)]
    for _ in range(1, size):
        prev = table[-1]
        table.append([1] + [(x + y) % mod for x, y in zip(prev[1:], prev[:-1])])
    return table


def bell_numbers(size: int, mod: int) -> list[int]:
    """Return the first ``size`` Bell numbers modulo ``mod``."""
    if size <= 0:
        return []
    binomials = binomial_table(size, mod)
    bell = [1]
    for row in binomials[:-1]:
        bell.append(sum(b * c for b, c in zip(bell, row)) % mod)
    return bell


def catalan_numbers(size: int, mod: int) -> list[int]:
    """Return the first ``size`` Catalan numbers modulo a prime ``mod``.

    Linear time; relies on modular inverses, so ``mod`` must be prime.
    """
    if size <= 0:
        return []
    cat = [1]
    for i in range(size - 1):
        cat.append(2 * (2 * i + 1) * cat[-1] % mod * fast_pow(i + 2, mod - 2, mod) % mod)
    return cat


def catalan_numbers_quadratic(size: int, mod: int) -> list[int]:
    """Return the first ``size`` Catalan numbers modulo any ``mod``.

    Quadratic time, by the convolution recurrence.
    """
    if size <= 0:
        return []
    cat = [1]
    for _ in range(size - 1):
        cat.append(sum(x * y % mod for x, y in zip(cat, reversed(cat))) % mod)
    return cat