"""Modular matrix products and powers; Gauss-Jordan elimination."""

from __future__ import annotations

from collections.abc import Sequence

MOD = 1_000_000_007
EPSILON = 1e-7

Matrix = list[list[int]]


class SingularMatrixError(ValueError):
    """Raised when elimination meets a matrix with no usable pivot."""


def mat_mult(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]], mod: int = MOD) -> Matrix:
    """Product of an N x R and an R x M matrix, entries reduced modulo ``mod``."""
    if any(len(row) != len(b) for row in a):
        raise ValueError("inner dimensions do not match")
    columns = list(zip(*b))
    return [[sum(x * y % mod for x, y in zip(row, col)) % mod for col in columns] for row in a]


def mat_pow(a: Sequence[Sequence[int]], power: int, mod: int = MOD) -> Matrix:
    """Square matrix ``a`` raised to ``power`` modulo ``mod``."""
    n = len(a)
    if any(len(row) != n for row in a):
        raise ValueError("matrix must be square")
    if power < 0:
        raise ValueError("power must be non-negative")
    result = [[int(i == j) for j in range(n)] for i in range(n)]
    base = [list(row) for row in a]
    while power:
        if power & 1:
            result = mat_mult(result, base, mod)
        base = mat_mult(base, base, mod)
        power >>= 1
    return result


def gauss_jordan(
    a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]
) -> tuple[list[list[float]], float]:
    """Solve ``a @ x = b`` by Gauss-Jordan elimination with partial pivoting.

    ``a`` is n x n and ``b`` is n x m. Returns ``(x, det(a))``. The inputs
    are left unchanged. Raises SingularMatrixError for a singular ``a``.
    """
    n = len(a)
    if any(len(row) != n for row in a) or len(b) != n:
        raise ValueError("a must be square with as many rows as b")
    a = [[float(v) for v in row] for row in a]
    b = [[float(v) for v in row] for row in b]
    det = 1.0
    for k in range(n):
        pivot = max(range(k, n), key=lambda i: abs(a[i][k]))
        if abs(a[pivot][k]) < EPSILON:
            raise SingularMatrixError("matrix is singular")
        if pivot != k:
            a[pivot], a[k] = a[k], a[pivot]
            b[pivot], b[k] = b[k], b[pivot]
            det = -det
        s = a[k][k]
        a[k] = [v / s for v in a[k]]
        b[k] = [v / s for v in b[k]]
        det *= s
        for i in range(n):
            if i == k:
                continue
            t = a[i][k]
            a[i] = [x - t * y for x, y in zip(a[i], a[k])]
            b[i] = [x - t * y for x, y in zip(b[i], b[k])]
    return b, det