"""Recursive radix-2 FFT and integer polynomial multiplication."""

from __future__ import annotations

import cmath
import math
from collections.abc import Sequence


def _transform(values: list[complex], sign: int) -> list[complex]:
    n = len(values)
    if n == 1:
        return list(values)
    even = _transform(values[0::2], sign)
    odd = _transform(values[1::2], sign)
    wn = cmath.exp(sign * 2j * math.pi / n)
    w = complex(1.0, 0.0)
    first, second = [], []
    for e, o in zip(even, odd):
        t = w * o
        first.append(e + t)
        second.append(e - t)
        w *= wn
    return first + second


def fft(values: Sequence[complex], inverse: bool = False) -> list[complex]:
    """Discrete Fourier transform of a sequence whose length is a power of two.

    The inverse transform is not divided by the length.
    """
    points = [complex(v) for v in values]
    n = len(points)
    if n == 0 or n & (n - 1):
        raise ValueError("length must be a power of two")
    return _transform(points, -1 if inverse else 1)


def poly_mul(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Multiply integer polynomials given by coefficient lists (lowest first).

    The result holds ``2 * p - 1`` coefficients, where ``p`` is the smallest
    power of two not below the longer input; the tail is zero-padded.
    """
    n = max(len(a), len(b))
    size = 1
    while size < n:
        size <<= 1
    m = size << 1
    ya = fft(list(a) + [0] * (m - len(a)))
    yb = fft(list(b) + [0] * (m - len(b)))
    c = fft([x * y for x, y in zip(ya, yb)], inverse=True)
    return [round(v.real / m) for v in c[: m - 1]]