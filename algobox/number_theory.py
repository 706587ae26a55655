"""Euclid-based number theory and modular exponentiation."""

from __future__ import annotations

from collections.abc import Sequence


def mod(a: int, b: int) -> int:
    """Return ``a`` modulo ``b`` as a non-negative value for positive ``b``."""
    return a % b


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple of ``a`` and ``b``."""
    return a // gcd(a, b) * b


def extended_euclid(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(d, x, y)`` with ``d = gcd(a, b) = a*x + b*y``."""
    x, y, xx, yy = 1, 0, 0, 1
    while b:
        q = a // b
        a, b = b, a - q * b
        x, xx = xx, x - q * xx
        y, yy = yy, y - q * yy
    return a, x, y


def modular_linear_equation_solver(a: int, b: int, n: int) -> list[int]:
    """Return every solution of ``a*x = b (mod n)`` in ``[0, n)``."""
    d, x, _ = extended_euclid(a, n)
    if b % d:
        return []
    x = mod(x * (b // d), n)
    step = n // d
    return [mod(x + i * step, n) for i in range(d)]


def mod_inverse(a: int, n: int) -> int:
    """Return ``b`` with ``a*b = 1 (mod n)``.

    Raises ValueError when ``a`` has no inverse modulo ``n``.
    """
    d, x, _ = extended_euclid(a, n)
    if d > 1:
        raise ValueError(f"{a} is not invertible modulo {n}")
    return mod(x, n)


def chinese_remainder_pair(x: int, a: int, y: int, b: int) -> tuple[int, int]:
    """Solve ``z = a (mod x)`` and ``z = b (mod y)``.

    Returns ``(z, M)`` where ``M = lcm(x, y)``; raises ValueError when
    the two congruences are incompatible.
    """
    d, s, t = extended_euclid(x, y)
    if a % d != b % d:
        raise ValueError("congruences have no common solution")
    return mod(s * b * x + t * a * y, x * y) // d, x * y // d


def chinese_remainder(
    moduli: Sequence[int], remainders: Sequence[int]
) -> tuple[int, int]:
    """Solve ``z = remainders[i] (mod moduli[i])`` for every ``i``.

    Returns ``(z, M)`` with ``M`` the lcm of the moduli; raises ValueError
    when the system has no solution or the inputs are malformed.
    """
    if len(moduli) != len(remainders):
        raise ValueError("moduli and remainders differ in length")
    if not moduli:
        raise ValueError("at least one congruence is required")
    pairs = iter(zip(moduli, remainders))
    first_modulus, first_remainder = next(pairs)
    z, m = mod(first_remainder, first_modulus), first_modulus
    for modulus, remainder in pairs:
        z, m = chinese_remainder_pair(m, z, modulus, remainder)
    return z, m


def linear_diophantine(a: int, b: int, c: int) -> tuple[int, int]:
    """Return ``(x, y)`` with ``a*x + b*y = c``.

    Raises ValueError when no integer solution exists.
    """
    if b == 0:
        raise ValueError("b must be non-zero")
    d = gcd(a, b)
    if c % d:
        raise ValueError(f"{a}*x + {b}*y = {c} has no integer solution")
    x = c // d * mod_inverse(a // d, b // d)
    y = (c - a * x) // b
    return x, y


def fast_pow(base: int, power: int, mod: int) -> int:
    """Return ``base ** power`` modulo ``mod`` by repeated squaring."""
    if power <= 0:
        return 1
    return pow(base % mod, power, mod)