"""Bit manipulation helpers on integers used as bit sets (bits 0-indexed)."""


def set_bit(s: int, j: int) -> int:
    """Set bit ``j`` of ``s``."""
    return s | (1 << j)


def clear_bit(s: int, j: int) -> int:
    """Clear bit ``j`` of ``s``."""
    return s & ~(1 << j)


def toggle_bit(s: int, j: int) -> int:
    """Flip bit ``j`` of ``s``."""
    return s ^ (1 << j)


def is_on(s: int, j: int) -> bool:
    """Whether bit ``j`` of ``s`` is set."""
    return (s & (1 << j)) != 0


def turn_on_last_zero(s: int) -> int:
    """Set the right-most zero bit, e.g. 1100 -> 1101."""
    return s | (s + 1)


def turn_on_last_consecutive_zeroes(s: int) -> int:
    """Set the run of trailing zero bits, e.g. 10100 -> 10111."""
    return s | (s - 1)


def turn_off_last_bit(s: int) -> int:
    """Clear the right-most set bit, e.g. 111 -> 110."""
    return s & (s - 1)


def turn_off_last_consecutive_bits(s: int) -> int:
    """Clear the run of trailing one bits, e.g. 1011 -> 1000."""
    return s & (s + 1)


def low_bit(s: int) -> int:
    """Value of the lowest set bit of ``s``."""
    return s & -s


def set_all(n: int) -> int:
    """Integer with the lowest ``n`` bits set."""
    return (1 << n) - 1


def modulo(s: int, n: int) -> int:
    """``s % n`` for ``n`` a power of two."""
    return s & (n - 1)


def is_power_of_two(s: int) -> bool:
    """Whether ``s`` has at most one bit set (true for 0 as well)."""
    return (s & (s - 1)) == 0