"""Small integer helpers used by the allocator layers."""

from __future__ import annotations

_SIZE_BITS = 64
_SIZE_MASK = (1 << _SIZE_BITS) - 1


def is_power_of_two(n: int) -> bool:
    """Return True iff ``n`` is a positive power of two."""
    return n > 0 and not (n & (n - 1))


def check_power_of_two(n: int) -> int:
    """Return ``n`` unchanged, raising ValueError if it is not a power of two."""
    if not is_power_of_two(n):
        raise ValueError(f"{n} must be a power of two")
    return n


def align(value: int, alignment: int) -> int:
    """Round ``value`` up to the next multiple of ``alignment`` (a power of two)."""
    check_power_of_two(alignment)
    mask = alignment - 1
    return (value + mask) & ~mask


def ilog2(n: int) -> int:
    """Return the ceiling of the base-two logarithm of ``n`` (n >= 1)."""
    if n < 1:
        raise ValueError(f"ilog2 is undefined for {n}")
    return (n - 1).bit_length()


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of two non-negative integers."""
    if a < 0 or b < 0:
        raise ValueError("gcd arguments must be non-negative")
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple of two non-negative integers, not both zero."""
    divisor = gcd(a, b)
    if divisor == 0:
        raise ValueError("lcm is undefined when both arguments are zero")
    return (a * b) // divisor


def modulo(value: int, modulus: int) -> int:
    """Compute ``value mod modulus``, using a mask when modulus is a power of two."""
    if is_power_of_two(modulus):
        return value & (modulus - 1)
    return value % modulus


def hash_key(key: object) -> int:
    """Hash an integer or an object identity to a machine-word-sized value."""
    if isinstance(key, int):
        return key & _SIZE_MASK
    return id(key) & _SIZE_MASK