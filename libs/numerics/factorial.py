"""
Iterative factorial over fixed-width signed integers.

Products wrap the way a two's complement machine integer does; overflow is
not detected. Pass ``bits=None`` for Python's unbounded integers.
"""

from __future__ import annotations

from typing import Optional

from .models import FactorialResult

DEFAULT_BITS = 32


def wrap_signed(value: int, bits: int) -> int:
    """Reduce ``value`` to the signed range of a ``bits``-wide integer."""
    if bits <= 0:
        raise ValueError("bits must be > 0")
    modulus = 1 << bits
    value &= modulus - 1
    if value >= modulus >> 1:
        value -= modulus
    return value


def factorial(n: int, bits: Optional[int] = DEFAULT_BITS) -> int:
    """
    Return n! for a non-negative integer n.

    Each multiplication is truncated to ``bits`` when a width is given, so
    large n yields the wrapped value rather than an error.
    """
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError("n must be an integer")
    if n < 0:
        raise ValueError("n must be >= 0")
    if bits is not None and bits <= 0:
        raise ValueError("bits must be > 0")
    result = 1
    for i in range(2, n + 1):
        result *= i
        if bits is not None:
            result = wrap_signed(result, bits)
    return result


def compute(n: int, bits: Optional[int] = DEFAULT_BITS) -> FactorialResult:
    return FactorialResult(n=n, value=factorial(n, bits), bits=bits)
