"""Sieve of Eratosthenes."""

from __future__ import annotations

from math import isqrt

__all__ = ["primes"]


def primes(upper: int) -> list[int]:
    """Return every prime from 2 up to and including ``upper``."""
    if upper < 2:
        return []
    marks = bytearray([1]) * (upper + 1)
    marks[0] = marks[1] = 0
    for number in range(2, isqrt(upper) + 1):
        if marks[number]:
            marks[number * number :: number] = bytes(len(range(number * number, upper + 1, number)))
    return [number for number, is_marked in enumerate(marks) if is_marked]