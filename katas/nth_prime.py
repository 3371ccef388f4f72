"""Finding the n-th prime number."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import count, islice
from math import isqrt

__all__ = ["nth", "is_prime"]


def is_prime(num: int) -> bool:
    """Return True if ``num`` is a prime number."""
    if num < 2:
        return False
    return all(num % divisor for divisor in range(2, isqrt(num) + 1))


def _primes() -> Iterator[int]:
    """Yield the primes in ascending order, testing only against earlier primes."""
    found: list[int] = []
    for candidate in count(2):
        limit = isqrt(candidate)
        is_new_prime = True
        for prime in found:
            if prime > limit:
                break
            if candidate % prime == 0:
                is_new_prime = False
                break
        if is_new_prime:
            found.append(candidate)
            yield candidate


def nth(prime_index: int) -> int:
    """Return the ``prime_index``-th prime, counting from 1 (so ``nth(1) == 2``).

    Raises ValueError when ``prime_index`` is less than 1.
    """
    if prime_index < 1:
        raise ValueError(f"there is no prime number {prime_index}")
    return next(islice(_primes(), prime_index - 1, None))