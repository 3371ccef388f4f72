"""Prime factorisation of natural numbers."""

from __future__ import annotations

__all__ = ["of"]


def of(num: int) -> list[int]:
    """Return the prime factors of ``num`` in ascending order, with repetition.

    ``of(1)`` is empty. Raises ValueError when ``num`` is less than 1.
    """
    if num < 1:
        raise ValueError(f"cannot factor {num}")
    factors: list[int] = []
    remaining = num
    divisor = 2
    while divisor * divisor <= remaining:
        while remaining % divisor == 0:
            factors.append(divisor)
            remaining //= divisor
        divisor += 1 if divisor == 2 else 2
    if remaining > 1:
        factors.append(remaining)
    return factors