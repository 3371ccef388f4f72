"""Spelling out whole numbers in English."""

from __future__ import annotations

__all__ = ["in_english"]

_LIMIT = 999_999_999_999

_ONES = (
    "zero",
    "one",
    "two",
    "three",
    "four",
    "five",
    "six",
    "seven",
    "eight",
    "nine",
)

_TEENS = (
    "ten",
    "eleven",
    "twelve",
    "thirteen",
    "fourteen",
    "fifteen",
    "sixteen",
    "seventeen",
    "eighteen",
    "nineteen",
)

_TENS = (
    "twenty",
    "thirty",
    "forty",
    "fifty",
    "sixty",
    "seventy",
    "eighty",
    "ninety",
)

_SCALES = ("", "thousand", "million", "billion")


def _below_hundred(number: int) -> str:
    """Spell out a number from 1 to 99."""
    tens, ones = divmod(number, 10)
    if tens == 0:
        return _ONES[ones]
    if tens == 1:
        return _TEENS[ones]
    name = _TENS[tens - 2]
    return f"{name}-{_ONES[ones]}" if ones else name


def _below_thousand(number: int) -> str:
    """Spell out a number from 1 to 999."""
    hundreds, rest = divmod(number, 100)
    words = []
    if hundreds:
        words.append(f"{_ONES[hundreds]} hundred")
    if rest:
        words.append(_below_hundred(rest))
    return " ".join(words)


def _groups(num: int):
    """Yield (scale, three-digit group) pairs from the least significant group up."""
    for scale in _SCALES:
        num, group = divmod(num, 1000)
        yield scale, group
        if num == 0:
            return


def in_english(num: int) -> str:
    """Return ``num`` written out in English words.

    Raises ValueError when ``num`` is negative or above 999,999,999,999.
    """
    if num < 0 or num > _LIMIT:
        raise ValueError(f"{num} is out of range")
    if num == 0:
        return _ONES[0]
    parts = []
    for scale, group in _groups(num):
        if group == 0:
            continue
        words = _below_thousand(group)
        parts.append(f"{words} {scale}" if scale else words)
    return " ".join(reversed(parts))