"""Classifying how two lists relate to each other."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

__all__ = ["ListComparison", "sublist"]


class ListComparison(Enum):
    """How the first list relates to the second."""

    EQUAL = "equal"
    SUBLIST = "sublist"
    SUPERLIST = "superlist"
    UNEQUAL = "unequal"


def _contains(haystack: Sequence, needle: Sequence) -> bool:
    """Return True if ``needle`` occurs as a contiguous run inside ``haystack``."""
    width = len(needle)
    if width == 0:
        return True
    needle = list(needle)
    return any(
        list(haystack[start : start + width]) == needle
        for start in range(len(haystack) - width + 1)
    )


def sublist(first: Sequence, second: Sequence) -> ListComparison:
    """Return whether ``first`` equals, is inside, contains, or is unrelated to ``second``."""
    if list(first) == list(second):
        return ListComparison.EQUAL
    if _contains(second, first):
        return ListComparison.SUBLIST
    if _contains(first, second):
        return ListComparison.SUPERLIST
    return ListComparison.UNEQUAL