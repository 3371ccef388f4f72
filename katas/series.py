"""Contiguous substrings of a given length."""

from __future__ import annotations

__all__ = ["slices"]


def slices(text: str, window: int) -> list[str]:
    """Return every contiguous substring of ``text`` that is ``window`` long, in order.

    Raises ValueError when ``window`` is not positive or longer than ``text``.
    """
    if window <= 0 or window > len(text):
        raise ValueError(f"invalid slice length {window} for a series of length {len(text)}")
    return [text[start : start + window] for start in range(len(text) - window + 1)]