"""Reversing text."""

__all__ = ["reverse_string"]


def reverse_string(text: str) -> str:
    """Return ``text`` with its characters in reverse order."""
    return text[::-1]