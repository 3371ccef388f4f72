"""Robots with random names of two capital letters and three digits."""

from __future__ import annotations

import random
import string

__all__ = ["Robot"]

_NAME_SPACE = 26 * 26 * 10 * 10 * 10
_shared_rng = random.Random()


class Robot:
    """A robot whose name never repeats one it has had before.

    Without an explicit ``rng``, all robots draw from one shared generator.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else _shared_rng
        self._previous_names: set[str] = set()
        self._name = ""
        self.reset()

    @property
    def name(self) -> str:
        """The robot's current name."""
        return self._name

    def _random_name(self) -> str:
        letters = "".join(self._rng.choice(string.ascii_uppercase) for _ in range(2))
        digits = "".join(self._rng.choice(string.digits) for _ in range(3))
        return letters + digits

    def reset(self) -> None:
        """Give the robot a fresh name it has not had before.

        Raises RuntimeError once every possible name has been used.
        """
        if len(self._previous_names) >= _NAME_SPACE:
            raise RuntimeError("all robot names have been used")
        candidate = self._random_name()
        while candidate in self._previous_names:
            candidate = self._random_name()
        self._previous_names.add(candidate)
        self._name = candidate