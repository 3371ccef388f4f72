"""Whether two queens on a chess board can attack each other."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["ChessBoard"]

_BOARD_SIZE = 8


def _on_board(position: tuple[int, int]) -> bool:
    row, column = position
    return 0 <= row < _BOARD_SIZE and 0 <= column < _BOARD_SIZE


@dataclass(frozen=True)
class ChessBoard:
    """A board holding a white and a black queen, each at a (row, column) position.

    Raises ValueError when a queen is off the board or both share a square.
    """

    white: tuple[int, int]
    black: tuple[int, int]

    def __post_init__(self) -> None:
        white = tuple(self.white)
        black = tuple(self.black)
        if len(white) != 2 or len(black) != 2:
            raise ValueError("a position is a (row, column) pair")
        object.__setattr__(self, "white", white)
        object.__setattr__(self, "black", black)
        if not _on_board(white):
            raise ValueError(f"white queen position {white} is off the board")
        if not _on_board(black):
            raise ValueError(f"black queen position {black} is off the board")
        if white == black:
            raise ValueError("queens cannot share the same position")

    def can_attack(self) -> bool:
        """Return True if the queens share a row, a column or a diagonal."""
        row_delta = self.black[0] - self.white[0]
        column_delta = self.black[1] - self.white[1]
        return row_delta == 0 or column_delta == 0 or abs(row_delta) == abs(column_delta)