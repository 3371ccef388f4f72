"""Square matrices filled in a clockwise spiral."""

from __future__ import annotations

from itertools import cycle

__all__ = ["spiral_matrix"]

_DIRECTIONS = ((0, 1), (1, 0), (0, -1), (-1, 0))


def spiral_matrix(n: int) -> list[list[int]]:
    """Return an ``n`` by ``n`` matrix holding 1 to n*n in clockwise spiral order.

    ``spiral_matrix(0)`` is empty. Raises ValueError when ``n`` is negative.
    """
    if n < 0:
        raise ValueError(f"matrix size must not be negative, got {n}")
    if n == 0:
        return []
    matrix = [[0] * n for _ in range(n)]
    directions = cycle(_DIRECTIONS)
    row_step, column_step = next(directions)
    row = column = 0
    for value in range(1, n * n + 1):
        matrix[row][column] = value
        next_row, next_column = row + row_step, column + column_step
        if not (0 <= next_row < n and 0 <= next_column < n and matrix[next_row][next_column] == 0):
            row_step, column_step = next(directions)
            next_row, next_column = row + row_step, column + column_step
        row, column = next_row, next_column
    return matrix