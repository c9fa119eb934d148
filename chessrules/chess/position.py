"""
A position on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# Chess board is always 8x8. (rows, columns)
BOARD_DIMENSIONS = (8, 8)


@dataclass(frozen=True, order=True)
class Position:
    """Row 0 is White's back rank, column 0 the a-file. Ordering is row-major."""

    row: int
    column: int

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < BOARD_DIMENSIONS[0]) and (
            0 <= self.column < BOARD_DIMENSIONS[1]
        )

    def offset(self, d_row: int, d_column: int) -> Position:
        return Position(self.row + d_row, self.column + d_column)


def span_on_row(row: int, *columns: int) -> list[Position]:
    """All positions on the row from the smallest to the largest column given (inclusive)."""
    return [Position(row, column) for column in range(min(columns), max(columns) + 1)]
