"""
Starting positions: the standard layout and Chess960 (Fischer-Random) layouts.
"""

import logging
from typing import Iterator, Protocol

from chessrules.chess.board import Board
from chessrules.chess.pieces import Piece, bishop, king, knight, pawn, queen, rook
from chessrules.chess.position import BOARD_DIMENSIONS, Position
from chessrules.core.shared_types import Color

logger = logging.getLogger(__name__)

PlacedPiece = tuple[Position, Piece]

# (pawn row, back row)
STARTING_ROWS: dict[Color, tuple[int, int]] = {
    Color.WHITE: (1, 0),
    Color.BLACK: (BOARD_DIMENSIONS[0] - 2, BOARD_DIMENSIONS[0] - 1),
}


class RandomSource(Protocol):
    """Uniform integers in [start, stop). `random.Random` fits."""

    def randrange(self, start: int, stop: int) -> int: ...


def make_pawns(row: int, color: Color) -> Iterator[PlacedPiece]:
    for column in range(BOARD_DIMENSIONS[1]):
        yield Position(row, column), pawn(color)


def make_base_line(row: int, color: Color) -> Iterator[PlacedPiece]:
    """Rook, knight, bishop, queen, king, bishop, knight, rook from the a-file on"""
    officers = [rook, knight, bishop, queen, king, bishop, knight, rook]
    for column, make_piece in enumerate(officers):
        yield Position(row, column), make_piece(color)


def make_960_line(row: int, color: Color, rng: RandomSource) -> list[PlacedPiece]:
    """
    Random back row that satisfies the Chess960 constraints
    ----

    * The king stands somewhere between the two rooks.
    * The two bishops stand on squares of opposite colors (one even, one odd column).

    Every placement takes one square out of the list of free squares (kept in column order):

    1. king on any free square but the corners
    2. one rook left of the king, one rook right of it
    3. first bishop on any free square, second bishop on a free square of the other column parity
    4. both knights on any free squares
    5. the queen on the last one
    """
    free = [Position(row, column) for column in range(BOARD_DIMENSIONS[1])]
    placed: list[PlacedPiece] = []

    def place(index: int, piece: Piece) -> Position:
        position = free.pop(index)
        placed.append((position, piece))
        return position

    king_index = rng.randrange(1, len(free) - 1)
    place(king_index, king(color))

    # After taking the king out, the free squares left of it are exactly the indices below king_index
    place(rng.randrange(0, king_index), rook(color))
    # ... and after taking the left rook out, the ones right of the king start at king_index - 1
    place(rng.randrange(king_index - 1, len(free)), rook(color))

    first_bishop = place(rng.randrange(0, len(free)), bishop(color))
    other_parity = [
        index
        for index, position in enumerate(free)
        if position.column % 2 != first_bishop.column % 2
    ]
    place(other_parity[rng.randrange(0, len(other_parity))], bishop(color))

    place(rng.randrange(0, len(free)), knight(color))
    place(rng.randrange(0, len(free)), knight(color))

    place(0, queen(color))
    return sorted(placed)


def standard_board() -> Board:
    pieces: list[PlacedPiece] = []
    for color, (pawn_row, back_row) in STARTING_ROWS.items():
        pieces.extend(make_base_line(back_row, color))
        pieces.extend(make_pawns(pawn_row, color))
    return Board.from_pieces(pieces)


def chess960_board(rng: RandomSource) -> Board:
    """Both colors draw their own back row, so the two sides need not mirror each other."""
    pieces: list[PlacedPiece] = []
    for color, (pawn_row, back_row) in STARTING_ROWS.items():
        base_line = make_960_line(back_row, color, rng)
        logger.debug(
            "Chess960 back row for %s: %s",
            color,
            " ".join(piece.type for _, piece in base_line),
        )
        pieces.extend(base_line)
        pieces.extend(make_pawns(pawn_row, color))
    return Board.from_pieces(pieces)
