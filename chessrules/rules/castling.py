"""
Castling rule
----

Works for the standard layout and for Chess960 layouts alike: wherever king and rook start, after castling
the king stands on the c- or g-file and the rook right next to it on the d- or f-file.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Self

from chessrules.chess.board import Board
from chessrules.chess.commands import Command, RemoveCommand, SpawnCommand, sequence
from chessrules.chess.game import ChessGame
from chessrules.chess.pieces import Piece
from chessrules.chess.position import Position, span_on_row
from chessrules.core.shared_types import PieceType
from chessrules.rules.threat import ThreatAnalyzer


class CastlingSide(Enum):
    KING_SIDE = "king side"
    QUEEN_SIDE = "queen side"


# Columns where (king, rook) end up after castling
CASTLING_TARGET_COLUMNS: dict[CastlingSide, tuple[int, int]] = {
    CastlingSide.KING_SIDE: (6, 5),
    CastlingSide.QUEEN_SIDE: (2, 3),
}


@dataclass(frozen=True)
class CastlingSquares:
    """Store the squares where king/rook start from/end up in by castling."""

    side: CastlingSide
    king_from: Position
    king_to: Position
    rook_from: Position
    rook_to: Position

    @classmethod
    def from_start(cls, king_from: Position, rook_from: Position) -> Self:
        """King and rook on the same row. The rook's side of the king determines the castling side."""
        side = (
            CastlingSide.QUEEN_SIDE
            if rook_from.column < king_from.column
            else CastlingSide.KING_SIDE
        )
        king_column, rook_column = CASTLING_TARGET_COLUMNS[side]
        return cls(
            side,
            king_from,
            Position(king_from.row, king_column),
            rook_from,
            Position(king_from.row, rook_column),
        )

    def king_path(self) -> list[Position]:
        """Start, transit and destination of the king. None of them may be attacked."""
        return span_on_row(self.king_from.row, self.king_from.column, self.king_to.column)

    def must_be_empty(self) -> list[Position]:
        """Every square either piece crosses or lands on, apart from where the two of them stand now"""
        span = span_on_row(
            self.king_from.row,
            self.king_from.column,
            self.king_to.column,
            self.rook_from.column,
            self.rook_to.column,
        )
        return [
            position
            for position in span
            if position not in (self.king_from, self.rook_from)
        ]


class CastlingRule:
    def __init__(self, threat_analyzer: ThreatAnalyzer) -> None:
        self.threat_analyzer = threat_analyzer

    def get_commands(self, game: ChessGame, position: Position, piece: Piece) -> Iterator[Command]:
        """
        **you are allowed to castle if**

        * Neither the king nor the rook of choice moved before.
        * Every square between (and including the destinations of) the two pieces is empty.
        * The king is not in check, and does not pass through or land on an attacked square.
        """
        if piece.type != PieceType.KING or piece.moved:
            return

        board = game.board
        for rook_position, rook in board.placed_pieces():
            if rook.type != PieceType.ROOK or rook.color != piece.color:
                continue
            if rook.moved or rook_position.row != position.row:
                continue

            squares = CastlingSquares.from_start(position, rook_position)
            if self._is_allowed(board, squares, piece):
                yield castling_command(squares, piece, rook)

    def _is_allowed(self, board: Board, squares: CastlingSquares, king: Piece) -> bool:
        if board.is_any_occupied(squares.must_be_empty()):
            return False
        return not self.threat_analyzer.is_any_attacked(
            board, squares.king_path(), king.color.opponent
        )


def castling_command(squares: CastlingSquares, king: Piece, rook: Piece) -> Command:
    """
    Lift both pieces first, then put them down. In Chess960 the king may land on the rook's
    starting square (or the other way around), so two plain moves would not do.
    """
    return sequence(
        RemoveCommand(squares.king_from, king),
        RemoveCommand(squares.rook_from, rook),
        SpawnCommand(squares.king_to, king.mark_moved()),
        SpawnCommand(squares.rook_to, rook.mark_moved()),
    )
