"""En passant rule: the only rule that looks at the previous ply."""

from typing import Iterator, Optional

from chessrules.chess.commands import Command, MoveCommand, RemoveCommand, leading_move, sequence
from chessrules.chess.game import ChessGame
from chessrules.chess.moves import pawn_direction
from chessrules.chess.pieces import Piece
from chessrules.chess.position import Position
from chessrules.core.shared_types import PieceType


class EnPassantRule:
    def get_commands(self, game: ChessGame, position: Position, piece: Piece) -> Iterator[Command]:
        """
        If the opponent's last move was a pawn's double step that ended right next to this pawn,
        this pawn may take it by moving diagonally onto the square the opponent's pawn skipped.
        """
        if piece.type != PieceType.PAWN:
            return

        double_step = self._last_double_step(game)
        if double_step is None:
            return

        passed_position = double_step.to_position
        passed_pawn = game.board.piece(passed_position, piece.color.opponent)
        is_adjacent = (
            passed_position.row == position.row
            and abs(passed_position.column - position.column) == 1
        )
        if passed_pawn is None or not is_adjacent:
            return

        target = Position(position.row + pawn_direction(piece.color), passed_position.column)
        yield sequence(
            MoveCommand(position, target, piece),
            RemoveCommand(passed_position, passed_pawn),
        )

    def _last_double_step(self, game: ChessGame) -> Optional[MoveCommand]:
        """The move of the last ply, if it was a pawn advancing two rows"""
        if game.last_update is None:
            return None

        move = leading_move(game.last_update.command)
        if move is None or move.piece.type != PieceType.PAWN:
            return None
        if abs(move.to_position.row - move.from_position.row) != 2:
            return None
        return move
