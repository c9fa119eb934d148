"""Pawn promotion rule"""

from typing import Iterator

from chessrules.chess.board import Board
from chessrules.chess.commands import Command, MoveCommand, RemoveCommand, SpawnCommand, sequence
from chessrules.chess.game import ChessGame
from chessrules.chess.moves import candidate_pawn_moves, promotion_row
from chessrules.chess.pieces import Piece
from chessrules.chess.position import Position
from chessrules.core.config import DEFAULT_PROMOTION_TYPES
from chessrules.core.shared_types import PieceType


class PromotionRule:
    def __init__(self, promotion_types: tuple[PieceType, ...] = DEFAULT_PROMOTION_TYPES) -> None:
        self.promotion_types = promotion_types

    def is_promotion(self, move: MoveCommand) -> bool:
        """check if the move is a pawn move that reaches the farthest row"""
        return (
            move.piece.type == PieceType.PAWN
            and move.to_position.row == promotion_row(move.piece.color)
        )

    def get_commands(self, game: ChessGame, position: Position, piece: Piece) -> Iterator[Command]:
        """One command per promotion type for every pawn move onto the farthest row."""
        if piece.type != PieceType.PAWN:
            return

        for move in self._promotion_moves(game.board, position):
            for piece_type in self.promotion_types:
                yield sequence(
                    move,
                    RemoveCommand(move.to_position, piece),
                    SpawnCommand(move.to_position, piece.promote_to(piece_type)),
                )

    def _promotion_moves(self, board: Board, position: Position) -> list[MoveCommand]:
        return [
            move for move in candidate_pawn_moves(position, board) if self.is_promotion(move)
        ]
