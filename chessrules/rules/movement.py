"""
Candidate moves of a single piece
----

Combines the piece's own geometry (see moves.py) with the special rules. No check filtering happens here.
"""

from itertools import chain
from typing import Iterator

from chessrules.chess.commands import Command
from chessrules.chess.game import ChessGame
from chessrules.chess.moves import MOVEMENT_RULES, CandidateMovesFn
from chessrules.chess.pieces import Piece
from chessrules.chess.position import Position
from chessrules.rules.castling import CastlingRule
from chessrules.rules.en_passant import EnPassantRule
from chessrules.rules.promotion import PromotionRule


class MovementRule:
    def __init__(
        self,
        castling_rule: CastlingRule,
        en_passant_rule: EnPassantRule,
        promotion_rule: PromotionRule,
    ) -> None:
        self.castling_rule = castling_rule
        self.en_passant_rule = en_passant_rule
        self.promotion_rule = promotion_rule

    def get_commands(self, game: ChessGame, position: Position, piece: Piece) -> Iterator[Command]:
        """
        In this order:

        1. ordinary moves (a pawn reaching the farthest row is left to the promotion rule)
        2. castling
        3. en passant
        4. promotions
        """
        return chain(
            self._ordinary_commands(game, position, piece),
            self.castling_rule.get_commands(game, position, piece),
            self.en_passant_rule.get_commands(game, position, piece),
            self.promotion_rule.get_commands(game, position, piece),
        )

    def _ordinary_commands(self, game: ChessGame, position: Position, piece: Piece) -> Iterator[Command]:
        movement_rule: CandidateMovesFn = MOVEMENT_RULES[piece.type]
        for move in movement_rule(position, game.board):
            if not self.promotion_rule.is_promotion(move):
                yield move
