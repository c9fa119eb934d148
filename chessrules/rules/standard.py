"""
The StandardRulebook is the entrypoint into the rules engine.
It wires up the individual rules and answers the three questions a caller has:
how does a game start, what can the piece on this square do, and is the game over?
"""

import logging
import random
from typing import Iterator, Optional

from chessrules.chess.game import ChessGame, Update
from chessrules.chess.position import Position
from chessrules.core.config import RulebookSettings
from chessrules.rules.castling import CastlingRule
from chessrules.rules.check import CheckRule
from chessrules.rules.en_passant import EnPassantRule
from chessrules.rules.end import EndRule, GameStatus
from chessrules.rules.legality import LegalityFilter
from chessrules.rules.movement import MovementRule
from chessrules.rules.promotion import PromotionRule
from chessrules.rules.setup import RandomSource, chess960_board, standard_board
from chessrules.rules.threat import ThreatAnalyzer

logger = logging.getLogger(__name__)


class StandardRulebook:
    def __init__(self, settings: Optional[RulebookSettings] = None) -> None:
        self.settings = settings or RulebookSettings()

        threat_analyzer = ThreatAnalyzer()
        castling_rule = CastlingRule(threat_analyzer)
        en_passant_rule = EnPassantRule()
        promotion_rule = PromotionRule(self.settings.promotion_types)

        self.check_rule = CheckRule(threat_analyzer)
        self.movement_rule = MovementRule(castling_rule, en_passant_rule, promotion_rule)
        self.legality_filter = LegalityFilter(self.movement_rule, self.check_rule)
        self.end_rule = EndRule(self.check_rule, self.legality_filter)

    # --- GAME CREATION ---
    def create_game(self) -> ChessGame:
        """Standard starting position, white to move"""
        logger.debug("Creating a standard game")
        return ChessGame.new(standard_board())

    def create_960_game(self, rng: Optional[RandomSource] = None) -> ChessGame:
        """
        Chess960 starting position, white to move.

        Without an explicit random source, a new `random.Random` is created for this call only
        (seeded with the configured seed, if any).
        """
        if rng is None:
            rng = random.Random(self.settings.seed)
        logger.debug("Creating a Chess960 game")
        return ChessGame.new(chess960_board(rng))

    # --- QUERIES ---
    def get_status(self, game: ChessGame) -> GameStatus:
        return self.end_rule.get_status(game)

    def get_updates(self, game: ChessGame, position: Position) -> Iterator[Update]:
        """
        All legal updates (future games) for the active player's piece on the position.

        Lazy: nothing is computed before the caller starts iterating. Selecting an empty square or an
        opponent's piece yields no updates.
        """
        return self.legality_filter.legal_updates(game, position)

    def get_all_updates(self, game: ChessGame) -> list[Update]:
        """Legal updates of all the active player's pieces, in board order"""
        updates = list(self.legality_filter.all_legal_updates(game))
        logger.debug(
            "%d legal updates for %s", len(updates), game.active_player.color
        )
        return updates
