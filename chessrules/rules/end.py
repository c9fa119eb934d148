"""Checks for ending the game"""

import logging
from dataclasses import dataclass
from typing import Optional

from chessrules.chess.game import ChessGame, Player
from chessrules.core.shared_types import Color, Status
from chessrules.rules.check import CheckRule
from chessrules.rules.legality import LegalityFilter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameStatus:
    status: Status
    loser: Optional[Player] = None

    @property
    def is_over(self) -> bool:
        return self.status != Status.ONGOING

    @property
    def winner(self) -> Optional[Color]:
        """Only a checkmate has a winner"""
        if self.loser is None:
            return None
        return self.loser.color.opponent


class EndRule:
    def __init__(self, check_rule: CheckRule, legality_filter: LegalityFilter) -> None:
        self.check_rule = check_rule
        self.legality_filter = legality_filter

    def get_status(self, game: ChessGame) -> GameStatus:
        """
        * Any legal update left for the active player --> the game goes on
        * None left and in check --> checkmate, the active player lost
        * None left and not in check --> stalemate
        """
        if self.legality_filter.has_legal_update(game):
            return GameStatus(Status.ONGOING)

        player = game.active_player
        if self.check_rule.check(game, player):
            logger.debug("Checkmate: %s has no legal move and is in check", player.color)
            return GameStatus(Status.CHECKMATE, loser=player)

        logger.debug("Stalemate: %s has no legal move", player.color)
        return GameStatus(Status.STALEMATE)
