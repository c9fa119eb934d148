"""Is a player's king under attack?"""

from chessrules.chess.game import ChessGame, Player
from chessrules.core.exceptions import GameStateError
from chessrules.rules.threat import ThreatAnalyzer


class CheckRule:
    def __init__(self, threat_analyzer: ThreatAnalyzer) -> None:
        self.threat_analyzer = threat_analyzer

    def check(self, game: ChessGame, player: Player) -> bool:
        """
        Locate the player's king and ask whether the opponent attacks it.

        Kings are never captured (the game ends by checkmate first), so a board without the king is a broken game state.
        """
        king_position = game.board.find_king(player.color)
        if king_position is None:
            raise GameStateError(f"No {player.color} king on the board.")
        return self.threat_analyzer.is_attacked(
            game.board, king_position, player.color.opponent
        )
