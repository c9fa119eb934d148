"""Which squares does a side attack? Raw geometry only, no legality involved."""

from chessrules.chess.board import Board
from chessrules.chess.moves import ATTACK_RULES
from chessrules.chess.position import Position
from chessrules.core.shared_types import Color


class ThreatAnalyzer:
    def is_attacked(self, board: Board, position: Position, by_color: Color) -> bool:
        """
        True if any piece of `by_color` could reach the position in one step.
        The position does not need to be occupied.
        """
        return any(
            is_attacked(position, by_color, board) for is_attacked in ATTACK_RULES.values()
        )

    def is_any_attacked(self, board: Board, positions: list[Position], by_color: Color) -> bool:
        return any(self.is_attacked(board, position, by_color) for position in positions)
