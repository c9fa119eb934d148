"""Helpers shared by the test modules"""

from typing import Callable

from chessrules.chess.game import ChessGame
from chessrules.chess.position import Position
from chessrules.rules.standard import StandardRulebook

# signature of the `make_game` fixture: (pieces by square name, color to move=WHITE, last_update=None)
GameFactory = Callable[..., ChessGame]


def sq(name: str) -> Position:
    """'a1' - 'h8' get converted to Position(0, 0) - Position(7, 7)"""
    return Position(row=int(name[1]) - 1, column=ord(name[0]) - ord("a"))


def play(rulebook: StandardRulebook, game: ChessGame, from_square: str, to_square: str) -> ChessGame:
    """Find the legal update moving the active player's piece from one square to the other"""
    mover = game.active_player.color
    for update in rulebook.get_updates(game, sq(from_square)):
        board = update.game.board
        if board.piece(sq(to_square), mover) and board.is_empty(sq(from_square)):
            return update.game
    raise AssertionError(f"{from_square}{to_square} is not a legal move")
