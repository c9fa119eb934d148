"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/helpers required for testing multiple layers.
"""

from typing import Optional

import pytest

from chessrules.chess.board import Board
from chessrules.chess.game import ChessGame, Player, Update
from chessrules.chess.pieces import Piece
from chessrules.core.shared_types import Color
from chessrules.rules.standard import StandardRulebook
from tests.helpers import GameFactory, sq


@pytest.fixture
def rulebook() -> StandardRulebook:
    return StandardRulebook()


@pytest.fixture
def make_game() -> GameFactory:
    """Call the inner function with {square name: piece} and the color to move"""

    def _create_game(
        pieces: dict[str, Piece], to_move: Color = Color.WHITE, last_update: Optional[Update] = None
    ) -> ChessGame:
        board = Board.from_pieces((sq(name), piece) for name, piece in pieces.items())
        return ChessGame(board, Player(to_move), Player(to_move.opponent), last_update)

    return _create_game
