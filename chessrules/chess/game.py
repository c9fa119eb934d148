"""
Immutable snapshot of a chess game.

A ChessGame is created once per ply. Commands (see commands.py) turn one snapshot into the next.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Iterator, Optional, Self

from chessrules.chess.board import Board
from chessrules.core.shared_types import Color

if TYPE_CHECKING:
    from chessrules.chess.commands import Command


@dataclass(frozen=True)
class Player:
    color: Color


@dataclass(frozen=True)
class ChessGame:
    board: Board
    active_player: Player
    passive_player: Player
    last_update: Optional[Update] = None

    @classmethod
    def new(cls, board: Board) -> Self:
        """White always starts"""
        return cls(board, Player(Color.WHITE), Player(Color.BLACK))

    def with_board(self, board: Board) -> Self:
        return replace(self, board=board)

    def with_turn_ended(self) -> Self:
        return replace(
            self, active_player=self.passive_player, passive_player=self.active_player
        )

    def with_last_update(self, update: Update) -> Self:
        return replace(self, last_update=update)

    def player(self, color: Color) -> Player:
        return self.active_player if self.active_player.color == color else self.passive_player

    def history(self) -> Iterator[ChessGame]:
        """Walk back through the recorded updates. Yields the earlier games, newest first."""
        update = self.last_update
        while update is not None:
            yield update.game
            update = update.game.last_update

    @property
    def ply(self) -> int:
        """Number of moves played to reach this game"""
        return sum(1 for _ in self.history())


@dataclass(frozen=True)
class Update:
    """
    A game paired with the command that belongs to it.

    * As a result of `get_updates`: the game reached by executing the command.
    * As `ChessGame.last_update`: the game the command was executed on (so the history can be walked back).
    """

    game: ChessGame
    command: Command
