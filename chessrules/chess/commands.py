"""
Commands: units of state transition
----

Every command is a pure function of a ChessGame. `execute()` returns the new game, or None if the command's
preconditions do not hold on the game it is applied to. Nothing is ever changed in place, so a failing
command (or a failing part of a SequenceCommand) leaves no trace.
"""

from dataclasses import dataclass
from functools import reduce
from typing import Optional, Protocol

from chessrules.chess.game import ChessGame, Update
from chessrules.chess.pieces import Piece
from chessrules.chess.position import Position


class Command(Protocol):
    def execute(self, game: ChessGame) -> Optional[ChessGame]: ...


@dataclass(frozen=True)
class MoveCommand:
    """Move a piece, capturing whatever opposing piece stands on the target"""

    from_position: Position
    to_position: Position
    piece: Piece

    def execute(self, game: ChessGame) -> Optional[ChessGame]:
        board = game.board
        if board.piece(self.from_position) != self.piece:
            return None

        target = board.piece(self.to_position)
        if target is not None and target.color == self.piece.color:
            return None
        return game.with_board(board.move_piece(self.from_position, self.to_position))


@dataclass(frozen=True)
class RemoveCommand:
    """Take a piece off the board. Only the type and color have to match, not the moved flag."""

    position: Position
    piece: Piece

    def execute(self, game: ChessGame) -> Optional[ChessGame]:
        found = game.board.piece(self.position)
        if found is None or not found.is_same_kind(self.piece):
            return None
        return game.with_board(game.board.remove_piece(self.position))


@dataclass(frozen=True)
class SpawnCommand:
    """Put a piece on an empty square"""

    position: Position
    piece: Piece

    def execute(self, game: ChessGame) -> Optional[ChessGame]:
        if not game.board.is_empty(self.position):
            return None
        return game.with_board(game.board.add_piece(self.position, self.piece))


@dataclass(frozen=True)
class SequenceCommand:
    """All-or-nothing: run `first`, then `second` on its result"""

    first: Command
    second: Command

    def execute(self, game: ChessGame) -> Optional[ChessGame]:
        intermediate = self.first.execute(game)
        if intermediate is None:
            return None
        return self.second.execute(intermediate)


class EndTurnCommand:
    """The passive player becomes the active one. Stateless, so a single instance is shared."""

    def execute(self, game: ChessGame) -> Optional[ChessGame]:
        return game.with_turn_ended()

    def __repr__(self) -> str:
        return "EndTurnCommand()"


END_TURN = EndTurnCommand()


@dataclass(frozen=True)
class SetLastUpdateCommand:
    update: Update

    def execute(self, game: ChessGame) -> Optional[ChessGame]:
        return game.with_last_update(self.update)


def sequence(first: Command, *rest: Command) -> Command:
    """Chain any number of commands into nested SequenceCommands (left to right)"""
    return reduce(SequenceCommand, rest, first)


def leading_move(command: Command) -> Optional[MoveCommand]:
    """
    The first MoveCommand a command starts with (looking through nested sequences).
    Used by history dependent rules (en passant) to find out what happened on the last ply.
    """
    while isinstance(command, SequenceCommand):
        command = command.first
    return command if isinstance(command, MoveCommand) else None
