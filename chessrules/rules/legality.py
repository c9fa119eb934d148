"""
From candidate commands to legal updates
----

Shared by the rulebook (to list the updates of a piece) and the end rule (to find out whether any update exists).
"""

from typing import Iterator, Optional

from chessrules.chess.commands import END_TURN, Command, SequenceCommand, SetLastUpdateCommand
from chessrules.chess.game import ChessGame, Update
from chessrules.chess.position import Position
from chessrules.rules.check import CheckRule
from chessrules.rules.movement import MovementRule


class LegalityFilter:
    def __init__(self, movement_rule: MovementRule, check_rule: CheckRule) -> None:
        self.movement_rule = movement_rule
        self.check_rule = check_rule

    def legal_updates(self, game: ChessGame, position: Position) -> Iterator[Update]:
        """
        1. Find the active player's piece on the position (an empty square or an opponent's piece yields nothing)
        2. Generate the candidate commands for it
        3. Wrap every candidate: move, then end the turn, then record the update as the new game's last update
        4. Execute the wrapped command on the game. Failed executions are dropped.
        5. Drop the games where the player that just moved is in check. After the turn ended, that is the passive player.
        """
        piece = game.board.piece(position, game.active_player.color)
        if piece is None:
            return

        for command in self.movement_rule.get_commands(game, position, piece):
            update = self._speculate(game, command)
            if update is None:
                continue
            if self.check_rule.check(update.game, update.game.passive_player):
                continue
            yield update

    def all_legal_updates(self, game: ChessGame) -> Iterator[Update]:
        """Legal updates of every piece of the active player, in board order"""
        for position in game.board.locate_color(game.active_player.color):
            yield from self.legal_updates(game, position)

    def has_legal_update(self, game: ChessGame) -> bool:
        return next(self.all_legal_updates(game), None) is not None

    def _speculate(self, game: ChessGame, command: Command) -> Optional[Update]:
        turn_end = SequenceCommand(command, END_TURN)
        record = SequenceCommand(turn_end, SetLastUpdateCommand(Update(game, turn_end)))
        future = record.execute(game)
        if future is None:
            return None
        return Update(future, record)
