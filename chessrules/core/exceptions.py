"""Errors raised by the rules engine.

Expected outcomes (an empty square, an illegal candidate move, a command whose
preconditions no longer hold) are never raised. They show up as empty sequences
or `None` results. Only broken invariants and bad settings end up here.
"""


class ChessRulesError(Exception):
    """Base class for all errors of this package"""


class GameStateError(ChessRulesError):
    """The game state breaks an engine invariant (ex. a king is missing from the board)"""


class InvalidSettingsError(ChessRulesError, ValueError):
    """Raised by the settings validators. Subclasses ValueError so pydantic reports it as a ValidationError."""
