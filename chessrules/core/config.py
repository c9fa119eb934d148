"""Settings for the rulebook"""

from typing import Optional

from pydantic import BaseModel, field_validator

from chessrules.core.exceptions import InvalidSettingsError
from chessrules.core.shared_types import PieceType

DEFAULT_PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)


class RulebookSettings(BaseModel):
    """
    Knobs of the standard rulebook.
    ----

    * promotion_types: the piece types a pawn can turn into on the last row. One candidate update is produced per entry, in this order.
    * seed: if set, every Chess960 setup without an explicit random source is generated from `random.Random(seed)`.
    """

    promotion_types: tuple[PieceType, ...] = DEFAULT_PROMOTION_TYPES
    seed: Optional[int] = None

    @field_validator("promotion_types")
    @classmethod
    def validate_promotion_types(
        cls, value: tuple[PieceType, ...]
    ) -> tuple[PieceType, ...]:
        if not value:
            raise InvalidSettingsError("At least one promotion type is required.")

        forbidden = [
            piece_type
            for piece_type in value
            if piece_type in (PieceType.PAWN, PieceType.KING)
        ]
        if forbidden:
            raise InvalidSettingsError(
                f"A pawn cannot promote to: {', '.join(forbidden)}"
            )

        if len(set(value)) != len(value):
            raise InvalidSettingsError(f"Duplicate promotion types in {value!r}.")
        return value
