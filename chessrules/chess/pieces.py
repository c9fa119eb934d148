"""Defines the chess pieces"""

from dataclasses import dataclass, field, replace
from typing import Self

from chessrules.core.shared_types import Color, PieceType

PIECE_POINTS: dict[PieceType, int] = {
    PieceType.PAWN: 1,
    PieceType.KNIGHT: 3,
    PieceType.BISHOP: 3,
    PieceType.ROOK: 5,
    PieceType.QUEEN: 9,
}


@dataclass(frozen=True)
class Piece:
    """
    A piece is an immutable value. `moved` records whether the piece ever left its starting square
    (needed for castling rights and the pawn's double step).
    """

    type: PieceType
    color: Color
    moved: bool = False
    points: int = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        # NOTE: The King's worth is undefined (does not count towards total points)
        object.__setattr__(self, "points", PIECE_POINTS.get(self.type, 0))

    def mark_moved(self) -> Self:
        return replace(self, moved=True)

    def promote_to(self, new_type: PieceType) -> Self:
        """The promoted piece has, by definition, moved already"""
        return replace(self, type=new_type, moved=True)

    def is_same_kind(self, other: "Piece") -> bool:
        """Same type and color, whether it moved or not"""
        return self.type == other.type and self.color == other.color


def pawn(color: Color) -> Piece:
    return Piece(PieceType.PAWN, color)


def knight(color: Color) -> Piece:
    return Piece(PieceType.KNIGHT, color)


def bishop(color: Color) -> Piece:
    return Piece(PieceType.BISHOP, color)


def rook(color: Color) -> Piece:
    return Piece(PieceType.ROOK, color)


def queen(color: Color) -> Piece:
    return Piece(PieceType.QUEEN, color)


def king(color: Color) -> Piece:
    return Piece(PieceType.KING, color)
