"""The Game board: which piece stands where. Every update returns a new Board, the original is never touched."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Self

from chessrules.chess.pieces import Piece
from chessrules.chess.position import Position
from chessrules.core.shared_types import Color, PieceType


@dataclass(frozen=True)
class Board:
    """Sparse mapping: a position that is not in `position` is an empty square. The mapping is read-only."""

    position: Mapping[Position, Piece] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", MappingProxyType(dict(self.position)))

    def __hash__(self) -> int:
        return hash(frozenset(self.position.items()))

    @classmethod
    def from_pieces(cls, pieces: Iterable[tuple[Position, Piece]]) -> Self:
        """Convenience method: build a board from (position, piece) pairs. A later pair for the same position wins."""
        return cls(dict(pieces))

    def piece(self, position: Position, color: Optional[Color] = None) -> Optional[Piece]:
        """The piece on the position. If a color is given, pieces of the other color are treated as absent."""
        found = self.position.get(position)
        if found is None or (color is not None and found.color != color):
            return None
        return found

    def is_empty(self, position: Position) -> bool:
        return position not in self.position

    def is_any_occupied(self, positions: Iterable[Position]) -> bool:
        return any(not self.is_empty(position) for position in positions)

    def placed_pieces(self) -> list[tuple[Position, Piece]]:
        """All pieces, in row-major order of their positions"""
        return sorted(self.position.items())

    def locate_pieces(self, piece_type: PieceType, color: Color) -> list[Position]:
        return [
            position
            for position, piece in self.placed_pieces()
            if piece.type == piece_type and piece.color == color
        ]

    def locate_color(self, color: Color) -> list[Position]:
        return [
            position for position, piece in self.placed_pieces() if piece.color == color
        ]

    def find_king(self, color: Color) -> Optional[Position]:
        kings = self.locate_pieces(PieceType.KING, color)
        return kings[0] if kings else None

    # --- UPDATES (all return a new Board) ---
    def add_piece(self, position: Position, piece: Piece) -> Self:
        return type(self)({**self.position, position: piece})

    def remove_piece(self, position: Position) -> Self:
        remaining = dict(self.position)
        remaining.pop(position, None)
        return type(self)(remaining)

    def move_piece(self, from_position: Position, to_position: Position) -> Self:
        """Relocate the piece. Whatever stood on the target square is captured. The moving piece is marked as moved."""
        remaining = dict(self.position)
        piece_that_moved = remaining.pop(from_position)
        remaining[to_position] = piece_that_moved.mark_moved()
        return type(self)(remaining)

    # --- MATERIAL ---
    def count_material(self) -> dict[Color, int]:
        """Tally the points of material each player has on the board"""
        return {color: self._count_material_player(color) for color in Color}

    def _count_material_player(self, color: Color) -> int:
        return sum(
            piece.points for piece in self.position.values() if piece.color == color
        )
