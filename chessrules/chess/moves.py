"""
How each piece type moves and attacks, ignoring checks.

One function per piece type, looked up through MOVEMENT_RULES and ATTACK_RULES.
Whether a move leaves the own king in check is decided in chessrules.rules.legality.
"""

from typing import Callable, Optional, Protocol

from chessrules.chess.commands import MoveCommand
from chessrules.chess.pieces import Piece
from chessrules.chess.position import BOARD_DIMENSIONS, Position
from chessrules.core.shared_types import Color, PieceType


class Board(Protocol):
    """Read-only view of the board used by the move and attack functions"""

    def piece(self, position: Position, color: Optional[Color] = None) -> Optional[Piece]: ...
    def is_empty(self, position: Position) -> bool: ...


# (d_row, d_column)
Vector = tuple[int, int]

STRAIGHTS: list[Vector] = [(1, 0), (-1, 0), (0, 1), (0, -1)]
DIAGONALS: list[Vector] = [(1, 1), (1, -1), (-1, 1), (-1, -1)]
KNIGHT_DELTAS: list[Vector] = [
    (2, 1),
    (2, -1),
    (-2, 1),
    (-2, -1),
    (1, 2),
    (1, -2),
    (-1, 2),
    (-1, -2),
]
KING_DELTAS: list[Vector] = STRAIGHTS + DIAGONALS


def pawn_direction(color: Color) -> int:
    """White moves UP the board (increasing rows), black moves DOWN"""
    return 1 if color == Color.WHITE else -1


def pawn_start_row(color: Color) -> int:
    return 1 if color == Color.WHITE else BOARD_DIMENSIONS[0] - 2


def promotion_row(color: Color) -> int:
    """The farthest row, seen from the pawn's side"""
    return BOARD_DIMENSIONS[0] - 1 if color == Color.WHITE else 0


# --- MOVEMENT RULES ---
def raycasting_move(position: Position, board: Board, directions: list[Vector]) -> list[MoveCommand]:
    """
    Sliding moves
    -----

    Walk each direction square by square. Stop at the board edge or at the first piece,
    which is included as a capture when it belongs to the opponent.
    """
    moving_piece = board.piece(position)
    if moving_piece is None:
        return []

    moves: list[MoveCommand] = []
    for d_row, d_column in directions:
        target = position.offset(d_row, d_column)
        while target.is_within_bounds():
            blocker = board.piece(target)
            if blocker is not None:
                if blocker.color != moving_piece.color:
                    moves.append(MoveCommand(position, target, moving_piece))
                break

            moves.append(MoveCommand(position, target, moving_piece))
            target = target.offset(d_row, d_column)
    return moves


def single_step_move(position: Position, board: Board, deltas: list[Vector]) -> list[MoveCommand]:
    """Jumps by each delta once: knights and kings. Own pieces block, opponents are captured."""
    moving_piece = board.piece(position)
    if moving_piece is None:
        return []

    moves: list[MoveCommand] = []
    for d_row, d_column in deltas:
        target = position.offset(d_row, d_column)
        if not target.is_within_bounds():
            continue

        if board.piece(target, moving_piece.color) is None:
            moves.append(MoveCommand(position, target, moving_piece))
    return moves


def candidate_pawn_moves(position: Position, board: Board) -> list[MoveCommand]:
    """
    A pawn:
    - moves by a single square forward, onto an empty square only.
    - It can move by two in their first move (so when on their starting row), if both squares are empty
    - takes diagonally

    NOTE: En passant and promotion are separate rules
    """
    pawn = board.piece(position)
    if pawn is None:
        return []
    direction = pawn_direction(pawn.color)

    moves: list[MoveCommand] = []
    one_step = position.offset(direction, 0)
    if one_step.is_within_bounds() and board.is_empty(one_step):
        moves.append(MoveCommand(position, one_step, pawn))

        two_steps = position.offset(2 * direction, 0)
        if position.row == pawn_start_row(pawn.color) and board.is_empty(two_steps):
            moves.append(MoveCommand(position, two_steps, pawn))

    # pawns take diagonally:
    for d_column in (-1, 1):
        target = position.offset(direction, d_column)
        if target.is_within_bounds() and board.piece(target, pawn.color.opponent):
            moves.append(MoveCommand(position, target, pawn))
    return moves


def candidate_knight_moves(position: Position, board: Board) -> list[MoveCommand]:
    """Knights always move such that |delta_row| + |delta_column| = 3"""
    return single_step_move(position, board, KNIGHT_DELTAS)


def candidate_bishop_moves(position: Position, board: Board) -> list[MoveCommand]:
    """Bishops move diagonally: |delta_row| = |delta_column|"""
    return raycasting_move(position, board, DIAGONALS)


def candidate_rook_moves(position: Position, board: Board) -> list[MoveCommand]:
    """Rooks slide along rows and columns"""
    return raycasting_move(position, board, STRAIGHTS)


def candidate_queen_moves(position: Position, board: Board) -> list[MoveCommand]:
    """Bishop and rook moves together"""
    return candidate_bishop_moves(position, board) + candidate_rook_moves(position, board)


def candidate_king_moves(position: Position, board: Board) -> list[MoveCommand]:
    """One square in any direction. Castling lives in chessrules.rules.castling."""
    return single_step_move(position, board, KING_DELTAS)


# --- MOVE GENERATORS PER PIECE TYPE ---
CandidateMovesFn = Callable[[Position, Board], list[MoveCommand]]
MOVEMENT_RULES: dict[PieceType, CandidateMovesFn] = {
    PieceType.PAWN: candidate_pawn_moves,
    PieceType.KNIGHT: candidate_knight_moves,
    PieceType.BISHOP: candidate_bishop_moves,
    PieceType.ROOK: candidate_rook_moves,
    PieceType.QUEEN: candidate_queen_moves,
    PieceType.KING: candidate_king_moves,
}


# --- ATTACKS ---
def raycasting_attack(
    position: Position,
    by_color: Color,
    by_piece_types: tuple[PieceType, ...],
    board: Board,
    directions: list[Vector],
) -> bool:
    """
    Sliding attacks, seen from the target
    ---

    `raycasting_move()` looks outward from a piece. This looks outward from the position instead and
    reports whether the first piece met along some direction is one of `by_piece_types` of `by_color`.

    The position itself may be empty (castling asks about the squares the king travels over).
    """
    for d_row, d_column in directions:
        target = position.offset(d_row, d_column)
        while target.is_within_bounds():
            piece_found = board.piece(target)
            if piece_found is not None:
                # only the first piece found along the ray can attack
                if piece_found.color == by_color and piece_found.type in by_piece_types:
                    return True
                break
            target = target.offset(d_row, d_column)
    return False


def single_step_attack(
    position: Position,
    by_color: Color,
    by_piece_type: PieceType,
    board: Board,
    deltas: list[Vector],
) -> bool:
    """Whether a `by_piece_type` piece of `by_color` sits one delta away from the position"""
    for d_row, d_column in deltas:
        target = position.offset(d_row, d_column)
        if not target.is_within_bounds():
            continue

        piece_found = board.piece(target, by_color)
        if piece_found is not None and piece_found.type == by_piece_type:
            return True
    return False


def is_attacked_by_pawn(position: Position, by_color: Color, board: Board) -> bool:
    """
    Pawn attacks depend on the attacker's color
    ----

    A white pawn attacks upwards, so the attacker stands one row below the position (and the
    other way round for black).
    """
    back = -pawn_direction(by_color)
    inverse_pawn_take_deltas: list[Vector] = [(back, 1), (back, -1)]
    return single_step_attack(
        position, by_color, PieceType.PAWN, board, inverse_pawn_take_deltas
    )


def is_attacked_by_knight(position: Position, by_color: Color, board: Board) -> bool:
    return single_step_attack(position, by_color, PieceType.KNIGHT, board, KNIGHT_DELTAS)


def is_attacked_by_bishop(position: Position, by_color: Color, board: Board) -> bool:
    return raycasting_attack(position, by_color, (PieceType.BISHOP,), board, DIAGONALS)


def is_attacked_by_rook(position: Position, by_color: Color, board: Board) -> bool:
    return raycasting_attack(position, by_color, (PieceType.ROOK,), board, STRAIGHTS)


def is_attacked_by_queen(position: Position, by_color: Color, board: Board) -> bool:
    """The Queen attacks along straights and diagonals"""
    return raycasting_attack(
        position, by_color, (PieceType.QUEEN,), board, STRAIGHTS + DIAGONALS
    )


def is_attacked_by_king(position: Position, by_color: Color, board: Board) -> bool:
    return single_step_attack(position, by_color, PieceType.KING, board, KING_DELTAS)


# --- ATTACK CHECKS PER PIECE TYPE ---
IsAttackedFn = Callable[[Position, Color, Board], bool]
ATTACK_RULES: dict[PieceType, IsAttackedFn] = {
    PieceType.PAWN: is_attacked_by_pawn,
    PieceType.KNIGHT: is_attacked_by_knight,
    PieceType.BISHOP: is_attacked_by_bishop,
    PieceType.ROOK: is_attacked_by_rook,
    PieceType.QUEEN: is_attacked_by_queen,
    PieceType.KING: is_attacked_by_king,
}
