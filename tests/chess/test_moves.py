"""Unit tests for chessrules/chess/moves.py"""

import pytest

from chessrules.chess.board import Board
from chessrules.chess.commands import MoveCommand
from chessrules.chess.moves import (
    ATTACK_RULES,
    DIAGONALS,
    MOVEMENT_RULES,
    STRAIGHTS,
    candidate_bishop_moves,
    candidate_king_moves,
    candidate_knight_moves,
    candidate_pawn_moves,
    candidate_queen_moves,
    candidate_rook_moves,
    is_attacked_by_bishop,
    is_attacked_by_king,
    is_attacked_by_knight,
    is_attacked_by_pawn,
    is_attacked_by_queen,
    is_attacked_by_rook,
    promotion_row,
    raycasting_move,
)
from chessrules.chess.pieces import Piece, bishop, king, knight, pawn, queen, rook
from chessrules.chess.position import BOARD_DIMENSIONS, Position
from chessrules.core.shared_types import Color, PieceType
from tests.helpers import sq


def board_with(**pieces: Piece) -> Board:
    """board_with(d4=queen(Color.WHITE), ...)"""
    return Board.from_pieces((sq(name), piece) for name, piece in pieces.items())


def targets(moves: list[MoveCommand]) -> set[Position]:
    return {move.to_position for move in moves}


def squares(*names: str) -> set[Position]:
    return {sq(name) for name in names}


# --- MOVEMENT RULES ---
def test_raycasting_move_empty_board() -> None:
    """On an empty board, movements should be unrestricted. Should only be restricted by board dimensions"""
    board = board_with(a5=rook(Color.WHITE))
    horizontal = raycasting_move(sq("a5"), board, [(0, 1), (0, -1)])
    assert len(horizontal) == BOARD_DIMENSIONS[1] - 1
    assert all(move.to_position.row == sq("a5").row for move in horizontal)

    vertical = raycasting_move(sq("a5"), board, [(1, 0), (-1, 0)])
    assert len(vertical) == BOARD_DIMENSIONS[0] - 1


def test_raycasting_move_w_enemy_blocker() -> None:
    """When running into an enemy piece, still include it in the list of moves"""
    board = board_with(d2=rook(Color.WHITE), d5=pawn(Color.BLACK))
    moves = raycasting_move(sq("d2"), board, [(1, 0), (-1, 0)])
    assert targets(moves) == squares("d1", "d3", "d4", "d5")


def test_raycasting_move_w_friendly_blocker() -> None:
    """When your own piece is blocking, do not include a move to that square"""
    board = board_with(d2=bishop(Color.BLACK), f4=pawn(Color.BLACK))
    moves = raycasting_move(sq("d2"), board, DIAGONALS)
    assert targets(moves) == squares("c1", "e1", "e3", "c3", "b4", "a5")


def test_moves_carry_the_moving_piece() -> None:
    board = board_with(b1=knight(Color.WHITE))
    assert all(move.piece == knight(Color.WHITE) for move in candidate_knight_moves(sq("b1"), board))
    assert all(move.from_position == sq("b1") for move in candidate_knight_moves(sq("b1"), board))


def test_knight_moves() -> None:
    board = board_with(b1=knight(Color.WHITE), d2=pawn(Color.WHITE))
    assert targets(candidate_knight_moves(sq("b1"), board)) == squares("a3", "c3")


def test_bishop_moves_from_corner() -> None:
    board = board_with(a1=bishop(Color.WHITE))
    assert targets(candidate_bishop_moves(sq("a1"), board)) == squares(
        "b2", "c3", "d4", "e5", "f6", "g7", "h8"
    )


def test_rook_moves_w_capture() -> None:
    board = board_with(a1=rook(Color.WHITE), a3=knight(Color.BLACK), c1=king(Color.WHITE))
    assert targets(candidate_rook_moves(sq("a1"), board)) == squares("a2", "a3", "b1")


def test_queen_combines_rook_and_bishop() -> None:
    board = board_with(d4=queen(Color.WHITE))
    queen_moves = targets(candidate_queen_moves(sq("d4"), board))
    rook_board = board_with(d4=rook(Color.WHITE))
    bishop_board = board_with(d4=bishop(Color.WHITE))
    assert queen_moves == targets(candidate_rook_moves(sq("d4"), rook_board)) | targets(
        candidate_bishop_moves(sq("d4"), bishop_board)
    )
    assert len(queen_moves) == 27


def test_king_moves_in_corner() -> None:
    board = board_with(h8=king(Color.BLACK), g8=rook(Color.BLACK))
    assert targets(candidate_king_moves(sq("h8"), board)) == squares("g7", "h7")


# --- PAWNS ---
@pytest.mark.parametrize(
    "color, start, expected",
    [
        (Color.WHITE, "e2", ("e3", "e4")),
        (Color.BLACK, "e7", ("e6", "e5")),
        (Color.WHITE, "e3", ("e4",)),
        (Color.BLACK, "e6", ("e5",)),
    ],
)
def test_pawn_pushes(color: Color, start: str, expected: tuple[str, ...]) -> None:
    """Double step only from the starting row"""
    board = board_with(**{start: pawn(color)})
    assert targets(candidate_pawn_moves(sq(start), board)) == squares(*expected)


def test_pawn_blocked() -> None:
    """Pawns do not capture straight ahead"""
    board = board_with(e2=pawn(Color.WHITE), e3=knight(Color.BLACK))
    assert candidate_pawn_moves(sq("e2"), board) == []


def test_pawn_double_step_blocked_on_second_square() -> None:
    board = board_with(e2=pawn(Color.WHITE), e4=knight(Color.BLACK))
    assert targets(candidate_pawn_moves(sq("e2"), board)) == squares("e3")


def test_pawn_captures_diagonally_opponents_only() -> None:
    board = board_with(
        e4=pawn(Color.WHITE), d5=pawn(Color.BLACK), f5=pawn(Color.WHITE), e5=pawn(Color.BLACK)
    )
    assert targets(candidate_pawn_moves(sq("e4"), board)) == squares("d5")


def test_pawn_on_edge_file() -> None:
    board = board_with(a7=pawn(Color.BLACK), b6=queen(Color.WHITE))
    assert targets(candidate_pawn_moves(sq("a7"), board)) == squares("a6", "a5", "b6")


def test_promotion_row() -> None:
    assert promotion_row(Color.WHITE) == 7
    assert promotion_row(Color.BLACK) == 0


def test_every_piece_type_has_rules() -> None:
    assert set(MOVEMENT_RULES) == set(PieceType)
    assert set(ATTACK_RULES) == set(PieceType)


@pytest.mark.parametrize("piece_type", list(PieceType))
def test_no_moves_from_an_empty_square(piece_type: PieceType) -> None:
    board = board_with(e1=king(Color.WHITE), e8=king(Color.BLACK))
    assert MOVEMENT_RULES[piece_type](sq("d4"), board) == []


# --- ATTACK RULES ---
def test_pawn_attacks_diagonally_forward_only() -> None:
    board = board_with(e4=pawn(Color.WHITE))
    assert is_attacked_by_pawn(sq("d5"), Color.WHITE, board)
    assert is_attacked_by_pawn(sq("f5"), Color.WHITE, board)
    assert not is_attacked_by_pawn(sq("e5"), Color.WHITE, board)
    assert not is_attacked_by_pawn(sq("d3"), Color.WHITE, board)

    board = board_with(e5=pawn(Color.BLACK))
    assert is_attacked_by_pawn(sq("d4"), Color.BLACK, board)
    assert not is_attacked_by_pawn(sq("d6"), Color.BLACK, board)


def test_knight_attack() -> None:
    board = board_with(g1=knight(Color.WHITE))
    assert is_attacked_by_knight(sq("f3"), Color.WHITE, board)
    assert not is_attacked_by_knight(sq("f3"), Color.BLACK, board)
    assert not is_attacked_by_knight(sq("g3"), Color.WHITE, board)


def test_sliding_attack_blocked() -> None:
    board = board_with(a1=rook(Color.BLACK), a4=pawn(Color.WHITE))
    assert is_attacked_by_rook(sq("a3"), Color.BLACK, board)
    assert is_attacked_by_rook(sq("a4"), Color.BLACK, board)
    assert not is_attacked_by_rook(sq("a5"), Color.BLACK, board)


def test_bishop_attack_of_empty_square() -> None:
    board = board_with(c1=bishop(Color.WHITE))
    assert is_attacked_by_bishop(sq("h6"), Color.WHITE, board)
    assert not is_attacked_by_bishop(sq("c2"), Color.WHITE, board)


def test_queen_attacks_both_ways() -> None:
    board = board_with(d1=queen(Color.WHITE))
    assert is_attacked_by_queen(sq("d8"), Color.WHITE, board)
    assert is_attacked_by_queen(sq("h5"), Color.WHITE, board)
    assert not is_attacked_by_queen(sq("e3"), Color.WHITE, board)


def test_queen_is_not_mistaken_for_rook() -> None:
    board = board_with(d1=queen(Color.WHITE))
    assert not is_attacked_by_rook(sq("d8"), Color.WHITE, board)


def test_king_attack() -> None:
    board = board_with(e1=king(Color.WHITE))
    assert is_attacked_by_king(sq("d2"), Color.WHITE, board)
    assert not is_attacked_by_king(sq("e3"), Color.WHITE, board)


def test_straights_and_diagonals_are_disjoint() -> None:
    assert not set(STRAIGHTS) & set(DIAGONALS)
