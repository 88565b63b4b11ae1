"""Piece movement geometry: shape and path rules, ignoring check."""

from __future__ import annotations

from chesslite.core.board import Board
from chesslite.core.enums import Color, PieceType
from chesslite.core.piece import Piece
from chesslite.core.types import Square

_PAWN_START_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def is_path_clear(board: Board, from_sq: Square, to_sq: Square) -> bool:
    """Whether every square strictly between *from_sq* and *to_sq* is empty.

    The squares must share a row, a column or a diagonal.
    """
    step_r = _sign(to_sq[0] - from_sq[0])
    step_c = _sign(to_sq[1] - from_sq[1])
    row, col = from_sq[0] + step_r, from_sq[1] + step_c
    while (row, col) != to_sq:
        if not board.is_empty((row, col)):
            return False
        row += step_r
        col += step_c
    return True


def _pawn_ok(board: Board, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
    assert piece.color is not None
    forward = piece.color.forward
    d_row = to_sq[0] - from_sq[0]
    d_col = to_sq[1] - from_sq[1]
    target_empty = board.is_empty(to_sq)

    if d_col == 0:
        if d_row == forward:
            return target_empty
        if d_row == 2 * forward:
            middle = (from_sq[0] + forward, from_sq[1])
            return (
                from_sq[0] == _PAWN_START_ROW[piece.color]
                and board.is_empty(middle)
                and target_empty
            )
        return False

    # Diagonal steps are capture-only.
    return abs(d_col) == 1 and d_row == forward and not target_empty


def _straight_ok(board: Board, from_sq: Square, to_sq: Square) -> bool:
    d_row = to_sq[0] - from_sq[0]
    d_col = to_sq[1] - from_sq[1]
    if (d_row == 0) == (d_col == 0):
        return False
    return is_path_clear(board, from_sq, to_sq)


def _diagonal_ok(board: Board, from_sq: Square, to_sq: Square) -> bool:
    d_row = to_sq[0] - from_sq[0]
    d_col = to_sq[1] - from_sq[1]
    if d_row == 0 or abs(d_row) != abs(d_col):
        return False
    return is_path_clear(board, from_sq, to_sq)


def validate_geometry(board: Board, from_sq: Square, to_sq: Square) -> bool:
    """Whether the piece on *from_sq* may move to *to_sq* by shape and path.

    *from_sq* must hold a piece. Check consequences are not considered;
    see :func:`chesslite.core.safety.is_safe_move`.
    """
    piece = board[from_sq]
    target = board[to_sq]
    if target.color == piece.color:
        return False

    ptype = piece.piece_type
    if ptype == PieceType.PAWN:
        return _pawn_ok(board, piece, from_sq, to_sq)

    abs_r = abs(to_sq[0] - from_sq[0])
    abs_c = abs(to_sq[1] - from_sq[1])

    if ptype == PieceType.KNIGHT:
        return (abs_r, abs_c) in ((2, 1), (1, 2))
    if ptype == PieceType.KING:
        return max(abs_r, abs_c) == 1
    if ptype == PieceType.ROOK:
        return _straight_ok(board, from_sq, to_sq)
    if ptype == PieceType.BISHOP:
        return _diagonal_ok(board, from_sq, to_sq)
    if ptype == PieceType.QUEEN:
        return _straight_ok(board, from_sq, to_sq) or _diagonal_ok(
            board, from_sq, to_sq
        )
    return False
