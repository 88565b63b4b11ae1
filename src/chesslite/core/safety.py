"""Check-safety: a move must not leave the mover's own king attacked."""

from __future__ import annotations

from chesslite.core.attacks import is_attacked
from chesslite.core.board import Board
from chesslite.core.enums import Color
from chesslite.core.geometry import validate_geometry
from chesslite.core.piece import EMPTY
from chesslite.core.types import Square


def is_safe_move(board: Board, from_sq: Square, to_sq: Square, color: Color) -> bool:
    """Final legality verdict for *color* moving *from_sq* → *to_sq*.

    The move is played on *board* in place, the mover's king is probed, and
    both squares are restored before returning. Callers sharing the board
    with another thread must hold the game lock around this call.
    """
    moving = board[from_sq]
    if moving.color != color:
        return False
    if not validate_geometry(board, from_sq, to_sq):
        return False

    captured = board[to_sq]
    board[to_sq] = moving
    board[from_sq] = EMPTY
    try:
        king_sq = board.king_square(color)
        return not is_attacked(board, king_sq, color.opposite)
    finally:
        board[from_sq] = moving
        board[to_sq] = captured
