"""Attack detection: does a color threaten a square."""

from __future__ import annotations

from chesslite.core.board import Board
from chesslite.core.enums import Color, PieceType
from chesslite.core.piece import Piece
from chesslite.core.types import Square, in_bounds

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def _any_at_offsets(
    board: Board,
    sq: Square,
    offsets: tuple[tuple[int, int], ...],
    wanted: Piece,
) -> bool:
    row, col = sq
    for dr, dc in offsets:
        r, c = row + dr, col + dc
        if in_bounds(r, c) and board[(r, c)] == wanted:
            return True
    return False


def _any_on_rays(
    board: Board,
    sq: Square,
    directions: tuple[tuple[int, int], ...],
    by_color: Color,
    kinds: tuple[PieceType, ...],
) -> bool:
    row, col = sq
    for dr, dc in directions:
        r, c = row + dr, col + dc
        while in_bounds(r, c):
            piece = board[(r, c)]
            if not piece.is_empty:
                if piece.color == by_color and piece.piece_type in kinds:
                    return True
                break
            r += dr
            c += dc
    return False


def is_attacked(board: Board, sq: Square, by_color: Color) -> bool:
    """Is *sq* attacked by any piece of *by_color*?

    Scans outward from *sq*; never mutates *board*.
    """
    if _any_at_offsets(
        board, sq, KNIGHT_OFFSETS, Piece(by_color, PieceType.KNIGHT)
    ):
        return True

    if _any_on_rays(
        board, sq, ROOK_DIRS, by_color, (PieceType.ROOK, PieceType.QUEEN)
    ):
        return True

    if _any_on_rays(
        board, sq, BISHOP_DIRS, by_color, (PieceType.BISHOP, PieceType.QUEEN)
    ):
        return True

    # An attacking pawn stands one step behind *sq* along its own forward line.
    back = -by_color.forward
    pawn_offsets = ((back, -1), (back, 1))
    if _any_at_offsets(board, sq, pawn_offsets, Piece(by_color, PieceType.PAWN)):
        return True

    return _any_at_offsets(board, sq, KING_OFFSETS, Piece(by_color, PieceType.KING))
