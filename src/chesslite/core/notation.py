"""Piece-placement text: build a board from a FEN-style layout and back.

Rows are listed from row 0 (Black's back rank) to row 7, separated by ``/``.
Digits stand for runs of empty squares::

    rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR
"""

from __future__ import annotations

from chesslite.core.board import Board
from chesslite.core.piece import Piece
from chesslite.core.types import BOARD_SIZE

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


def board_from_placement(text: str) -> Board:
    """Parse a placement string into a new :class:`Board`."""
    rows = text.strip().split("/")
    if len(rows) != BOARD_SIZE:
        raise ValueError(f"Placement must have 8 rows: {text!r}")

    board = Board()
    for row, row_text in enumerate(rows):
        col = 0
        for ch in row_text:
            if ch.isdigit():
                col += int(ch)
            else:
                if col >= BOARD_SIZE:
                    raise ValueError(f"Row {row} overflows: {row_text!r}")
                board[(row, col)] = Piece.from_char(ch)
                col += 1
        if col != BOARD_SIZE:
            raise ValueError(f"Row {row} must describe 8 squares: {row_text!r}")
    return board


def board_to_placement(board: Board) -> str:
    """Serialise *board* as a placement string."""
    rows: list[str] = []
    for row in range(BOARD_SIZE):
        parts: list[str] = []
        empty = 0
        for col in range(BOARD_SIZE):
            piece = board[(row, col)]
            if piece.is_empty:
                empty += 1
                continue
            if empty:
                parts.append(str(empty))
                empty = 0
            parts.append(str(piece))
        if empty:
            parts.append(str(empty))
        rows.append("".join(parts))
    return "/".join(rows)
