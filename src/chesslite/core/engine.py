"""Engine entry points used by the front-ends: start, move, classify."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from chesslite.core.board import Board
from chesslite.core.enums import Color, GameStatus, PieceType
from chesslite.core.piece import EMPTY
from chesslite.core.rules import Rules
from chesslite.core.safety import is_safe_move
from chesslite.core.types import Square, square_name

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MoveResult:
    """Outcome of :func:`attempt_move`."""

    accepted: bool
    captured: PieceType | None = None


REJECTED = MoveResult(accepted=False)


def new_game() -> Board:
    """A fresh board in the standard starting position."""
    return Board.initial()


def attempt_move(
    board: Board, from_sq: Square, to_sq: Square, mover: Color
) -> MoveResult:
    """Validate and, if legal, commit *mover*'s move on *board*.

    Reports the kind of the captured piece, if any, for tally bookkeeping.
    """
    if not is_safe_move(board, from_sq, to_sq, mover):
        _LOGGER.debug(
            "Rejected %s move %s%s", mover, square_name(from_sq), square_name(to_sq)
        )
        return REJECTED

    target = board[to_sq]
    board[to_sq] = board[from_sq]
    board[from_sq] = EMPTY

    captured = None if target.is_empty else target.piece_type
    _LOGGER.debug(
        "Accepted %s move %s%s (captured: %s)",
        mover,
        square_name(from_sq),
        square_name(to_sq),
        captured.name if captured is not None else "-",
    )
    return MoveResult(accepted=True, captured=captured)


def classify(board: Board, color: Color) -> GameStatus:
    """Status of *color*, the side about to move."""
    return Rules.classify(board, color)
