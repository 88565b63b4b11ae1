"""Core domain layer — pure chess logic with zero external dependencies.

Quick start::

    from chesslite.core import Color, attempt_move, classify, new_game, parse_square

    board = new_game()
    result = attempt_move(board, parse_square("e2"), parse_square("e4"), Color.WHITE)
    status = classify(board, Color.BLACK)
"""

from chesslite.core.attacks import is_attacked
from chesslite.core.board import Board
from chesslite.core.engine import MoveResult, attempt_move, classify, new_game
from chesslite.core.enums import Color, GameResult, GameStatus, PieceType
from chesslite.core.geometry import validate_geometry
from chesslite.core.notation import (
    STARTING_PLACEMENT,
    board_from_placement,
    board_to_placement,
)
from chesslite.core.piece import EMPTY, Piece
from chesslite.core.rules import Rules
from chesslite.core.safety import is_safe_move
from chesslite.core.tally import CaptureTally
from chesslite.core.types import Square, make_square, parse_square, square_name

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "GameStatus",
    "PieceType",
    # Types / helpers
    "Square",
    "make_square",
    "parse_square",
    "square_name",
    # Domain objects
    "EMPTY",
    "Board",
    "CaptureTally",
    "MoveResult",
    "Piece",
    "Rules",
    # Rule functions
    "attempt_move",
    "classify",
    "is_attacked",
    "is_safe_move",
    "new_game",
    "validate_geometry",
    # Notation
    "STARTING_PLACEMENT",
    "board_from_placement",
    "board_to_placement",
]
