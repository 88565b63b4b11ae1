"""High-level chess rules: legal-move search, check, checkmate, stalemate."""

from __future__ import annotations

from chesslite.core.attacks import is_attacked
from chesslite.core.board import Board
from chesslite.core.enums import Color, GameResult, GameStatus
from chesslite.core.safety import is_safe_move
from chesslite.core.types import Square, all_squares


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        return is_attacked(board, board.king_square(color), color.opposite)

    @staticmethod
    def legal_destinations(board: Board, from_sq: Square, color: Color) -> list[Square]:
        """Every square the *color* piece on *from_sq* may legally move to."""
        return [
            to_sq for to_sq in all_squares() if is_safe_move(board, from_sq, to_sq, color)
        ]

    @staticmethod
    def legal_moves(board: Board, color: Color) -> list[tuple[Square, Square]]:
        """All legal (from, to) pairs for *color*."""
        return [
            (from_sq, to_sq)
            for from_sq in board.occupied(color)
            for to_sq in Rules.legal_destinations(board, from_sq, color)
        ]

    @staticmethod
    def has_any_legal_move(board: Board, color: Color) -> bool:
        """Exhaustive probe of every (from, to) pair; stops at the first hit."""
        for from_sq in board.occupied(color):
            for to_sq in all_squares():
                if is_safe_move(board, from_sq, to_sq, color):
                    return True
        return False

    @staticmethod
    def classify(board: Board, color: Color) -> GameStatus:
        """Status of *color*, the side about to move."""
        in_check = Rules.is_in_check(board, color)
        has_moves = Rules.has_any_legal_move(board, color)
        if in_check:
            return GameStatus.CHECK if has_moves else GameStatus.CHECKMATE
        return GameStatus.PLAYING if has_moves else GameStatus.STALEMATE

    @staticmethod
    def is_checkmate(board: Board, color: Color) -> bool:
        return Rules.classify(board, color) == GameStatus.CHECKMATE

    @staticmethod
    def is_stalemate(board: Board, color: Color) -> bool:
        return Rules.classify(board, color) == GameStatus.STALEMATE

    @staticmethod
    def game_result(board: Board, color: Color) -> GameResult:
        """Determine the current game result with *color* to move."""
        status = Rules.classify(board, color)
        if status == GameStatus.CHECKMATE:
            return GameResult.win_for(color.opposite)
        if status == GameStatus.STALEMATE:
            return GameResult.DRAW
        return GameResult.IN_PROGRESS
