"""Game state machine — tracks turns, captures and move history."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field

from chesslite.core.board import Board
from chesslite.core.engine import attempt_move, classify
from chesslite.core.enums import Color, GameResult, GameStatus, PieceType
from chesslite.core.notation import board_from_placement
from chesslite.core.piece import EMPTY, Piece
from chesslite.core.rules import Rules
from chesslite.core.tally import CaptureTally
from chesslite.core.types import Square, all_squares
from chesslite.game.interfaces import GamePhase

_LOGGER = logging.getLogger(__name__)


def _check_kings(board: Board, placement: str | None) -> None:
    """Reject positions without exactly one king per side."""
    for color in Color:
        king = Piece(color, PieceType.KING)
        count = sum(1 for sq in all_squares() if board[sq] == king)
        if count != 1:
            raise ValueError(
                f"Placement needs exactly one {color} king, found {count}: {placement!r}"
            )


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    from_sq: Square
    to_sq: Square
    piece: Piece
    captured: Piece = EMPTY
    status_after: GameStatus = GameStatus.PLAYING

    @property
    def was_capture(self) -> bool:
        return not self.captured.is_empty

    @property
    def was_check(self) -> bool:
        return self.status_after in (GameStatus.CHECK, GameStatus.CHECKMATE)


@dataclass
class GameState:
    """Manages game lifecycle: board, turn, status, result, history, tally.

    ``lock`` guards the board: engine calls run while holding it, and
    renderers on other threads snapshot the board under it.
    """

    board: Board = field(default_factory=Board.initial, init=False)
    side_to_move: Color = field(default=Color.WHITE, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    status: GameStatus = field(default=GameStatus.PLAYING, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    tally: CaptureTally = field(default_factory=CaptureTally, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)
    lock: threading.RLock = field(
        default_factory=threading.RLock, init=False, repr=False, compare=False
    )

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(
        self, placement: str | None = None, side_to_move: Color = Color.WHITE
    ) -> None:
        """Initialise (or reset) the game."""
        board = Board.initial() if placement is None else board_from_placement(placement)
        _check_kings(board, placement)
        with self.lock:
            self.board = board
            self.side_to_move = side_to_move
            self.phase = GamePhase.AWAITING_MOVE
            self.result = GameResult.IN_PROGRESS
            self.tally.clear()
            self.move_history.clear()
            self._update_status()
        _LOGGER.info("New game, %s to move", side_to_move)

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, from_sq: Square, to_sq: Square) -> MoveRecord | None:
        """Play a move for the side to move.

        Returns the history record, or ``None`` when the move is illegal or
        the game is already over.
        """
        if self.is_game_over:
            return None

        with self.lock:
            mover = self.side_to_move
            piece = self.board[from_sq]
            captured = self.board[to_sq]
            outcome = attempt_move(self.board, from_sq, to_sq, mover)
            if not outcome.accepted:
                return None

            if outcome.captured is not None:
                self.tally.record(mover, outcome.captured)
            self.side_to_move = mover.opposite
            self._update_status()

            record = MoveRecord(
                from_sq=from_sq,
                to_sq=to_sq,
                piece=piece,
                captured=captured,
                status_after=self.status,
            )
            self.move_history.append(record)
        return record

    def undo_last_move(self) -> MoveRecord | None:
        """Undo the last move. Returns the undone record, or None if empty."""
        if not self.move_history:
            return None

        with self.lock:
            record = self.move_history.pop()
            self.board[record.from_sq] = record.piece
            self.board[record.to_sq] = record.captured
            mover = self.side_to_move.opposite
            if record.was_capture:
                self.tally.revert(mover, record.captured.piece_type)
            self.side_to_move = mover

            # Reset result if we un-did a game-ending move
            self.result = GameResult.IN_PROGRESS
            self.phase = GamePhase.AWAITING_MOVE
            self._update_status()
        return record

    # ── Resignation ──────────────────────────────────────────────────────

    def resign(self, color: Color) -> None:
        with self.lock:
            self.result = GameResult.win_for(color.opposite)
            self.phase = GamePhase.GAME_OVER
        _LOGGER.info("%s resigned", color)

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    @property
    def fullmove_display(self) -> int:
        """Current full-move number for display."""
        return (self.ply_count // 2) + 1

    @property
    def last_move(self) -> MoveRecord | None:
        return self.move_history[-1] if self.move_history else None

    def legal_destinations(self, from_sq: Square) -> list[Square]:
        """Legal targets for the side to move's piece on *from_sq*."""
        with self.lock:
            return Rules.legal_destinations(self.board, from_sq, self.side_to_move)

    def snapshot(self) -> Board:
        """Copy of the board taken under the lock, safe to read from any thread."""
        with self.lock:
            return self.board.copy()

    # ── Internal ─────────────────────────────────────────────────────────

    def _update_status(self) -> None:
        self.status = classify(self.board, self.side_to_move)
        _LOGGER.debug("%s to move: %s", self.side_to_move, self.status.name)
        if self.status == GameStatus.CHECKMATE:
            self.result = GameResult.win_for(self.side_to_move.opposite)
            self.phase = GamePhase.GAME_OVER
        elif self.status == GameStatus.STALEMATE:
            self.result = GameResult.DRAW
            self.phase = GamePhase.GAME_OVER
        if self.is_game_over:
            _LOGGER.info("Game over: %s (%s)", self.result.name, self.status.name)
