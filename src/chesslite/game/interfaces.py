"""Abstract interfaces for the game layer.

Front-ends depend on :class:`IGameController`, not on the concrete
controller.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto

from chesslite.core.enums import Color
from chesslite.core.types import Square

# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a chess game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    GAME_OVER = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(
        self, placement: str | None = None, side_to_move: Color = Color.WHITE
    ) -> None:
        """Set up a new game."""

    @abstractmethod
    def submit_move(self, from_sq: Square, to_sq: Square) -> bool:
        """Submit a move for the side to move. Returns True if legal and applied."""

    @abstractmethod
    def resign(self, color: Color) -> None:
        """Player of *color* resigns."""

    @abstractmethod
    def undo_move(self) -> bool:
        """Undo the last move. Returns True on success."""
