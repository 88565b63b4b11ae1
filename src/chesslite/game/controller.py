"""GameController — the central orchestrator of a chess game.

Coordinates the GameState and notifies listeners via simple callbacks so
the front-ends / tests can subscribe.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from chesslite.core.enums import Color, GameResult, GameStatus
from chesslite.core.types import Square
from chesslite.game.interfaces import GamePhase, IGameController
from chesslite.game.state import GameState, MoveRecord

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, GameState], None]
GameOverCallback = Callable[[GameResult], None]
PhaseCallback = Callable[[GamePhase], None]
CheckCallback = Callable[[Color], None]  # color in check


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)
    on_check: list[CheckCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Orchestrates a full game: validates moves, switches turns,
    notifies listeners.

    Methods are meant to be called from one thread; renderers on other
    threads read the board through :meth:`GameState.snapshot`.
    """

    __slots__ = ("_state", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(
        self, placement: str | None = None, side_to_move: Color = Color.WHITE
    ) -> None:
        self._state.setup(placement, side_to_move)
        self._emit_phase(self._state.phase)
        if self._state.is_game_over:
            self._emit_game_over(self._state.result)
        elif self._state.status == GameStatus.CHECK:
            self._emit_check(self._state.side_to_move)

    def submit_move(self, from_sq: Square, to_sq: Square) -> bool:
        if self._state.is_game_over:
            return False

        record = self._state.apply_move(from_sq, to_sq)
        if record is None:
            return False

        # Notify listeners
        self._emit_move(record)

        if self._state.is_game_over:
            self._emit_game_over(self._state.result)
        elif record.status_after == GameStatus.CHECK:
            self._emit_check(self._state.side_to_move)
        return True

    def resign(self, color: Color) -> None:
        if self._state.is_game_over:
            return
        self._state.resign(color)
        self._emit_game_over(self._state.result)

    def undo_move(self) -> bool:
        if self._state.is_game_over or not self._state.move_history:
            return False
        self._state.undo_last_move()
        self._emit_phase(GamePhase.AWAITING_MOVE)
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._state)

    def _emit_check(self, color: Color) -> None:
        for cb in self.events.on_check:
            cb(color)

    def _emit_game_over(self, result: GameResult) -> None:
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(result)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
