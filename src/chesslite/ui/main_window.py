"""MainWindow — top-level window assembling the board and status panels."""

from __future__ import annotations

import logging

from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import QLabel, QMainWindow, QToolBar, QVBoxLayout, QWidget

from chesslite.config import AppSettings
from chesslite.core.enums import GameResult, GameStatus
from chesslite.core.types import Square
from chesslite.game.controller import GameController
from chesslite.game.messages import result_message, status_message, tally_summary
from chesslite.game.state import GameState, MoveRecord
from chesslite.ui.board_view import BoardView
from chesslite.ui.theme import BoardTheme

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window for chesslite."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self.setWindowTitle("chesslite")
        self.setMinimumSize(480, 600)

        self._settings = settings if settings is not None else AppSettings()
        self._controller = GameController()

        self._setup_ui()
        self._connect_signals()
        self._apply_settings()
        self.new_game()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def controller(self) -> GameController:
        return self._controller

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    @property
    def status_text(self) -> str:
        return self._status_label.text()

    @property
    def captures_text(self) -> str:
        return self._captures_label.text()

    # ── Setup ────────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        self._board_view = BoardView(blink_ms=self._settings.flicker_interval_ms)
        self._status_label = QLabel()
        self._captures_label = QLabel()

        central = QWidget()
        layout = QVBoxLayout(central)
        layout.addWidget(self._board_view, stretch=1)
        layout.addWidget(self._status_label)
        layout.addWidget(self._captures_label)
        self.setCentralWidget(central)

        toolbar = QToolBar("Game", self)
        self._new_game_action = QAction("New game", self)
        self._undo_action = QAction("Undo", self)
        self._resign_action = QAction("Resign", self)
        for action in (self._new_game_action, self._undo_action, self._resign_action):
            toolbar.addAction(action)
        self.addToolBar(toolbar)

    def _connect_signals(self) -> None:
        self._board_view.move_requested.connect(self._on_move_requested)
        self._new_game_action.triggered.connect(self.new_game)
        self._undo_action.triggered.connect(self.undo)
        self._resign_action.triggered.connect(self.resign)

        events = self._controller.events
        events.on_move.append(self._on_move)
        events.on_game_over.append(self._on_game_over)

    def _apply_settings(self) -> None:
        s = self._settings
        scene = self._board_view.board_scene
        scene.set_theme(BoardTheme.named(s.board_theme))
        scene.set_show_coordinates(s.show_coordinates)
        scene.set_show_legal_moves(s.show_legal_moves)
        scene.set_blink_interval(s.flicker_interval_ms)

    # ── Actions ──────────────────────────────────────────────────────────

    def new_game(self) -> None:
        self._controller.new_game()
        self._board_view.board_scene.set_interactive(True)
        self._refresh()

    def undo(self) -> None:
        if self._controller.undo_move():
            self._refresh()

    def resign(self) -> None:
        state = self._controller.state
        if not state.is_game_over:
            self._controller.resign(state.side_to_move)

    # ── Controller callbacks ─────────────────────────────────────────────

    def _on_move_requested(self, from_sq: Square, to_sq: Square) -> None:
        if not self._controller.submit_move(from_sq, to_sq):
            _LOGGER.warning("Board offered a move the controller rejected")
            self._refresh()

    def _on_move(self, record: MoveRecord, state: GameState) -> None:
        self._refresh()

    def _on_game_over(self, result: GameResult) -> None:
        self._board_view.board_scene.set_interactive(False)
        state = self._controller.state
        if state.status.is_terminal:
            text = status_message(state.status, state.side_to_move)
        else:
            text = f"{str(state.side_to_move).capitalize()} resigned. {result_message(result)}"
        self._status_label.setText(text)

    # ── Rendering ────────────────────────────────────────────────────────

    def _refresh(self) -> None:
        state = self._controller.state
        scene = self._board_view.board_scene
        scene.set_board(state.board, state.side_to_move)

        if state.status in (GameStatus.CHECK, GameStatus.CHECKMATE):
            scene.highlight_check(state.board.king_square(state.side_to_move))
        else:
            scene.highlight_check(None)

        self._status_label.setText(status_message(state.status, state.side_to_move))
        self._captures_label.setText(tally_summary(state.tally))
        self._undo_action.setEnabled(bool(state.move_history) and not state.is_game_over)
