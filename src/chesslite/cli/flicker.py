"""Blinking selection display on a background thread."""

from __future__ import annotations

import logging
import threading
from typing import TextIO

from chesslite.cli.render import CURSOR_HOME, render_board
from chesslite.core.types import Square
from chesslite.game.state import GameState

_LOGGER = logging.getLogger(__name__)


class SelectionFlicker:
    """Redraws the board, toggling the selected piece on and off.

    The board is snapshotted under ``state.lock`` for every frame, so the
    thread never sees a position the engine is only simulating.
    """

    __slots__ = (
        "_state",
        "_square",
        "_stream",
        "_interval",
        "_use_color",
        "_prompt",
        "_stop",
        "_thread",
        "frames",
    )

    def __init__(
        self,
        state: GameState,
        square: Square,
        stream: TextIO,
        *,
        interval: float = 0.4,
        use_color: bool = True,
        prompt: str = "Move to: ",
    ) -> None:
        self._state = state
        self._square = square
        self._stream = stream
        self._interval = interval
        self._use_color = use_color
        self._prompt = prompt
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None
        self.frames = 0

    @property
    def prompt(self) -> str:
        """Text drawn under each frame; changes show on the next frame."""
        return self._prompt

    @prompt.setter
    def prompt(self, text: str) -> None:
        self._prompt = text

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.is_running:
            return
        self._stop.clear()
        self._thread = threading.Thread(
            target=self._run, name="selection-flicker", daemon=True
        )
        self._thread.start()

    def stop(self) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None

    def __enter__(self) -> SelectionFlicker:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def _run(self) -> None:
        hide = False
        while not self._stop.is_set():
            board = self._state.snapshot()
            frame = render_board(
                board,
                selected=self._square,
                hide_selected=hide,
                use_color=self._use_color,
            )
            try:
                self._stream.write(CURSOR_HOME + frame + "\n" + self._prompt)
                self._stream.flush()
            except (OSError, ValueError):
                _LOGGER.warning("Flicker output closed; stopping")
                return
            self.frames += 1
            hide = not hide
            self._stop.wait(self._interval)
