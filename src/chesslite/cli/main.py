"""Terminal front-end: prompt for squares, flicker the selection, play."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable
from typing import TextIO

from chesslite.cli.flicker import SelectionFlicker
from chesslite.cli.render import CLEAR_SCREEN, render_board
from chesslite.config import AppSettings, configure_logging
from chesslite.core.types import Square, parse_square, square_name
from chesslite.game.controller import GameController
from chesslite.game.messages import result_message, status_message, tally_summary
from chesslite.game.state import MoveRecord

_LOGGER = logging.getLogger(__name__)

PIECE_PROMPT = "\nPiece to move: "
TARGET_PROMPT = "\nMove to: "
RETRY_PROMPT = "Invalid format. Try again: "

_COMMANDS = ("undo", "resign", "quit")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chesslite", description="Two-player chess in the terminal."
    )
    parser.add_argument(
        "--no-color", action="store_true", help="disable ANSI piece colors"
    )
    parser.add_argument(
        "--no-flicker", action="store_true", help="do not blink the selected piece"
    )
    parser.add_argument(
        "--flicker-ms",
        type=int,
        default=None,
        metavar="MS",
        help="blink period in milliseconds (default: 400)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="logging level, e.g. DEBUG or INFO (default: WARNING)",
    )
    return parser


def settings_from_args(args: argparse.Namespace) -> AppSettings:
    settings = AppSettings()
    if args.no_color:
        settings.use_color = False
    if args.no_flicker:
        settings.flicker_enabled = False
    if args.flicker_ms is not None:
        if args.flicker_ms <= 0:
            raise ValueError(f"Flicker period must be positive: {args.flicker_ms}")
        settings.flicker_interval_ms = args.flicker_ms
    if args.log_level is not None:
        settings.log_level = args.log_level
    return settings


class TerminalGame:
    """Reads squares from *input_fn* and draws frames on *stream*."""

    def __init__(
        self,
        settings: AppSettings,
        input_fn: Callable[[], str],
        stream: TextIO,
        controller: GameController | None = None,
    ) -> None:
        self._settings = settings
        self._input = input_fn
        self._stream = stream
        self._ctrl = controller if controller is not None else GameController()
        self._ctrl.events.on_move.append(self._on_move)

    @property
    def controller(self) -> GameController:
        return self._ctrl

    def run(self) -> int:
        self._ctrl.new_game()
        self._draw()
        state = self._ctrl.state

        while not state.is_game_over:
            text = self._ask(PIECE_PROMPT)
            if text in _COMMANDS:
                if text == "quit":
                    return 0
                self._command(text)
                continue

            from_sq = self._parse(text)
            piece = state.board[from_sq]
            if piece.color != state.side_to_move:
                self._write(f"Select one of your own pieces ({state.side_to_move}).\n")
                continue

            to_sq = self._ask_target(from_sq)
            if not self._ctrl.submit_move(from_sq, to_sq):
                self._draw()
                self._write("\nIllegal move!\n")

        self._write("\n" + result_message(state.result) + "\n")
        return 0

    # ── Input ────────────────────────────────────────────────────────────

    def _ask(self, prompt: str) -> str:
        self._write(prompt)
        return self._input().strip().lower()

    def _parse(self, text: str, flicker: SelectionFlicker | None = None) -> Square:
        while True:
            try:
                return parse_square(text)
            except ValueError:
                if flicker is None:
                    text = self._ask(RETRY_PROMPT)
                else:
                    # The running flicker redraws over direct writes.
                    flicker.prompt = RETRY_PROMPT
                    text = self._ask("")

    def _ask_target(self, from_sq: Square) -> Square:
        self._write(CLEAR_SCREEN)
        if self._settings.flicker_enabled:
            flicker = SelectionFlicker(
                self._ctrl.state,
                from_sq,
                self._stream,
                interval=self._settings.flicker_interval,
                use_color=self._settings.use_color,
                prompt=TARGET_PROMPT,
            )
            with flicker:
                _LOGGER.debug("Selected %s", square_name(from_sq))
                return self._parse(self._ask(""), flicker)

        self._draw(selected=from_sq)
        _LOGGER.debug("Selected %s", square_name(from_sq))
        return self._parse(self._ask(TARGET_PROMPT))

    def _command(self, name: str) -> None:
        state = self._ctrl.state
        if name == "undo":
            if not self._ctrl.undo_move():
                self._write("Nothing to undo.\n")
                return
            self._draw()
        elif name == "resign":
            self._ctrl.resign(state.side_to_move)

    # ── Output ───────────────────────────────────────────────────────────

    def _on_move(self, record: MoveRecord, state: object) -> None:
        self._draw()
        if record.was_capture:
            self._write(
                f"{str(record.piece.color).capitalize()} captured a "
                f"{record.captured.piece_type.name.lower()}.\n"
            )

    def _draw(self, selected: Square | None = None) -> None:
        state = self._ctrl.state
        frame = render_board(
            state.snapshot(),
            selected=selected,
            use_color=self._settings.use_color,
        )
        self._write(CLEAR_SCREEN + frame)
        self._write(tally_summary(state.tally) + "\n")
        self._write(status_message(state.status, state.side_to_move) + "\n")

    def _write(self, text: str) -> None:
        self._stream.write(text)
        self._stream.flush()


def run(
    settings: AppSettings,
    input_fn: Callable[[], str] = input,
    stream: TextIO = sys.stdout,
) -> int:
    """Play one game; returns the process exit code."""
    game = TerminalGame(settings, input_fn, stream)
    try:
        return game.run()
    except (EOFError, KeyboardInterrupt):
        stream.write("\n")
        return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point of the ``chesslite`` console script."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = settings_from_args(args)
        configure_logging(settings.log_level)
    except ValueError as exc:
        parser.error(str(exc))
    return run(settings)


if __name__ == "__main__":
    sys.exit(main())
