"""Tests for the background selection flicker."""

import io
import time
from collections.abc import Callable

from chesslite.cli.flicker import SelectionFlicker
from chesslite.cli.render import CURSOR_HOME
from chesslite.core.types import parse_square
from chesslite.game.state import GameState


def _state() -> GameState:
    state = GameState()
    state.setup()
    return state


def _wait_for(predicate: Callable[[], bool], timeout: float = 2.0) -> bool:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.005)
    return predicate()


class TestSelectionFlicker:
    def test_alternates_visible_and_hidden_frames(self) -> None:
        out = io.StringIO()
        flicker = SelectionFlicker(
            _state(), parse_square("e2"), out, interval=0.01, use_color=False
        )
        with flicker:
            assert _wait_for(lambda: flicker.frames >= 2)
        assert not flicker.is_running

        frames = out.getvalue().split(CURSOR_HOME)[1:]
        assert "2 P P P P P P P P" in frames[0]
        assert "2 P P P P   P P P" in frames[1]
        assert all(frame.endswith("Move to: ") for frame in frames)

    def test_stop_is_idempotent(self) -> None:
        flicker = SelectionFlicker(
            _state(), parse_square("e2"), io.StringIO(), interval=0.01
        )
        flicker.stop()
        flicker.start()
        flicker.stop()
        flicker.stop()
        assert not flicker.is_running

    def test_waits_for_game_lock(self) -> None:
        state = _state()
        flicker = SelectionFlicker(
            state, parse_square("e2"), io.StringIO(), interval=0.01
        )
        with state.lock:
            flicker.start()
            time.sleep(0.05)
            assert flicker.frames == 0
        assert _wait_for(lambda: flicker.frames >= 1)
        flicker.stop()

    def test_closed_stream_ends_thread(self) -> None:
        out = io.StringIO()
        out.close()
        flicker = SelectionFlicker(_state(), parse_square("e2"), out, interval=0.01)
        flicker.start()
        assert _wait_for(lambda: not flicker.is_running)
        assert flicker.frames == 0
        flicker.stop()

    def test_prompt_change_shows_on_next_frame(self) -> None:
        out = io.StringIO()
        flicker = SelectionFlicker(
            _state(), parse_square("e2"), out, interval=0.01, prompt="Move to: "
        )
        with flicker:
            assert _wait_for(lambda: flicker.frames >= 1)
            flicker.prompt = "Try again: "
            seen = flicker.frames
            assert _wait_for(lambda: flicker.frames >= seen + 2)
        assert flicker.prompt == "Try again: "
        assert out.getvalue().split(CURSOR_HOME)[-1].endswith("Try again: ")
