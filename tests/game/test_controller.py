"""Tests for GameController — the orchestrator."""

from chesslite.core.enums import Color, GameResult, GameStatus
from chesslite.core.types import parse_square
from chesslite.game.controller import GameController
from chesslite.game.interfaces import GamePhase
from chesslite.game.state import GameState, MoveRecord


def _make_controller(
    placement: str | None = None, side: Color = Color.WHITE
) -> GameController:
    ctrl = GameController()
    ctrl.new_game(placement, side)
    return ctrl


def _submit(ctrl: GameController, move: str) -> bool:
    return ctrl.submit_move(parse_square(move[:2]), parse_square(move[2:]))


class TestNewGame:
    def test_phase_awaiting(self) -> None:
        ctrl = _make_controller()
        assert ctrl.state.phase == GamePhase.AWAITING_MOVE

    def test_custom_side_to_move(self) -> None:
        ctrl = _make_controller("4k3/8/8/8/8/8/8/4K3", Color.BLACK)
        assert ctrl.state.side_to_move == Color.BLACK

    def test_phase_event(self) -> None:
        ctrl = GameController()
        phases: list[GamePhase] = []
        ctrl.events.on_phase_changed.append(phases.append)
        ctrl.new_game()
        assert phases == [GamePhase.AWAITING_MOVE]

    def test_mated_placement_reports_game_over(self) -> None:
        ctrl = GameController()
        results: list[GameResult] = []
        ctrl.events.on_game_over.append(results.append)
        ctrl.new_game("R2k4/8/3K4/8/8/8/8/8", Color.BLACK)
        assert results == [GameResult.WHITE_WINS]

    def test_check_placement_reports_check(self) -> None:
        ctrl = GameController()
        checks: list[Color] = []
        ctrl.events.on_check.append(checks.append)
        ctrl.new_game("4k3/8/8/8/8/8/8/r3K3")
        assert checks == [Color.WHITE]


class TestSubmitMove:
    def test_legal_move_accepted(self) -> None:
        ctrl = _make_controller()
        assert _submit(ctrl, "e2e4")
        assert ctrl.state.side_to_move == Color.BLACK

    def test_illegal_move_rejected(self) -> None:
        ctrl = _make_controller()
        assert not _submit(ctrl, "e2e5")
        assert ctrl.state.side_to_move == Color.WHITE

    def test_move_event(self) -> None:
        ctrl = _make_controller()
        seen: list[tuple[MoveRecord, GameState]] = []
        ctrl.events.on_move.append(lambda record, state: seen.append((record, state)))
        _submit(ctrl, "g1f3")
        assert len(seen) == 1
        record, state = seen[0]
        assert record.to_sq == parse_square("f3")
        assert state is ctrl.state

    def test_no_event_for_rejected_move(self) -> None:
        ctrl = _make_controller()
        seen: list[MoveRecord] = []
        ctrl.events.on_move.append(lambda record, state: seen.append(record))
        _submit(ctrl, "e2e5")
        assert seen == []

    def test_check_event(self) -> None:
        ctrl = _make_controller()
        checks: list[Color] = []
        ctrl.events.on_check.append(checks.append)
        for move in ("e2e4", "f7f6", "d1h5"):
            assert _submit(ctrl, move)
        assert checks == [Color.BLACK]
        assert ctrl.state.status == GameStatus.CHECK

    def test_checkmate_event(self) -> None:
        ctrl = _make_controller()
        results: list[GameResult] = []
        ctrl.events.on_game_over.append(results.append)
        for move in ("f2f3", "e7e5", "g2g4", "d8h4"):
            assert _submit(ctrl, move)
        assert results == [GameResult.BLACK_WINS]
        assert not _submit(ctrl, "a2a3")

    def test_stalemate_event(self) -> None:
        ctrl = _make_controller("7k/8/5K2/8/8/8/6Q1/8")
        results: list[GameResult] = []
        ctrl.events.on_game_over.append(results.append)
        assert _submit(ctrl, "g2g6")
        assert results == [GameResult.DRAW]


class TestResignAndUndo:
    def test_resign(self) -> None:
        ctrl = _make_controller()
        results: list[GameResult] = []
        ctrl.events.on_game_over.append(results.append)
        ctrl.resign(Color.BLACK)
        assert results == [GameResult.WHITE_WINS]
        assert ctrl.state.is_game_over

    def test_resign_twice_is_ignored(self) -> None:
        ctrl = _make_controller()
        results: list[GameResult] = []
        ctrl.events.on_game_over.append(results.append)
        ctrl.resign(Color.WHITE)
        ctrl.resign(Color.BLACK)
        assert results == [GameResult.BLACK_WINS]

    def test_undo(self) -> None:
        ctrl = _make_controller()
        _submit(ctrl, "e2e4")
        assert ctrl.undo_move()
        assert ctrl.state.side_to_move == Color.WHITE
        assert ctrl.state.move_history == []

    def test_undo_without_history(self) -> None:
        assert not _make_controller().undo_move()

    def test_undo_after_game_over(self) -> None:
        ctrl = _make_controller()
        _submit(ctrl, "e2e4")
        ctrl.resign(Color.BLACK)
        assert not ctrl.undo_move()
