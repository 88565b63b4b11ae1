"""Tests for the shared status lines."""

import pytest

from chesslite.core.enums import Color, GameResult, GameStatus, PieceType
from chesslite.core.tally import CaptureTally
from chesslite.game.messages import result_message, status_message, tally_summary


@pytest.mark.parametrize(
    ("status", "color", "expected"),
    [
        (GameStatus.PLAYING, Color.WHITE, "White to move."),
        (GameStatus.CHECK, Color.BLACK, "Black is in check!"),
        (GameStatus.CHECKMATE, Color.WHITE, "Checkmate! Black wins."),
        (GameStatus.STALEMATE, Color.BLACK, "Stalemate! The game is drawn."),
    ],
)
def test_status_message(status: GameStatus, color: Color, expected: str) -> None:
    assert status_message(status, color) == expected


def test_result_message() -> None:
    assert result_message(GameResult.WHITE_WINS) == "White wins."
    assert result_message(GameResult.BLACK_WINS) == "Black wins."
    assert result_message(GameResult.DRAW) == "Draw."
    assert result_message(GameResult.IN_PROGRESS) == "Game in progress."


def test_tally_summary_empty() -> None:
    assert tally_summary(CaptureTally()) == "White captured: -\nBlack captured: -"


def test_tally_summary_lists_kinds_in_order() -> None:
    tally = CaptureTally()
    tally.record(Color.WHITE, PieceType.QUEEN)
    tally.record(Color.WHITE, PieceType.PAWN)
    tally.record(Color.WHITE, PieceType.PAWN)
    assert tally_summary(tally).splitlines()[0] == "White captured: pawn x2, queen x1"
