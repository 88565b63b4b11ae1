"""Human-readable status lines shared by the front-ends."""

from __future__ import annotations

from chesslite.core.enums import Color, GameResult, GameStatus
from chesslite.core.tally import CAPTURABLE, CaptureTally


def _side(color: Color) -> str:
    return str(color).capitalize()


def status_message(status: GameStatus, color: Color) -> str:
    """Short message for the status of *color*, the side to move."""
    if status == GameStatus.CHECK:
        return f"{_side(color)} is in check!"
    if status == GameStatus.CHECKMATE:
        return f"Checkmate! {_side(color.opposite)} wins."
    if status == GameStatus.STALEMATE:
        return "Stalemate! The game is drawn."
    return f"{_side(color)} to move."


def result_message(result: GameResult) -> str:
    if result == GameResult.WHITE_WINS:
        return "White wins."
    if result == GameResult.BLACK_WINS:
        return "Black wins."
    if result == GameResult.DRAW:
        return "Draw."
    return "Game in progress."


def tally_summary(tally: CaptureTally) -> str:
    """One line per side listing the kinds it has captured."""
    lines: list[str] = []
    for color in Color:
        taken = [
            f"{kind.name.lower()} x{tally.count(color, kind)}"
            for kind in CAPTURABLE
            if tally.count(color, kind)
        ]
        lines.append(f"{_side(color)} captured: {', '.join(taken) or '-'}")
    return "\n".join(lines)
