"""Text rendering of the board for ANSI terminals."""

from __future__ import annotations

from chesslite.core.board import Board
from chesslite.core.enums import Color
from chesslite.core.types import BOARD_SIZE, FILES, Square

CURSOR_HOME = "\033[H"
CLEAR_SCREEN = "\033[H\033[2J"

_RESET = "\033[0m"
_COLOR_CODES: dict[Color, str] = {
    Color.WHITE: "\033[1;37m",
    Color.BLACK: "\033[1;34m",
}


def _cell(board: Board, sq: Square, use_color: bool) -> str:
    piece = board[sq]
    if piece.color is None:
        return ". "
    if use_color:
        return f"{_COLOR_CODES[piece.color]}{str(piece).upper()}{_RESET} "
    return f"{piece} "


def render_board(
    board: Board,
    *,
    selected: Square | None = None,
    hide_selected: bool = False,
    use_color: bool = True,
    show_coordinates: bool = True,
) -> str:
    """Build the full frame as one string so it can be written in one call.

    Without color, black pieces are lowercase so the sides stay distinct.
    """
    lines: list[str] = []
    for row in range(BOARD_SIZE):
        cells: list[str] = []
        for col in range(BOARD_SIZE):
            if hide_selected and (row, col) == selected:
                cells.append("  ")
            else:
                cells.append(_cell(board, (row, col), use_color))
        prefix = f"{BOARD_SIZE - row} " if show_coordinates else ""
        lines.append(prefix + "".join(cells).rstrip())
    if show_coordinates:
        lines.append("  " + " ".join(FILES))
    return "\n".join(lines) + "\n"
