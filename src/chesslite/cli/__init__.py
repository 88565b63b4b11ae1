"""Terminal front-end: ANSI board rendering, selection flicker, input loop."""

from chesslite.cli.flicker import SelectionFlicker
from chesslite.cli.main import TerminalGame, main, run
from chesslite.cli.render import render_board

__all__ = [
    "SelectionFlicker",
    "TerminalGame",
    "main",
    "render_board",
    "run",
]
