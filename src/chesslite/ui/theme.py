"""Visual theme constants for the board."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    highlight_from: QColor  # selected piece origin
    highlight_to: QColor  # legal move targets
    highlight_check: QColor  # king in check
    piece: QColor  # glyph colour
    coord_light: QColor  # coordinate text on dark squares
    coord_dark: QColor  # coordinate text on light squares

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            highlight_from=QColor(255, 255, 0, 100),  # yellow transparent
            highlight_to=QColor(0, 0, 0, 40),  # dark dot overlay
            highlight_check=QColor(255, 0, 0, 120),  # red transparent
            piece=QColor(20, 20, 20),
            coord_light=QColor(181, 136, 99),
            coord_dark=QColor(240, 217, 181),
        )

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls(
            light_square=QColor(222, 227, 230),
            dark_square=QColor(140, 162, 173),
            highlight_from=QColor(255, 255, 0, 100),
            highlight_to=QColor(0, 0, 0, 40),
            highlight_check=QColor(255, 0, 0, 120),
            piece=QColor(20, 20, 20),
            coord_light=QColor(140, 162, 173),
            coord_dark=QColor(222, 227, 230),
        )

    @classmethod
    def green(cls) -> BoardTheme:
        return cls(
            light_square=QColor(236, 238, 220),
            dark_square=QColor(112, 149, 120),
            highlight_from=QColor(255, 255, 0, 100),
            highlight_to=QColor(0, 0, 0, 40),
            highlight_check=QColor(255, 0, 0, 120),
            piece=QColor(20, 20, 20),
            coord_light=QColor(112, 149, 120),
            coord_dark=QColor(236, 238, 220),
        )

    @classmethod
    def named(cls, name: str) -> BoardTheme:
        """Theme preset by settings name; unknown names fall back to Classic."""
        presets = {"Classic": cls.default, "Blue": cls.blue, "Green": cls.green}
        return presets.get(name, cls.default)()


APP_STYLE = """
QMainWindow { background: #2b2b2b; }
QLabel { color: #e0e0e0; font-size: 14px; }
QToolBar { background: #333333; border: none; spacing: 6px; }
"""
