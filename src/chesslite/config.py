"""User-configurable settings shared by the front-ends."""

from __future__ import annotations

import logging
from dataclasses import dataclass

BOARD_THEMES = ("Classic", "Blue", "Green")


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Terminal
    use_color: bool = True
    flicker_enabled: bool = True
    flicker_interval_ms: int = 400

    # Board
    board_theme: str = "Classic"
    show_coordinates: bool = True
    show_legal_moves: bool = True

    # Diagnostics
    log_level: str = "WARNING"

    @property
    def flicker_interval(self) -> float:
        """Blink period in seconds."""
        return self.flicker_interval_ms / 1000


def configure_logging(level: str) -> None:
    """Install a basic stderr handler at *level* (entry points only)."""
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Invalid log level: {level!r}")
    logging.basicConfig(
        level=numeric,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
