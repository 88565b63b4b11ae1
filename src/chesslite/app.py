"""Application entry point."""

from __future__ import annotations

import sys

from chesslite.config import AppSettings, configure_logging


def main() -> None:
    """Launch the chesslite desktop application."""
    from chesslite.ui.bootstrap import run_application

    settings = AppSettings()
    configure_logging(settings.log_level)
    sys.exit(run_application(settings=settings))


if __name__ == "__main__":
    main()
