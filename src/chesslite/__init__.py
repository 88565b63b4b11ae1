"""chesslite — a two-player chess rules engine with terminal and Qt front-ends."""

__version__ = "0.1.0"
