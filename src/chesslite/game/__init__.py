"""Game management layer — controller and state machine.

Quick start::

    from chesslite.core import parse_square
    from chesslite.game import GameController

    ctrl = GameController()
    ctrl.new_game()
    ctrl.submit_move(parse_square("e2"), parse_square("e4"))
"""

from chesslite.game.controller import GameController, GameEvents
from chesslite.game.interfaces import GamePhase, IGameController
from chesslite.game.state import GameState, MoveRecord

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameController",
    # Concrete
    "GameController",
    "GameEvents",
    "GameState",
    "MoveRecord",
]
