"""Game management layer — controller, options, state snapshots.

Quick start::

    from chessmate.core import Position
    from chessmate.game import GameController

    ctrl = GameController()
    ctrl.click(Position.from_name("e2"))
    ctrl.click(Position.from_name("e4"))
    print(ctrl.state.board)
"""

from chessmate.game.controller import GameController, GameEvents, GameOptions
from chessmate.game.state import GameState

__all__ = [
    "GameController",
    "GameEvents",
    "GameOptions",
    "GameState",
]
