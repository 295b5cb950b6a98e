"""Game management layer — selection state machine, turns, promotion.

Quick start::

    from chesspad.core import parse_square
    from chesspad.game import GameController

    ctrl = GameController()
    ctrl.on_square_clicked(parse_square("e2"))
    ctrl.on_square_clicked(parse_square("e4"))
    print(ctrl.snapshot().turn)
"""

from chesspad.game.controller import GameController, GameEvents
from chesspad.game.interfaces import GamePhase, IGameController
from chesspad.game.state import (
    BoardSnapshot,
    GameState,
    MoveRecord,
    PromotionTransaction,
)

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameController",
    # Concrete
    "BoardSnapshot",
    "GameController",
    "GameEvents",
    "GameState",
    "MoveRecord",
    "PromotionTransaction",
]
