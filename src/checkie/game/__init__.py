"""Game management layer — turn controller, players, game loop.

Quick start::

    from checkie.core import Color
    from checkie.game import CheckersGame, HumanPlayer, RandomPlayer

    game = CheckersGame(
        light=HumanPlayer(Color.LIGHT, "Alice"),
        dark=RandomPlayer(Color.DARK),
    )
    result = game.run()
"""

from checkie.game.controller import IDLE_MOVE_LIMIT, TurnController
from checkie.game.game import CheckersGame, GameEvents, TurnRecord
from checkie.game.interfaces import IPlayer
from checkie.game.player import HumanPlayer, PlayerBase, RandomPlayer

__all__ = [
    # Interfaces
    "IPlayer",
    # Concrete
    "CheckersGame",
    "GameEvents",
    "HumanPlayer",
    "IDLE_MOVE_LIMIT",
    "PlayerBase",
    "RandomPlayer",
    "TurnController",
    "TurnRecord",
]
