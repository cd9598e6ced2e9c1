"""
Core module of the Duel Pong game
"""

from duel_pong.core.entities import Ball
from duel_pong.core.entities import Paddle
from duel_pong.core.entities import PaddleInput
from duel_pong.core.entities import Side
from duel_pong.core.entities import Vector2D
from duel_pong.core.match import PongMatch
from duel_pong.core.paddle_controller import PaddleController
from duel_pong.core.physics import BallSimulation

__all__ = [
    "Ball",
    "Paddle",
    "PaddleInput",
    "Side",
    "Vector2D",
    "PaddleController",
    "BallSimulation",
    "PongMatch",
]
