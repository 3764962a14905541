"""
Core module of Ping Pong game
"""

from ping_pong.core.entities import Ball
from ping_pong.core.entities import GameState
from ping_pong.core.entities import Paddle
from ping_pong.core.entities import ServeDirection
from ping_pong.core.entities import Side
from ping_pong.core.entities import Vector2D

__all__ = [
    "Ball",
    "Paddle",
    "GameState",
    "ServeDirection",
    "Side",
    "Vector2D",
]
