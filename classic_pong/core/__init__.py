"""
Core module of Classic Pong game
"""

from classic_pong.core.entities import Ball
from classic_pong.core.entities import GameState
from classic_pong.core.entities import InputSnapshot
from classic_pong.core.entities import Paddle
from classic_pong.core.entities import Vector2D
from classic_pong.core.entities import random_direction
from classic_pong.core.physics import PhysicsEngine

__all__ = [
    "Ball",
    "Paddle",
    "GameState",
    "InputSnapshot",
    "PhysicsEngine",
    "Vector2D",
    "random_direction",
]
