"""
Domain entities for the snake arena game engine.

This module contains the core game entities that are independent of
rendering, input and the host run loop.
"""

from .constants import (
    Direction, TileState,
    UP, DOWN, LEFT, RIGHT, VALID_MOVES,
    GAME_SIZE, FPS, CANVAS_SIZE, FOOD_RETRY_LIMIT,
)
from .errors import SnakeGameError, OutOfBoundsError, GridFullError, InvalidStateError
from .arena import Arena
from .snake import Snake
from .game_state import GameState

__all__ = [
    'Direction', 'TileState',
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES',
    'GAME_SIZE', 'FPS', 'CANVAS_SIZE', 'FOOD_RETRY_LIMIT',
    'SnakeGameError', 'OutOfBoundsError', 'GridFullError', 'InvalidStateError',
    'Arena',
    'Snake',
    'GameState',
]
