"""
Game constants for the snake arena.
"""

from enum import Enum


class Direction(Enum):
    """
    Facing directions of the snake.

    Each value is the (dx, dy) unit step in screen coordinates, where (0, 0)
    is the top-left cell and y grows downwards.
    """
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


UP = Direction.UP
DOWN = Direction.DOWN
LEFT = Direction.LEFT
RIGHT = Direction.RIGHT
VALID_MOVES = set(Direction)


class TileState(Enum):
    """What a single arena cell holds."""
    EMPTY = 0
    SNAKE = 1
    FOOD = 2


# Game settings
GAME_SIZE = 20
FPS = 10
CANVAS_SIZE = 600
FOOD_RETRY_LIMIT = 100
