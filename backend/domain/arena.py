"""
Arena entity - the grid the snake lives on.
"""

import logging
import random
from typing import Callable, List, Optional, Tuple

from .constants import TileState, FOOD_RETRY_LIMIT
from .errors import OutOfBoundsError, GridFullError

logger = logging.getLogger(__name__)

TileListener = Callable[[int, int, TileState], None]


class Arena:
    """
    Stores the state of every tile on a square board.

    Attributes:
        size: number of tiles along each side
        tiles: tiles[x][y] -> TileState
        rng: random source used for food placement
        food_retry_limit: random draws tried before enumerating empty tiles

    Every call to set_tile() is forwarded to the registered listeners as
    (x, y, state), which is how renderers learn about changes.
    """

    def __init__(
        self,
        size: int,
        rng: Optional[random.Random] = None,
        food_retry_limit: int = FOOD_RETRY_LIMIT,
        listeners: Optional[List[TileListener]] = None
    ):
        if not isinstance(size, int) or isinstance(size, bool) or size <= 0:
            raise ValueError(f"Arena size must be a positive integer, got {size!r}")
        if food_retry_limit < 0:
            raise ValueError("food_retry_limit cannot be negative")

        self.size = size
        self.rng = rng or random.Random()
        self.food_retry_limit = food_retry_limit
        self.listeners: List[TileListener] = list(listeners or [])

        self.tiles: List[List[TileState]] = [
            [TileState.EMPTY] * size for _ in range(size)
        ]
        # Paint the whole board once so listeners start from a known state
        for x in range(size):
            for y in range(size):
                self.set_tile(x, y, TileState.EMPTY)

    def add_listener(self, listener: TileListener):
        self.listeners.append(listener)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def get_tile(self, x: int, y: int) -> TileState:
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(x, y, self.size)
        return self.tiles[x][y]

    def set_tile(self, x: int, y: int, state: TileState):
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(x, y, self.size)
        self.tiles[x][y] = state

        for listener in self.listeners:
            listener(x, y, state)

    def is_collision(self, x: int, y: int) -> bool:
        """True if moving a head onto (x, y) ends the game."""
        return not self.in_bounds(x, y) or self.tiles[x][y] is TileState.SNAKE

    def cells_with(self, state: TileState) -> List[Tuple[int, int]]:
        """Return every (x, y) currently holding `state`."""
        return [
            (x, y)
            for x in range(self.size)
            for y in range(self.size)
            if self.tiles[x][y] is state
        ]

    def place_food_random(self) -> Tuple[int, int]:
        """
        Turn a random empty tile into food and return its position.

        Draws random tiles until an empty one turns up. After
        food_retry_limit misses the empty tiles are enumerated instead, so a
        nearly full board still gets its food.

        Raises:
            GridFullError: if no tile is empty.
        """
        for _ in range(self.food_retry_limit):
            x = self.rng.randrange(self.size)
            y = self.rng.randrange(self.size)
            if self.tiles[x][y] is TileState.EMPTY:
                self.set_tile(x, y, TileState.FOOD)
                return (x, y)

        empty = self.cells_with(TileState.EMPTY)
        if not empty:
            raise GridFullError("Could not find empty tile to place food")

        logger.debug(
            "No empty tile after %d random draws, picking from %d remaining",
            self.food_retry_limit, len(empty)
        )
        x, y = self.rng.choice(empty)
        self.set_tile(x, y, TileState.FOOD)
        return (x, y)

    def __repr__(self):
        return (
            f"<Arena size={self.size}, snake={len(self.cells_with(TileState.SNAKE))}, "
            f"food={self.cells_with(TileState.FOOD)}>"
        )
