"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Callable, Optional, Tuple

from .arena import Arena
from .constants import Direction, TileState, UP


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        body: deque of (x, y) from head at index 0 to tail at the end
        direction: the Direction applied on the next update

    New heads are pushed on the left and the tail is popped on the right,
    and the arena is updated alongside so both always agree.
    """

    def __init__(self, arena: Arena, x: int, y: int):
        self.body = deque([(x, y)])
        self.direction: Direction = UP

        arena.set_tile(x, y, TileState.SNAKE)

    @property
    def head(self) -> Tuple[int, int]:
        """Return the head position (first element)."""
        return self.body[0]

    def __len__(self):
        return len(self.body)

    def set_direction(self, direction: Direction):
        # Turning straight back is allowed and kills a snake longer than one tile
        if not isinstance(direction, Direction):
            raise ValueError(f"Not a direction: {direction!r}")
        self.direction = direction

    def update(
        self,
        arena: Arena,
        on_game_over: Callable[[], None],
        on_food: Callable[[], None]
    ) -> Optional[Tuple[int, int]]:
        """
        Advance the snake by one tile.

        Args:
            arena: the arena the snake lives in
            on_game_over: called when the next tile is a wall or the snake itself
            on_food: called when the next tile holds food

        Returns:
            The new head, or None if the move ended the game. Nothing is
            changed when the game ends.
        """
        head_x, head_y = self.head
        new_x = head_x + self.direction.dx
        new_y = head_y + self.direction.dy

        if arena.is_collision(new_x, new_y):
            on_game_over()
            return None

        old_tile = arena.get_tile(new_x, new_y)

        # Keep the tail so the snake grows
        if old_tile is TileState.FOOD:
            on_food()

        # Drop the tail so the length stays the same
        if old_tile is TileState.EMPTY:
            tail_x, tail_y = self.body.pop()
            arena.set_tile(tail_x, tail_y, TileState.EMPTY)

        self.body.appendleft((new_x, new_y))
        arena.set_tile(new_x, new_y, TileState.SNAKE)

        return (new_x, new_y)

    def __repr__(self):
        return f"<Snake head={self.head}, length={len(self.body)}, direction={self.direction.name}>"
