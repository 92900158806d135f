"""
Base input controller interface for the game engine.
"""

from typing import Optional

from domain.constants import Direction


class InputController:
    """
    Base class/interface for input handling.

    The session polls its controller once at the start of every tick and
    applies whatever direction it gets back before moving the snake.
    """

    def update_direction(self) -> Optional[Direction]:
        """
        Return the direction to apply on this tick.

        Returns:
            A Direction, or None to keep the current heading
        """
        raise NotImplementedError
