"""
Keyboard controller - turns key presses into snake directions.
"""

import logging
from typing import Dict, Optional

from domain.constants import Direction, UP, DOWN, LEFT, RIGHT
from .base import InputController

logger = logging.getLogger(__name__)

# Lower-cased key names. Covers DOM style names ("ArrowUp") as well as the
# names pygame.key.name() produces ("up").
KEY_BINDINGS: Dict[str, Direction] = {
    "arrowup": UP,
    "up": UP,
    "w": UP,
    "arrowdown": DOWN,
    "down": DOWN,
    "s": DOWN,
    "arrowright": RIGHT,
    "right": RIGHT,
    "d": RIGHT,
    "arrowleft": LEFT,
    "left": LEFT,
    "a": LEFT,
}


class KeyController(InputController):
    """
    Allows for human input to control the snake.

    Key presses may arrive at any time between ticks. Only the most recent
    recognised key is kept, and it is handed to the session (and forgotten)
    the next time the session polls.
    """

    def __init__(self, bindings: Optional[Dict[str, Direction]] = None):
        self.bindings = dict(KEY_BINDINGS if bindings is None else bindings)
        self.pending: Optional[Direction] = None

    def handle_key(self, key: str) -> Optional[Direction]:
        """
        Record a key press.

        Returns:
            The Direction the key maps to, or None if the key is not bound
        """
        direction = self.bindings.get(key.strip().lower()) if key else None
        if direction is None:
            logger.debug("Ignoring unbound key %r", key)
            return None

        self.pending = direction
        return direction

    def update_direction(self) -> Optional[Direction]:
        direction, self.pending = self.pending, None
        return direction
