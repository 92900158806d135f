"""
Exceptions raised by the game engine.

All of them are terminal for the running session: nothing in the engine
retries or recovers from them.
"""


class SnakeGameError(Exception):
    """Base class for every error raised by the arena, snake and session."""


class OutOfBoundsError(SnakeGameError, IndexError):
    """A tile was read or written outside the arena."""

    def __init__(self, x: int, y: int, size: int):
        super().__init__(f"Tile ({x}, {y}) is outside a {size}x{size} arena")
        self.x = x
        self.y = y
        self.size = size


class GridFullError(SnakeGameError):
    """There is no empty tile left to put food on."""


class InvalidStateError(SnakeGameError, RuntimeError):
    """The session was driven after it had already ended."""
