"""
GameState entity - a snapshot of the game at a point in time.
"""

from typing import List, Tuple

from .constants import Direction


class GameState:
    """
    A snapshot of the session after a specific tick.

    Attributes:
        tick_count: how many ticks have completed
        snake_positions: list of (x, y), head first
        direction: the snake's facing Direction
        score: points collected so far
        size: board dimension (the board is size x size)
        food: list of (x, y) positions of all food on the board
        game_over: whether the session has ended
    """

    def __init__(
        self,
        tick_count: int,
        snake_positions: List[Tuple[int, int]],
        direction: Direction,
        score: int,
        size: int,
        food: List[Tuple[int, int]],
        game_over: bool
    ):
        self.tick_count = tick_count
        self.snake_positions = snake_positions
        self.direction = direction
        self.score = score
        self.size = size
        self.food = food
        self.game_over = game_over

    @property
    def head(self) -> Tuple[int, int]:
        return self.snake_positions[0]

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        S = snake body
        H = snake head
        Row 0 is printed first, matching screen coordinates.
        """
        board = [['.' for _ in range(self.size)] for _ in range(self.size)]

        for fx, fy in self.food:
            board[fy][fx] = 'F'

        for pos_idx, (x, y) in enumerate(self.snake_positions):
            board[y][x] = 'H' if pos_idx == 0 else 'S'

        result = [f"{y:2d} {' '.join(board[y])}" for y in range(self.size)]
        result.append("   " + " ".join(str(x % 10) for x in range(self.size)))

        return "\n".join(result)

    def __repr__(self):
        return (
            f"<GameState tick={self.tick_count}, score={self.score}, "
            f"length={len(self.snake_positions)}, food={self.food}, game_over={self.game_over}>"
        )
