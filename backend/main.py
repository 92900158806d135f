import argparse
import logging
import random
import sys
from typing import Callable, Iterable, List, Optional

from config import LOG_LEVELS, load_settings
from domain.arena import Arena, TileListener
from domain.constants import GAME_SIZE, FOOD_RETRY_LIMIT, TileState
from domain.errors import InvalidStateError, SnakeGameError
from domain.game_state import GameState
from domain.snake import Snake
from players.base import InputController
from players.key_controller import KeyController

logger = logging.getLogger(__name__)

ScoreListener = Callable[[int], None]


class GameSession:
    """
    Manages:
      - Arena (size x size tiles)
      - Snake
      - Input controller
      - Score
      - Game over flag
    """
    def __init__(
        self,
        controller: InputController,
        size: int = GAME_SIZE,
        rng: Optional[random.Random] = None,
        food_retry_limit: int = FOOD_RETRY_LIMIT,
        tile_listeners: Iterable[TileListener] = (),
        score_listeners: Iterable[ScoreListener] = ()
    ):
        self.controller = controller
        self.score_listeners: List[ScoreListener] = list(score_listeners)

        self.game_over = False
        self.score = 0
        self.tick_count = 0

        self.arena = Arena(
            size,
            rng=rng,
            food_retry_limit=food_retry_limit,
            listeners=list(tile_listeners)
        )
        self.snake = Snake(self.arena, size // 2, size // 2)

        # Snake goes down first so the starting food can't land under its head
        self.arena.place_food_random()

    @property
    def size(self) -> int:
        return self.arena.size

    def tick(self) -> bool:
        """
        Execute one tick:
          1) Refuse to run if the game is already over
          2) Apply the controller's pending direction, if any
          3) Move the snake (which may end the game or eat food)

        Returns:
            True while the game is still running
        """
        if self.game_over:
            raise InvalidStateError("tick after game over")

        direction = self.controller.update_direction()
        if direction is not None:
            self.snake.set_direction(direction)

        try:
            self.snake.update(self.arena, self.trigger_game_over, self.add_food)
        except SnakeGameError:
            # Core failures end the session; later ticks raise InvalidStateError
            self.game_over = True
            raise
        self.tick_count += 1

        return not self.game_over

    def trigger_game_over(self):
        if self.game_over:
            return
        self.game_over = True
        logger.warning(
            "Game Over! Final score %d, snake length %d",
            self.score, len(self.snake)
        )

    def add_food(self):
        self.add_points(1)
        self.arena.place_food_random()

    def add_points(self, number: int):
        if number < 0:
            raise ValueError(f"Points must be non-negative, got {number}")
        self.score += number
        logger.info("Your new points is %d", self.score)

        for listener in self.score_listeners:
            listener(self.score)

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            tick_count=self.tick_count,
            snake_positions=list(self.snake.body),
            direction=self.snake.direction,
            score=self.score,
            size=self.size,
            food=self.arena.cells_with(TileState.FOOD),
            game_over=self.game_over
        )

    def print_board(self):
        """
        Logs a visual representation of the current board state.
        """
        logger.info("\n%s\n", self.get_current_state().print_board())

    def __repr__(self):
        return (
            f"<GameSession size={self.size}, tick={self.tick_count}, "
            f"score={self.score}, game_over={self.game_over}>"
        )


# -------------------------------
# Main Entry Point
# -------------------------------
def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Play Snake in a pygame window.")
    parser.add_argument("--seed", type=int, required=False, default=None,
                        help="Seed for food placement")
    parser.add_argument("--log-level", type=str.upper, required=False, default=None,
                        choices=LOG_LEVELS,
                        help="Logging level (defaults to SNAKE_LOG_LEVEL or INFO)")
    args = parser.parse_args(argv)

    try:
        settings = load_settings()
    except ValueError as e:
        parser.error(str(e))

    logging.basicConfig(
        level=args.log_level or settings.log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    # Imported here so the engine can be used without a display
    from services.pygame_window import PygameWindow
    from services.tile_renderer import TileRenderer

    renderer = TileRenderer(settings.game_size, settings.canvas_size)
    controller = KeyController()
    session = GameSession(
        controller,
        size=settings.game_size,
        rng=random.Random(args.seed),
        food_retry_limit=settings.food_retry_limit,
        tile_listeners=[renderer]
    )
    window = PygameWindow(session, controller, renderer, fps=settings.fps)

    try:
        window.run()
    except SnakeGameError as e:
        logger.error("Session aborted: %s", e)
        return 1

    session.print_board()
    return 0


if __name__ == "__main__":
    sys.exit(main())
