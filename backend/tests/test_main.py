"""
Tests for main.py - the game session and entry point.
"""

import pytest
import random
import sys
import os
from unittest.mock import Mock, patch

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from main import GameSession, main
from domain import (
    TileState,
    GameState,
    UP, DOWN, LEFT, RIGHT,
    VALID_MOVES,
    GridFullError,
    InvalidStateError,
)


class ScriptedController:
    """Hands out a fixed sequence of directions, then None."""

    def __init__(self, directions=()):
        self.directions = list(directions)
        self.polls = 0

    def update_direction(self):
        self.polls += 1
        if self.directions:
            return self.directions.pop(0)
        return None


def move_food(session, x, y):
    """Replace the randomly placed food with food at (x, y)."""
    for fx, fy in session.arena.cells_with(TileState.FOOD):
        session.arena.set_tile(fx, fy, TileState.EMPTY)
    session.arena.set_tile(x, y, TileState.FOOD)


def make_session(size=5, food=(4, 4), directions=(), seed=0, **kwargs):
    session = GameSession(
        ScriptedController(directions),
        size=size,
        rng=random.Random(seed),
        **kwargs
    )
    move_food(session, *food)
    return session


def tiles(session):
    arena = session.arena
    return {(x, y): arena.get_tile(x, y) for x in range(arena.size) for y in range(arena.size)}


class TestGameSessionInit:
    """Tests for GameSession construction."""

    def test_default_session(self):
        """A default session is 20x20 with the snake centred and facing UP."""
        session = GameSession(ScriptedController(), rng=random.Random(1))

        assert session.size == 20
        assert list(session.snake.body) == [(10, 10)]
        assert session.snake.direction is UP
        assert session.score == 0
        assert session.tick_count == 0
        assert session.game_over is False

    def test_one_food_pre_placed(self):
        """Exactly one food tile exists at start, away from the snake."""
        for seed in range(20):
            session = GameSession(ScriptedController(), size=3, rng=random.Random(seed))
            food = session.arena.cells_with(TileState.FOOD)
            assert len(food) == 1
            assert food[0] != session.snake.head
            assert session.arena.cells_with(TileState.SNAKE) == [(1, 1)]

    def test_single_tile_board_is_full(self):
        """A 1x1 board has no room for food."""
        with pytest.raises(GridFullError):
            GameSession(ScriptedController(), size=1)

    def test_tile_listeners_receive_events(self):
        """Tile listeners see the initial paint, the snake and the food."""
        listener = Mock()
        GameSession(ScriptedController(), size=3, rng=random.Random(0), tile_listeners=[listener])

        # 9 empty tiles, 1 snake tile, 1 food tile
        assert listener.call_count == 11
        listener.assert_any_call(1, 1, TileState.SNAKE)

    def test_get_current_state(self):
        """get_current_state() returns a GameState snapshot."""
        session = make_session()
        state = session.get_current_state()

        assert isinstance(state, GameState)
        assert state.size == 5
        assert state.snake_positions == [(2, 2)]
        assert state.food == [(4, 4)]
        assert state.direction is UP
        assert state.game_over is False


class TestTick:
    """Tests for GameSession.tick()."""

    def test_move_up_without_input(self):
        """With no input the snake moves UP and leaves its old tile empty."""
        session = make_session()

        assert session.tick() is True

        assert list(session.snake.body) == [(2, 1)]
        assert session.arena.get_tile(2, 2) is TileState.EMPTY
        assert session.arena.get_tile(2, 1) is TileState.SNAKE
        assert session.tick_count == 1

    def test_direction_change_applies_before_move(self):
        """A pending direction is applied before the head moves."""
        session = make_session(directions=[None, RIGHT])
        session.tick()
        assert session.snake.head == (2, 1)

        session.tick()

        assert session.snake.head == (3, 1)
        assert session.snake.direction is RIGHT

    def test_controller_polled_once_per_tick(self):
        """The controller is asked exactly once per tick."""
        session = make_session()
        session.tick()
        session.tick()
        assert session.controller.polls == 2

    def test_eating_food(self):
        """Food raises the score, grows the snake and respawns elsewhere."""
        session = make_session(food=(2, 1))
        scores = []
        session.score_listeners.append(scores.append)

        session.tick()

        assert session.score == 1
        assert scores == [1]
        assert list(session.snake.body) == [(2, 1), (2, 2)]
        food = session.arena.cells_with(TileState.FOOD)
        assert len(food) == 1
        assert food[0] not in session.snake.body

    def test_wall_collision_ends_game(self):
        """Leaving the board ends the game without touching the board."""
        session = make_session(directions=[LEFT])
        session.tick()
        session.tick()
        assert session.snake.head == (0, 2)
        before = tiles(session)

        assert session.tick() is False

        assert session.game_over is True
        assert list(session.snake.body) == [(0, 2)]
        assert tiles(session) == before

    def test_tick_after_game_over_raises(self):
        """Ticking a finished session raises and changes nothing."""
        session = make_session(directions=[LEFT])
        while not session.game_over:
            session.tick()
        before = tiles(session)
        body = list(session.snake.body)
        ticks = session.tick_count
        polls = session.controller.polls

        with pytest.raises(InvalidStateError, match="tick after game over"):
            session.tick()

        assert tiles(session) == before
        assert list(session.snake.body) == body
        assert session.tick_count == ticks
        assert session.controller.polls == polls

    def test_reversal_kills_longer_snake(self):
        """Reversing a two-tile snake collides with its own neck."""
        session = make_session(food=(2, 1), directions=[None, DOWN])
        session.tick()
        assert len(session.snake) == 2

        session.tick()

        assert session.game_over is True
        assert list(session.snake.body) == [(2, 1), (2, 2)]

    def test_grid_full_propagates(self):
        """Eating the last free tile's food with no room left raises GridFullError."""
        session = make_session(size=2, food=(1, 0), directions=[None])
        # Snake at (1,1) on a 2x2 board; fill (0,0) and (0,1) with snake tiles
        session.arena.set_tile(0, 0, TileState.SNAKE)
        session.arena.set_tile(0, 1, TileState.SNAKE)

        with pytest.raises(GridFullError):
            session.tick()
        assert session.score == 1
        assert session.game_over is True

    def test_grid_full_ends_session(self):
        """After a full board the session refuses further ticks and the score stops."""
        session = make_session(size=2, food=(1, 0))
        session.arena.set_tile(0, 0, TileState.SNAKE)
        session.arena.set_tile(0, 1, TileState.SNAKE)

        with pytest.raises(GridFullError):
            session.tick()

        with pytest.raises(InvalidStateError):
            session.tick()
        assert session.score == 1
        assert session.tick_count == 0


class TestScoring:
    """Tests for add_points() and trigger_game_over()."""

    def test_add_points_notifies_listeners(self):
        """add_points() adds and reports the new score."""
        listener = Mock()
        session = make_session(score_listeners=[listener])

        session.add_points(3)
        session.add_points(2)

        assert session.score == 5
        assert [c.args for c in listener.call_args_list] == [(3,), (5,)]

    def test_add_negative_points_raises(self):
        """Score never decreases."""
        session = make_session()
        with pytest.raises(ValueError):
            session.add_points(-1)
        assert session.score == 0

    def test_trigger_game_over_is_idempotent(self):
        """Calling trigger_game_over() twice keeps the session over."""
        session = make_session()
        session.trigger_game_over()
        session.trigger_game_over()
        assert session.game_over is True


class TestSessionInvariants:
    """Random play keeps the snake and the board consistent."""

    @pytest.mark.parametrize("seed", range(10))
    def test_random_play(self, seed):
        """Length tracks score, the board mirrors the body and the body stays connected."""
        rng = random.Random(seed)
        moves = sorted(VALID_MOVES, key=lambda d: d.name)
        controller = Mock()
        controller.update_direction.side_effect = lambda: rng.choice(moves + [None, None])
        session = GameSession(controller, size=8, rng=random.Random(seed))

        lengths = [len(session.snake)]
        while not session.game_over and session.tick_count < 500:
            session.tick()
            body = list(session.snake.body)

            assert len(body) == 1 + session.score
            assert len(set(body)) == len(body)
            assert sorted(session.arena.cells_with(TileState.SNAKE)) == sorted(body)
            assert len(session.arena.cells_with(TileState.FOOD)) == 1
            for (ax, ay), (bx, by) in zip(body, body[1:]):
                assert abs(ax - bx) + abs(ay - by) == 1
            lengths.append(len(body))

        assert lengths == sorted(lengths)


class TestMain:
    """Tests for the command line entry point."""

    @patch('services.pygame_window.PygameWindow')
    def test_main_runs_window(self, mock_window):
        """main() builds a session and runs it in a window."""
        assert main(["--seed", "7", "--log-level", "WARNING"]) == 0

        mock_window.return_value.run.assert_called_once_with()
        session = mock_window.call_args.args[0]
        assert isinstance(session, GameSession)
        assert session.size == 20

    @patch('services.pygame_window.PygameWindow')
    def test_main_reports_fatal_errors(self, mock_window):
        """main() exits non-zero when the session aborts."""
        mock_window.return_value.run.side_effect = GridFullError("full")
        assert main(["--log-level", "ERROR"]) == 1

    @patch('services.pygame_window.PygameWindow')
    def test_main_accepts_lowercase_log_level(self, mock_window):
        """--log-level is case-insensitive."""
        assert main(["--log-level", "debug"]) == 0

    @patch('services.pygame_window.PygameWindow')
    def test_main_rejects_unknown_log_level(self, mock_window):
        """An unknown --log-level is a usage error, not a traceback."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--log-level", "LOUD"])

        assert exc_info.value.code == 2
        mock_window.assert_not_called()

    @patch('services.pygame_window.PygameWindow')
    def test_main_rejects_bad_environment(self, mock_window, monkeypatch):
        """An invalid SNAKE_LOG_LEVEL is reported as a usage error."""
        monkeypatch.setenv("SNAKE_LOG_LEVEL", "LOUD")

        with pytest.raises(SystemExit) as exc_info:
            main([])

        assert exc_info.value.code == 2
        mock_window.assert_not_called()
