"""
Runtime settings read from the environment (and an optional .env file).

SNAKE_GAME_SIZE         tiles per side (default 20)
SNAKE_FPS               ticks per second (default 10)
SNAKE_CANVAS_SIZE       window size in pixels (default 600)
SNAKE_FOOD_RETRY_LIMIT  random draws before food placement enumerates (default 100)
SNAKE_LOG_LEVEL         logging level name (default INFO)
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from domain.constants import GAME_SIZE, FPS, CANVAS_SIZE, FOOD_RETRY_LIMIT

load_dotenv()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _sanitize_env_value(value: Optional[str]) -> Optional[str]:
    """
    Clean up env-provided strings that may include surrounding quotes or whitespace.

    Some shells/export flows set values like SNAKE_LOG_LEVEL="DEBUG".
    """
    if value is None:
        return None
    cleaned = value.strip()
    if len(cleaned) >= 2 and (
        (cleaned[0] == '"' and cleaned[-1] == '"') or (cleaned[0] == "'" and cleaned[-1] == "'")
    ):
        cleaned = cleaned[1:-1].strip()
    return cleaned


def _env_int(name: str, default: int, minimum: int = 1) -> int:
    raw = _sanitize_env_value(os.getenv(name))
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < minimum:
        raise ValueError(f"{name} must be at least {minimum}, got {value}")
    return value


def _env_log_level(name: str, default: str = "INFO") -> str:
    level = (_sanitize_env_value(os.getenv(name)) or default).upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"{name} must be one of {', '.join(LOG_LEVELS)}, got {level!r}")
    return level


@dataclass(frozen=True)
class Settings:
    game_size: int = GAME_SIZE
    fps: int = FPS
    canvas_size: int = CANVAS_SIZE
    food_retry_limit: int = FOOD_RETRY_LIMIT
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Build Settings from SNAKE_* environment variables."""
    return Settings(
        game_size=_env_int("SNAKE_GAME_SIZE", GAME_SIZE),
        fps=_env_int("SNAKE_FPS", FPS),
        canvas_size=_env_int("SNAKE_CANVAS_SIZE", CANVAS_SIZE),
        food_retry_limit=_env_int("SNAKE_FOOD_RETRY_LIMIT", FOOD_RETRY_LIMIT, minimum=0),
        log_level=_env_log_level("SNAKE_LOG_LEVEL"),
    )
