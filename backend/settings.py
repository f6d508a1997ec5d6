"""
Runtime settings loaded from the environment (and a .env file if present).

Environment variables:
- SNAKE_TICK_INTERVAL_MS: milliseconds between ticks (default 200)
- SNAKE_SEED: integer seed for reproducible games (default: random)
- SNAKE_TRAP_SPAWN_PROBABILITY: chance of a trap once traps unlock (default 0.7)
- SNAKE_TIER_SCORE_STEP: points per food tier unlock (default 5)
- SNAKE_TRAP_SCORE_THRESHOLD: score traps unlock above (default 7)
- SNAKE_INITIAL_LAYOUT: starting snake placement, head_right or head_left (default head_right)
- SNAKE_REPLAY_DIR: where replays are written (default completed_games)
- CORS_ALLOWED_ORIGINS: comma-separated origins for the browser API
"""

import os
import random
from typing import List, Optional

from dotenv import load_dotenv

from domain.config import GameConfig
from domain.constants import (
    TICK_INTERVAL_MS,
    TIER_SCORE_STEP,
    TRAP_SCORE_THRESHOLD,
    TRAP_SPAWN_PROBABILITY,
)

load_dotenv()

DEFAULT_REPLAY_DIR = "completed_games"
DEFAULT_ALLOWED_ORIGINS = [
    "http://localhost:5000",
    "http://127.0.0.1:5000",
]


def _get_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def _get_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")


def get_tick_interval_ms() -> int:
    interval = _get_int("SNAKE_TICK_INTERVAL_MS", TICK_INTERVAL_MS)
    if interval <= 0:
        raise ValueError("SNAKE_TICK_INTERVAL_MS must be positive")
    return interval


def get_seed() -> Optional[int]:
    return _get_int("SNAKE_SEED", None)


def get_replay_dir() -> str:
    return os.getenv("SNAKE_REPLAY_DIR", DEFAULT_REPLAY_DIR)


def get_allowed_origins() -> List[str]:
    allowed_origins_env = os.getenv("CORS_ALLOWED_ORIGINS")
    if allowed_origins_env:
        return [o.strip() for o in allowed_origins_env.split(",") if o.strip()]
    return list(DEFAULT_ALLOWED_ORIGINS)


def load_game_config() -> GameConfig:
    """
    Build the GameConfig from environment overrides.

    Raises:
        ValueError: if a variable is set to something that isn't a valid number
            or a known layout
    """
    return GameConfig(
        tier_score_step=_get_int("SNAKE_TIER_SCORE_STEP", TIER_SCORE_STEP),
        trap_score_threshold=_get_int("SNAKE_TRAP_SCORE_THRESHOLD", TRAP_SCORE_THRESHOLD),
        trap_spawn_probability=_get_float("SNAKE_TRAP_SPAWN_PROBABILITY", TRAP_SPAWN_PROBABILITY),
        initial_layout=os.getenv("SNAKE_INITIAL_LAYOUT", "head_right"),
    )


def make_rng(seed: Optional[int] = None) -> random.Random:
    """A fresh random source, seeded from SNAKE_SEED unless a seed is given."""
    if seed is None:
        seed = get_seed()
    return random.Random(seed)
