"""
Tunable game policies.

These values disagreed between earlier versions of the game, so they live
in one place instead of being spread through the tick logic.
"""

from dataclasses import dataclass, field
from typing import Dict

from .constants import (
    START_SNAKE_SIZE,
    TIER_SCORE_STEP,
    TRAP_SCORE_THRESHOLD,
    TRAP_SPAWN_PROBABILITY,
)
from .food import FOOD_MOVEMENT, FoodMovement, FoodType

INITIAL_LAYOUTS = ("head_right", "head_left")


@dataclass(frozen=True)
class GameConfig:
    """
    Attributes:
        start_snake_size: segments in a fresh snake; score counts from here
        tier_score_step: points needed to unlock each next FoodType
        trap_score_threshold: traps may spawn only when score is above this
        trap_spawn_probability: chance of a trap each time food is eaten
        food_movement: per-type wandering probability and step length
        initial_layout: starting snake placement, "head_right" or "head_left"
    """
    start_snake_size: int = START_SNAKE_SIZE
    tier_score_step: int = TIER_SCORE_STEP
    trap_score_threshold: int = TRAP_SCORE_THRESHOLD
    trap_spawn_probability: float = TRAP_SPAWN_PROBABILITY
    food_movement: Dict[FoodType, FoodMovement] = field(default_factory=lambda: dict(FOOD_MOVEMENT))
    initial_layout: str = "head_right"

    def __post_init__(self):
        if self.start_snake_size < 1:
            raise ValueError("start_snake_size must be at least 1")
        if self.tier_score_step < 1:
            raise ValueError("tier_score_step must be at least 1")
        if not 0.0 <= self.trap_spawn_probability <= 1.0:
            raise ValueError("trap_spawn_probability must be between 0 and 1")
        if self.initial_layout not in INITIAL_LAYOUTS:
            raise ValueError(
                f"initial_layout must be one of {', '.join(INITIAL_LAYOUTS)}, got {self.initial_layout!r}"
            )


DEFAULT_CONFIG = GameConfig()
