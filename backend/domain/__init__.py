"""
Domain entities and rules for the Trap Snake game engine.

This module contains the game simulation, which is independent of how the
board is drawn or how input arrives.
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES,
    BOARD_SIZE, START_SNAKE_SIZE, TICK_INTERVAL_MS,
)
from .geometry import Coordinate, DIRECTIONS, wrap, translate, coordinates_equal
from .food import Food, FoodType, Trap, move_food
from .snake import Snake
from .game_state import GameState
from .config import GameConfig, DEFAULT_CONFIG
from .simulation import Simulation, TickResult, advance, new_game_state, max_food_type_for_score
from .commands import request_direction, handle_key_press, set_new_direction

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES',
    'BOARD_SIZE', 'START_SNAKE_SIZE', 'TICK_INTERVAL_MS',
    'Coordinate', 'DIRECTIONS', 'wrap', 'translate', 'coordinates_equal',
    'Food', 'FoodType', 'Trap', 'move_food',
    'Snake',
    'GameState',
    'GameConfig', 'DEFAULT_CONFIG',
    'Simulation', 'TickResult', 'advance', 'new_game_state', 'max_food_type_for_score',
    'request_direction', 'handle_key_press', 'set_new_direction',
]
