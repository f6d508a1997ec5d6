"""
Player input: turn key names and button commands into snake directions.

Unknown input is dropped without complaint so stray key presses never
disturb the game. No check stops the snake reversing into itself; doing
that simply ends the game on a later tick.
"""

import logging
from typing import Any, Dict, Optional

from . import constants
from .geometry import DOWN, LEFT, RIGHT, UP, Coordinate
from .snake import Snake

logger = logging.getLogger(__name__)

DIRECTION_KEY_MAP: Dict[str, Coordinate] = {
    "ARROWUP": UP,
    "ARROWRIGHT": RIGHT,
    "ARROWDOWN": DOWN,
    "ARROWLEFT": LEFT,
    "W": UP,
    "D": RIGHT,
    "S": DOWN,
    "A": LEFT,
}

DIRECTION_MAP: Dict[str, Coordinate] = {
    constants.UP: UP,
    constants.RIGHT: RIGHT,
    constants.DOWN: DOWN,
    constants.LEFT: LEFT,
}


def resolve_direction(token: Any) -> Optional[Coordinate]:
    """Look up a key name or move name, ignoring case. None if unknown."""
    if not isinstance(token, str):
        return None
    name = token.strip().upper()
    return DIRECTION_KEY_MAP.get(name) or DIRECTION_MAP.get(name)


def request_direction(snake: Snake, token: Any) -> bool:
    """
    Point the live snake in the requested direction.

    The change is picked up by the next tick. Returns False (and changes
    nothing) when the token is not recognised.
    """
    direction = resolve_direction(token)
    if direction is None:
        logger.debug(f"Ignoring unrecognised direction input: {token!r}")
        return False
    snake.direction = direction
    return True


def handle_key_press(snake: Snake, key: Any) -> bool:
    """Keyboard entry point: arrow keys and W/A/S/D."""
    return request_direction(snake, key)


def set_new_direction(snake: Snake, move: Any) -> bool:
    """On-screen button entry point: one of the VALID_MOVES names."""
    return request_direction(snake, move)
