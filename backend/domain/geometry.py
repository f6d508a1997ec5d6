"""
Coordinates, directions and wraparound arithmetic on the square board.
"""

from typing import NamedTuple

from .constants import BOARD_SIZE


class Coordinate(NamedTuple):
    x: int
    y: int


UP = Coordinate(0, -1)
RIGHT = Coordinate(1, 0)
DOWN = Coordinate(0, 1)
LEFT = Coordinate(-1, 0)
DIRECTIONS = (UP, RIGHT, DOWN, LEFT)


def wrap(coordinate: Coordinate, board_size: int = BOARD_SIZE) -> Coordinate:
    """Fold a coordinate back onto the board so the edges join up."""
    return Coordinate(
        (coordinate.x + board_size) % board_size,
        (coordinate.y + board_size) % board_size,
    )


def translate(
    coordinate: Coordinate,
    direction: Coordinate,
    multiplier: int = 1,
    board_size: int = BOARD_SIZE
) -> Coordinate:
    """
    Move a coordinate by direction * multiplier, wrapping around the edges.

    Used for both the snake head and food that wanders on its own.
    """
    moved = Coordinate(
        coordinate.x + direction.x * multiplier,
        coordinate.y + direction.y * multiplier,
    )
    return wrap(moved, board_size)


def coordinates_equal(a: Coordinate, b: Coordinate) -> bool:
    return a[0] == b[0] and a[1] == b[1]
