"""
Snake entity for the game engine.
"""

from typing import Iterable, Tuple

from .geometry import Coordinate


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: tuple of Coordinates from head at index 0 to tail at the end
        direction: unit Coordinate the head moves along on the next tick

    The body is never changed in place; each tick builds a new Snake. Only
    the direction is written directly, by player input between ticks.
    """

    def __init__(self, positions: Iterable[Coordinate], direction: Coordinate):
        self.positions: Tuple[Coordinate, ...] = tuple(Coordinate(*p) for p in positions)
        self.direction = Coordinate(*direction)

    @property
    def head(self) -> Coordinate:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> Tuple[Coordinate, ...]:
        """Every segment except the head."""
        return self.positions[1:]

    def __len__(self) -> int:
        return len(self.positions)

    def __repr__(self):
        return f"<Snake head={self.head}, length={len(self)}, direction={self.direction}>"
