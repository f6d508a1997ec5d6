"""
Food and trap entities.

Food wanders around the board on its own: each tick it has a chance to step
along the direction it was spawned with. Frogs leap two cells at a time.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, NamedTuple

from .constants import BOARD_SIZE
from .geometry import Coordinate, translate


class FoodType(IntEnum):
    """Ordered by value: later types unlock at higher scores."""
    SLUG = 0
    RAT = 1
    FROG = 2


class FoodMovement(NamedTuple):
    probability: float
    steps: int


FOOD_MOVEMENT: Dict[FoodType, FoodMovement] = {
    FoodType.SLUG: FoodMovement(probability=0.02, steps=1),
    FoodType.RAT: FoodMovement(probability=0.20, steps=1),
    FoodType.FROG: FoodMovement(probability=0.06, steps=2),
}


@dataclass(frozen=True)
class Food:
    position: Coordinate
    direction: Coordinate
    type: FoodType


@dataclass(frozen=True)
class Trap:
    position: Coordinate


def move_food(
    food: Food,
    rng,
    movement: Dict[FoodType, FoodMovement] = FOOD_MOVEMENT,
    board_size: int = BOARD_SIZE
) -> Food:
    """
    Possibly move the food one step (or leap) along its fixed direction.

    Draws exactly one number from rng. Returns the same Food when it stays put.
    """
    rule = movement[food.type]
    if rng.random() < rule.probability:
        new_position = translate(food.position, food.direction, rule.steps, board_size)
        return Food(position=new_position, direction=food.direction, type=food.type)
    return food
