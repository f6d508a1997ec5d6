"""
Random generators for positions, directions, food and traps.

Every function takes the source of randomness explicitly. Anything exposing
the random.Random methods random(), randrange() and choice() will do, which
lets tests pass a seeded random.Random or a scripted stand-in.
"""

from typing import Optional

from .constants import BOARD_SIZE, TRAP_SPAWN_PROBABILITY
from .food import Food, FoodType, Trap
from .geometry import Coordinate, DIRECTIONS


def random_position(rng, board_size: int = BOARD_SIZE) -> Coordinate:
    return Coordinate(rng.randrange(board_size), rng.randrange(board_size))


def random_direction(rng) -> Coordinate:
    return rng.choice(DIRECTIONS)


def random_food_type(rng, max_type: FoodType) -> FoodType:
    """
    Pick a food type uniformly from SLUG up to and including max_type.

    Previously unlocked types stay in the pool, so a Frog-tier board can
    still spawn slugs.
    """
    if max_type == FoodType.SLUG:
        return FoodType.SLUG
    return FoodType(rng.randrange(int(max_type) + 1))


def generate_food(rng, max_type: FoodType, board_size: int = BOARD_SIZE) -> Food:
    return Food(
        position=random_position(rng, board_size),
        direction=random_direction(rng),
        type=random_food_type(rng, max_type),
    )


def generate_trap(
    rng,
    can_generate: bool,
    spawn_probability: float = TRAP_SPAWN_PROBABILITY,
    board_size: int = BOARD_SIZE
) -> Optional[Trap]:
    """
    Maybe place a trap on a random cell.

    Nothing is drawn from rng when traps are not yet allowed.
    """
    if not can_generate:
        return None
    if rng.random() < spawn_probability:
        return Trap(position=random_position(rng, board_size))
    return None
