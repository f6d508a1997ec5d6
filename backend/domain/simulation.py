"""
Tick-based game simulation.

advance() is the whole game rule set as a pure function: it takes a
GameState and a source of randomness and returns the next GameState without
touching the old one. Simulation wraps it with the single live state, the
rng, and the listeners the front ends hook into.
"""

import logging
import random
from typing import Callable, List, NamedTuple, Optional

from .config import DEFAULT_CONFIG, GameConfig
from .constants import BOARD_SIZE
from .food import FoodType, move_food
from .game_state import GameState
from .generators import generate_food, generate_trap
from .geometry import LEFT, RIGHT, Coordinate, coordinates_equal, translate
from .snake import Snake

logger = logging.getLogger(__name__)


class TickResult(NamedTuple):
    state: GameState
    food_eaten: bool
    terminal: bool


def max_food_type_for_score(score: int, step: int = DEFAULT_CONFIG.tier_score_step) -> FoodType:
    """Unlock one food tier every `step` points, capped at FROG."""
    return FoodType(min(score // step, int(FoodType.FROG)))


def new_game_state(
    rng,
    config: GameConfig = DEFAULT_CONFIG,
    board_size: int = BOARD_SIZE
) -> GameState:
    """
    Build the starting layout: a horizontal snake in the middle row.

    "head_right" puts the head at x = start_snake_size - 1 heading RIGHT;
    "head_left" mirrors it against the right wall heading LEFT.
    """
    y = board_size // 2
    size = config.start_snake_size
    if config.initial_layout == "head_left":
        positions = [Coordinate(board_size - size + i, y) for i in range(size)]
        direction = LEFT
    else:
        positions = [Coordinate(size - i - 1, y) for i in range(size)]
        direction = RIGHT
    return GameState(
        snake=Snake(positions, direction),
        food=generate_food(rng, FoodType.SLUG, board_size),
        trap=None,
        game_over=False,
        game_running=True,
        start_snake_size=size,
    )


def check_collision(snake: Snake, trap) -> bool:
    """True when the head sits on the trap or on any other segment."""
    head = snake.head
    if trap is not None and coordinates_equal(head, trap.position):
        return True
    return any(coordinates_equal(segment, head) for segment in snake.tail)


def advance(
    state: GameState,
    rng,
    config: GameConfig = DEFAULT_CONFIG,
    board_size: int = BOARD_SIZE
) -> TickResult:
    """
    Run one tick:
      1) If the game is already over, return the state untouched
      2) Move the head one cell along the snake's direction and drop the tail
      3) Check the moved snake against itself and the current trap
      4) If the head landed on food: grow, respawn food and re-roll the trap
      5) Otherwise let the food wander; the trap stays where it is
    The tick is committed even when it ends the game.
    """
    if state.game_over:
        return TickResult(state, food_eaten=False, terminal=True)

    old_positions = state.snake.positions
    head = translate(old_positions[0], state.snake.direction, board_size=board_size)
    positions = [head, *old_positions[:-1]]

    game_over = check_collision(Snake(positions, state.snake.direction), state.trap)

    food = state.food
    trap = state.trap
    food_eaten = coordinates_equal(head, state.food.position)
    if food_eaten:
        # The new segment sits where the old tail just left
        positions.append(old_positions[len(positions) - 1])

        score = max(0, len(positions) - state.start_snake_size)
        max_type = max_food_type_for_score(score, config.tier_score_step)
        food = generate_food(rng, max_type, board_size)
        trap = generate_trap(
            rng,
            score > config.trap_score_threshold,
            config.trap_spawn_probability,
            board_size,
        )
    else:
        food = move_food(state.food, rng, config.food_movement, board_size)

    new_state = GameState(
        snake=Snake(positions, state.snake.direction),
        food=food,
        trap=trap,
        game_over=game_over,
        game_running=not game_over,
        start_snake_size=state.start_snake_size,
    )
    return TickResult(new_state, food_eaten=food_eaten, terminal=False)


class Simulation:
    """
    Owns the authoritative GameState and advances it one tick at a time.

    Listeners:
        food_listeners: called with the new state whenever food is eaten
        game_over_listeners: called once with the final state, on the first
            tick attempted after the game ended
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        config: GameConfig = DEFAULT_CONFIG,
        board_size: int = BOARD_SIZE
    ):
        self.rng = rng if rng is not None else random.Random()
        self.config = config
        self.board_size = board_size
        self.food_listeners: List[Callable[[GameState], None]] = []
        self.game_over_listeners: List[Callable[[GameState], None]] = []
        self.tick_count = 0
        self._game_over_announced = False
        self.state = new_game_state(self.rng, self.config, self.board_size)

    def reset(self) -> GameState:
        """Throw away the current game and start a fresh one."""
        self.state = new_game_state(self.rng, self.config, self.board_size)
        self.tick_count = 0
        self._game_over_announced = False
        logger.info("New game started")
        return self.state

    def tick(self) -> TickResult:
        result = advance(self.state, self.rng, self.config, self.board_size)

        if result.terminal:
            if not self._game_over_announced:
                self._game_over_announced = True
                logger.info(f"Game over after {self.tick_count} ticks with score {self.state.score}")
                for listener in self.game_over_listeners:
                    listener(self.state)
            return result

        self.state = result.state
        self.tick_count += 1

        if result.food_eaten:
            logger.debug(f"Food eaten at tick {self.tick_count}, score {self.state.score}")
            for listener in self.food_listeners:
                listener(self.state)

        return result
