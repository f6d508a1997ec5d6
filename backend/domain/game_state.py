"""
GameState entity - a snapshot of the game at a point in time.
"""

from typing import Any, Dict, Optional

from .constants import BOARD_SIZE, START_SNAKE_SIZE
from .food import Food, FoodType, Trap
from .geometry import Coordinate
from .snake import Snake

FOOD_SYMBOLS = {
    FoodType.SLUG: 's',
    FoodType.RAT: 'r',
    FoodType.FROG: 'f',
}


class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        snake: the Snake (head first)
        food: the single Food item on the board
        trap: the Trap, or None while no trap is out
        game_over: True once the snake hit itself or the trap
        game_running: True while ticks still advance the game
        start_snake_size: length the snake started with; score counts from here
    """

    def __init__(
        self,
        snake: Snake,
        food: Food,
        trap: Optional[Trap] = None,
        game_over: bool = False,
        game_running: bool = True,
        start_snake_size: int = START_SNAKE_SIZE
    ):
        self.snake = snake
        self.food = food
        self.trap = trap
        self.game_over = game_over
        self.game_running = game_running
        self.start_snake_size = start_snake_size

    @property
    def score(self) -> int:
        return max(0, len(self.snake) - self.start_snake_size)

    def print_board(self, board_size: int = BOARD_SIZE) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        # = trap
        s, r, f = slug, rat, frog
        H = snake head
        T = snake tail
        Row 0 is printed first, matching UP = (0, -1).
        """
        board = [['.' for _ in range(board_size)] for _ in range(board_size)]

        # Later marks win: trap, food, head, then tail
        if self.trap is not None:
            tx, ty = self.trap.position
            board[ty][tx] = '#'

        fx, fy = self.food.position
        board[fy][fx] = FOOD_SYMBOLS[self.food.type]

        hx, hy = self.snake.head
        board[hy][hx] = 'H'
        for x, y in self.snake.tail:
            board[y][x] = 'T'

        result = [f"{y:2d} {' '.join(board[y])}" for y in range(board_size)]
        result.append("   " + " ".join(str(i % 10) for i in range(board_size)))
        return "\n".join(result)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the state to a JSON-friendly dictionary."""
        return {
            "snake": {
                "positions": [list(p) for p in self.snake.positions],
                "direction": list(self.snake.direction),
            },
            "food": {
                "position": list(self.food.position),
                "direction": list(self.food.direction),
                "type": self.food.type.name.lower(),
            },
            "trap": None if self.trap is None else {"position": list(self.trap.position)},
            "score": self.score,
            "game_over": self.game_over,
            "game_running": self.game_running,
            "start_snake_size": self.start_snake_size,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameState":
        """
        Rebuild a GameState from to_dict() output (e.g. a replay frame).

        Raises:
            ValueError: if the dictionary is missing fields or holds bad values
        """
        try:
            snake_data = data["snake"]
            food_data = data["food"]
            snake = Snake(
                [Coordinate(int(x), int(y)) for x, y in snake_data["positions"]],
                Coordinate(*snake_data["direction"]),
            )
            food = Food(
                position=Coordinate(*food_data["position"]),
                direction=Coordinate(*food_data["direction"]),
                type=FoodType[str(food_data["type"]).upper()],
            )
            trap_data = data.get("trap")
            trap = None if trap_data is None else Trap(position=Coordinate(*trap_data["position"]))
            start_snake_size = int(data.get("start_snake_size", START_SNAKE_SIZE))
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Malformed game state: {e!r}") from e

        if len(snake) == 0:
            raise ValueError("Malformed game state: snake has no segments")

        return cls(
            snake=snake,
            food=food,
            trap=trap,
            game_over=bool(data.get("game_over", False)),
            game_running=bool(data.get("game_running", True)),
            start_snake_size=start_snake_size,
        )

    def __repr__(self):
        return (
            f"<GameState score={self.score}, head={self.snake.head}, "
            f"food={self.food.type.name}@{tuple(self.food.position)}, "
            f"trap={None if self.trap is None else tuple(self.trap.position)}, "
            f"game_over={self.game_over}>"
        )
