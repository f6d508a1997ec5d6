"""
Board classification for front ends.

Turns a GameState into a grid of Cells that a painter (browser page, PIL
frame renderer, terminal) can draw without knowing any game rules.
"""

from enum import Enum
from typing import List, NamedTuple, Optional

from domain.constants import BOARD_SIZE
from domain.food import FoodType
from domain.game_state import GameState


class CellType(Enum):
    EMPTY = "empty"
    SNAKE_HEAD = "snake_head"
    SNAKE_TAIL = "snake_tail"
    FOOD = "food"
    TRAP = "trap"


class Cell(NamedTuple):
    type: CellType
    food_type: Optional[FoodType] = None


EMPTY_CELL = Cell(CellType.EMPTY)

FOOD_CLASSES = {
    FoodType.SLUG: "slug",
    FoodType.RAT: "rat",
    FoodType.FROG: "frog",
}


def classify_cells(state: GameState, board_size: int = BOARD_SIZE) -> List[List[Cell]]:
    """
    Return rows of Cells indexed [y][x].

    Paint order is trap, food, head, then tail segments, so later ones win
    when two things share a cell after a tick.
    """
    cells = [[EMPTY_CELL for _ in range(board_size)] for _ in range(board_size)]

    if state.trap is not None:
        tx, ty = state.trap.position
        cells[ty][tx] = Cell(CellType.TRAP)

    fx, fy = state.food.position
    cells[fy][fx] = Cell(CellType.FOOD, state.food.type)

    hx, hy = state.snake.head
    cells[hy][hx] = Cell(CellType.SNAKE_HEAD)

    for x, y in state.snake.tail:
        cells[y][x] = Cell(CellType.SNAKE_TAIL)

    return cells


def css_classes(cell: Cell) -> str:
    """CSS class string for one board cell, as used by the browser page."""
    classes = ["cell"]
    if cell.type == CellType.TRAP:
        classes.append("trap")
    elif cell.type == CellType.FOOD:
        classes.append("food")
        classes.append(FOOD_CLASSES[cell.food_type])
    elif cell.type == CellType.SNAKE_HEAD:
        classes.append("snake")
    elif cell.type == CellType.SNAKE_TAIL:
        classes.append("tail")
    return " ".join(classes)


def render_css_rows(state: GameState, board_size: int = BOARD_SIZE) -> List[List[str]]:
    return [[css_classes(cell) for cell in row] for row in classify_cells(state, board_size)]


def score_text(state: GameState) -> str:
    """Text for the score display; refresh it when food is eaten."""
    return str(state.score)
