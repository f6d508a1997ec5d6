"""
Tests for board classification and the score display.
"""

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.food import Food, FoodType, Trap  # noqa: E402
from domain.game_state import GameState  # noqa: E402
from domain.geometry import RIGHT, UP, Coordinate  # noqa: E402
from domain.snake import Snake  # noqa: E402
from services.renderer import (  # noqa: E402
    Cell,
    CellType,
    classify_cells,
    css_classes,
    render_css_rows,
    score_text,
)


def make_state(positions=((2, 10), (1, 10), (0, 10)), food_at=(5, 5), food_type=FoodType.SLUG, trap_at=None):
    return GameState(
        snake=Snake(positions, RIGHT),
        food=Food(Coordinate(*food_at), UP, food_type),
        trap=None if trap_at is None else Trap(Coordinate(*trap_at)),
    )


class TestClassifyCells:
    """Tests for classify_cells()."""

    def test_grid_shape(self):
        cells = classify_cells(make_state())
        assert len(cells) == 21
        assert all(len(row) == 21 for row in cells)

    def test_each_category_is_placed(self):
        cells = classify_cells(make_state(food_type=FoodType.FROG, trap_at=(8, 3)))

        assert cells[10][2] == Cell(CellType.SNAKE_HEAD)
        assert cells[10][1] == Cell(CellType.SNAKE_TAIL)
        assert cells[10][0] == Cell(CellType.SNAKE_TAIL)
        assert cells[5][5] == Cell(CellType.FOOD, FoodType.FROG)
        assert cells[3][8] == Cell(CellType.TRAP)
        assert cells[0][0] == Cell(CellType.EMPTY)

    def test_only_occupied_cells_are_marked(self):
        cells = classify_cells(make_state(trap_at=(8, 3)))
        occupied = [cell for row in cells for cell in row if cell.type != CellType.EMPTY]
        assert len(occupied) == 5

    def test_food_drawn_over_trap(self):
        cells = classify_cells(make_state(food_at=(8, 3), trap_at=(8, 3)))
        assert cells[3][8].type == CellType.FOOD

    def test_head_drawn_over_food_and_trap(self):
        cells = classify_cells(make_state(food_at=(2, 10), trap_at=(2, 10)))
        assert cells[10][2].type == CellType.SNAKE_HEAD

    def test_tail_drawn_over_head_on_overlap(self):
        cells = classify_cells(make_state(positions=((1, 1), (1, 2), (1, 1))))
        assert cells[1][1].type == CellType.SNAKE_TAIL


class TestCssClasses:
    """Tests for the browser class names."""

    def test_class_names(self):
        assert css_classes(Cell(CellType.EMPTY)) == "cell"
        assert css_classes(Cell(CellType.TRAP)) == "cell trap"
        assert css_classes(Cell(CellType.FOOD, FoodType.SLUG)) == "cell food slug"
        assert css_classes(Cell(CellType.FOOD, FoodType.RAT)) == "cell food rat"
        assert css_classes(Cell(CellType.FOOD, FoodType.FROG)) == "cell food frog"
        assert css_classes(Cell(CellType.SNAKE_HEAD)) == "cell snake"
        assert css_classes(Cell(CellType.SNAKE_TAIL)) == "cell tail"

    def test_render_css_rows(self):
        rows = render_css_rows(make_state())
        assert rows[10][2] == "cell snake"
        assert rows[5][5] == "cell food slug"


class TestScoreText:
    """Tests for the score display."""

    def test_score_text(self):
        assert score_text(make_state()) == "0"
        longer = make_state(positions=[(i, 0) for i in range(5, -1, -1)])
        assert score_text(longer) == "3"
