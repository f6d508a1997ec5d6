"""
Tests for main.py - the game loop driver.

The sleep function is replaced so whole games run instantly.
"""

import json
import os
import random
import sys
from unittest.mock import Mock

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import main  # noqa: E402
from main import GameLoop, run_game  # noqa: E402
from domain.config import GameConfig  # noqa: E402
from domain.food import Food, FoodMovement, FoodType, Trap  # noqa: E402
from domain.game_state import GameState  # noqa: E402
from domain.geometry import LEFT, RIGHT, UP, Coordinate  # noqa: E402
from domain.simulation import Simulation  # noqa: E402
from domain.snake import Snake  # noqa: E402


def doomed_simulation(ticks_to_live=2):
    """A straight snake heading RIGHT into a trap a few cells ahead."""
    simulation = Simulation(rng=random.Random(0))
    simulation.state = GameState(
        snake=Snake([(2, 10), (1, 10), (0, 10)], RIGHT),
        food=Food(Coordinate(15, 15), UP, FoodType.SLUG),
        trap=Trap(Coordinate(2 + ticks_to_live, 10)),
    )
    # Keep the food parked
    simulation.config = GameConfig(food_movement={
        food_type: FoodMovement(probability=0.0, steps=1) for food_type in FoodType
    })
    return simulation


class TestGameLoop:
    """Tests for the GameLoop class."""

    def test_runs_until_game_over(self):
        sleep = Mock()
        loop = GameLoop(doomed_simulation(ticks_to_live=2), interval_ms=200, sleep=sleep)

        final = loop.run()

        assert final.game_over is True
        assert loop.finished is True
        assert loop.simulation.tick_count == 2
        # Sleeps after each live tick; the terminal tick ends the loop
        assert sleep.call_count == 2
        sleep.assert_called_with(0.2)

    def test_history_records_every_tick(self):
        loop = GameLoop(doomed_simulation(ticks_to_live=3), sleep=lambda s: None)
        loop.run()

        assert len(loop.history) == 1 + 3
        assert loop.history[0]["snake"]["positions"][0] == [2, 10]
        assert loop.history[-1]["game_over"] is True

    def test_on_frame_called_with_each_new_state(self):
        frames = []
        loop = GameLoop(doomed_simulation(ticks_to_live=2), sleep=lambda s: None, on_frame=frames.append)
        loop.run()

        assert [f.snake.head for f in frames] == [Coordinate(3, 10), Coordinate(4, 10)]

    def test_max_ticks_stops_a_live_game(self):
        simulation = doomed_simulation(ticks_to_live=10)
        loop = GameLoop(simulation, sleep=lambda s: None, max_ticks=4)
        final = loop.run()

        assert final.game_over is False
        assert simulation.tick_count == 4

    def test_player_move_applied_before_tick(self):
        player = Mock()
        player.get_move = Mock(return_value="UP")
        loop = GameLoop(doomed_simulation(ticks_to_live=2), sleep=lambda s: None, player=player, max_ticks=1)

        loop.step()

        assert loop.simulation.state.snake.head == Coordinate(2, 9)
        player.get_move.assert_called_once()

    def test_player_reversing_ends_game(self):
        player = Mock()
        player.get_move = Mock(return_value="LEFT")
        loop = GameLoop(doomed_simulation(ticks_to_live=5), sleep=lambda s: None, player=player)

        final = loop.run()

        assert final.game_over is True
        assert final.snake.direction == LEFT
        assert loop.simulation.tick_count == 1

    def test_save_history_to_json(self, tmp_path):
        loop = GameLoop(doomed_simulation(ticks_to_live=2), sleep=lambda s: None, game_id="abc")
        loop.run()

        path = loop.save_history_to_json(str(tmp_path / "replays"))

        assert path.endswith("snake_game_abc.json")
        with open(path) as f:
            data = json.load(f)
        assert data["metadata"]["game_id"] == "abc"
        assert data["metadata"]["ticks"] == 2
        assert data["metadata"]["game_over"] is True
        assert len(data["frames"]) == 3
        assert GameState.from_dict(data["frames"][-1]).game_over is True


class TestRunGame:
    """Tests for the headless run_game() helper and CLI."""

    def test_run_game_autoplay_finishes(self, capsys):
        loop = run_game(seed=1, max_ticks=300, quiet=True, sleep=lambda s: None)

        assert loop.finished is True
        assert loop.simulation.tick_count <= 300
        out = capsys.readouterr().out
        assert "Game ID:" in out

    def test_run_game_is_reproducible(self):
        first = run_game(seed=9, max_ticks=100, quiet=True, sleep=lambda s: None)
        second = run_game(seed=9, max_ticks=100, quiet=True, sleep=lambda s: None)
        assert first.history == second.history

    def test_run_game_prints_board_when_not_quiet(self, capsys):
        run_game(seed=1, max_ticks=1, sleep=lambda s: None)
        out = capsys.readouterr().out
        assert "H" in out

    def test_main_saves_replay(self, tmp_path, monkeypatch, capsys):
        monkeypatch.setenv("SNAKE_REPLAY_DIR", str(tmp_path))
        monkeypatch.setenv("SNAKE_TICK_INTERVAL_MS", "1")

        main.main(["--seed", "4", "--max-ticks", "5", "--quiet", "--save-replay"])

        files = list(tmp_path.glob("snake_game_*.json"))
        assert len(files) == 1
        out = capsys.readouterr().out
        assert "Game Summary" in out
