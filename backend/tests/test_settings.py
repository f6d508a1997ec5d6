"""
Tests for environment-driven settings.
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import settings  # noqa: E402
from domain.config import GameConfig  # noqa: E402


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in [
        "SNAKE_TICK_INTERVAL_MS",
        "SNAKE_SEED",
        "SNAKE_TRAP_SPAWN_PROBABILITY",
        "SNAKE_TIER_SCORE_STEP",
        "SNAKE_TRAP_SCORE_THRESHOLD",
        "SNAKE_INITIAL_LAYOUT",
        "SNAKE_REPLAY_DIR",
        "CORS_ALLOWED_ORIGINS",
    ]:
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    """Tests for the settings module."""

    def test_defaults(self):
        assert settings.get_tick_interval_ms() == 200
        assert settings.get_seed() is None
        assert settings.get_replay_dir() == "completed_games"
        assert settings.load_game_config() == GameConfig()

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("SNAKE_TICK_INTERVAL_MS", "50")
        monkeypatch.setenv("SNAKE_TRAP_SPAWN_PROBABILITY", "0.5")
        monkeypatch.setenv("SNAKE_TIER_SCORE_STEP", "10")
        monkeypatch.setenv("SNAKE_TRAP_SCORE_THRESHOLD", "3")

        config = settings.load_game_config()
        assert settings.get_tick_interval_ms() == 50
        assert config.trap_spawn_probability == 0.5
        assert config.tier_score_step == 10
        assert config.trap_score_threshold == 3

    def test_initial_layout_override(self, monkeypatch):
        monkeypatch.setenv("SNAKE_INITIAL_LAYOUT", "head_left")
        assert settings.load_game_config().initial_layout == "head_left"

        monkeypatch.setenv("SNAKE_INITIAL_LAYOUT", "sideways")
        with pytest.raises(ValueError, match="initial_layout"):
            settings.load_game_config()

    def test_bad_number_names_variable(self, monkeypatch):
        monkeypatch.setenv("SNAKE_TIER_SCORE_STEP", "five")
        with pytest.raises(ValueError, match="SNAKE_TIER_SCORE_STEP"):
            settings.load_game_config()

    def test_out_of_range_probability(self, monkeypatch):
        monkeypatch.setenv("SNAKE_TRAP_SPAWN_PROBABILITY", "1.5")
        with pytest.raises(ValueError):
            settings.load_game_config()

    def test_tick_interval_must_be_positive(self, monkeypatch):
        monkeypatch.setenv("SNAKE_TICK_INTERVAL_MS", "0")
        with pytest.raises(ValueError):
            settings.get_tick_interval_ms()

    def test_allowed_origins(self, monkeypatch):
        assert "http://localhost:5000" in settings.get_allowed_origins()
        monkeypatch.setenv("CORS_ALLOWED_ORIGINS", "https://a.example, https://b.example,")
        assert settings.get_allowed_origins() == ["https://a.example", "https://b.example"]

    def test_make_rng_uses_seed_env(self, monkeypatch):
        monkeypatch.setenv("SNAKE_SEED", "12")
        assert settings.make_rng().random() == settings.make_rng(12).random()
