"""
Player implementations for Trap Snake.

Players are automated input sources: they pick moves for the snake when
nobody is at the keyboard (headless runs and demos).
"""

from .base import Player
from .random_player import RandomPlayer

__all__ = [
    'Player',
    'RandomPlayer',
]
