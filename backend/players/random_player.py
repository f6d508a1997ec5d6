"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from domain.commands import DIRECTION_MAP
from domain.constants import BOARD_SIZE, VALID_MOVES
from domain.game_state import GameState
from domain.geometry import translate
from .base import Player


class RandomPlayer(Player):
    """
    A random AI that picks a direction that avoids the trap and self-collisions.

    The board wraps around, so there are no walls to dodge.
    """

    def __init__(self, rng: Optional[random.Random] = None, board_size: int = BOARD_SIZE):
        self.rng = rng if rng is not None else random.Random()
        self.board_size = board_size

    def get_move(self, game_state: GameState) -> str:
        snake = game_state.snake
        trap = game_state.trap

        # Filter out moves that:
        # 1. Hit the trap
        # 2. Hit own body (except tail, which will move)
        blocked = set(snake.positions[:-1])
        if trap is not None:
            blocked.add(trap.position)

        valid_moves: List[str] = []
        for move in sorted(VALID_MOVES):
            new_head = translate(snake.head, DIRECTION_MAP[move], board_size=self.board_size)
            if new_head in blocked:
                continue
            valid_moves.append(move)

        # If no valid moves, just return a random move (we'll die anyway)
        if not valid_moves:
            return self.rng.choice(sorted(VALID_MOVES))

        return self.rng.choice(valid_moves)
