"""
Base player interface for the game engine.
"""

from domain.game_state import GameState


class Player:
    """
    Base class/interface for automated input.

    A player looks at the current game state and picks the move it wants
    the snake to make on the next tick.
    """

    def get_move(self, game_state: GameState) -> str:
        """
        Return a move direction given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            One of: "UP", "RIGHT", "DOWN", "LEFT"
        """
        raise NotImplementedError
