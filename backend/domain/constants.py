"""
Game constants for Trap Snake.
"""

# Board settings
BOARD_SIZE = 21
START_SNAKE_SIZE = 3
TICK_INTERVAL_MS = 200

# Movement commands (on-screen buttons send these)
UP = "UP"
RIGHT = "RIGHT"
DOWN = "DOWN"
LEFT = "LEFT"
VALID_MOVES = {UP, RIGHT, DOWN, LEFT}

# Food unlocks a new tier every TIER_SCORE_STEP points
TIER_SCORE_STEP = 5

# Traps may only appear once the score is above this
TRAP_SCORE_THRESHOLD = 7
TRAP_SPAWN_PROBABILITY = 0.7
