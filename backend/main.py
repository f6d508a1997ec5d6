import os
import json
import time
import uuid
import logging
import argparse
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from domain.commands import set_new_direction
from domain.config import GameConfig
from domain.constants import TICK_INTERVAL_MS
from domain.game_state import GameState
from domain.simulation import Simulation, TickResult
from players import Player, RandomPlayer
from services.renderer import score_text
from settings import get_replay_dir, get_tick_interval_ms, load_game_config, make_rng

logger = logging.getLogger(__name__)


class GameLoop:
    """
    Drives a Simulation at a fixed tick interval until the game ends.

    Manages:
      - Ticking the simulation and sleeping between ticks
      - Optional automated player input before each tick
      - A frame callback for whatever is drawing the board
      - History for replay

    The sleep function is injectable so tests can run whole games
    without waiting on the real clock.
    """

    def __init__(
        self,
        simulation: Simulation,
        interval_ms: int = TICK_INTERVAL_MS,
        sleep: Callable[[float], None] = time.sleep,
        on_frame: Optional[Callable[[GameState], None]] = None,
        player: Optional[Player] = None,
        max_ticks: Optional[int] = None,
        game_id: Optional[str] = None
    ):
        self.simulation = simulation
        self.interval_ms = interval_ms
        self.sleep = sleep
        self.on_frame = on_frame
        self.player = player
        self.max_ticks = max_ticks
        self.game_id = game_id if game_id is not None else str(uuid.uuid4())
        self.start_time = time.time()
        self.finished = False

        self.simulation.game_over_listeners.append(self._on_game_over)

        # Frame 0 is the starting layout
        self.history: List[Dict[str, Any]] = [simulation.state.to_dict()]

    def _on_game_over(self, state: GameState):
        self.finished = True

    def step(self) -> TickResult:
        """Run a single loop iteration without sleeping."""
        if self.player is not None and not self.simulation.state.game_over:
            set_new_direction(self.simulation.state.snake, self.player.get_move(self.simulation.state))

        result = self.simulation.tick()
        if result.terminal:
            return result

        self.history.append(result.state.to_dict())
        if self.on_frame is not None:
            self.on_frame(result.state)

        if self.max_ticks is not None and self.simulation.tick_count >= self.max_ticks:
            logger.info(f"Stopping after reaching max ticks ({self.max_ticks})")
            self.finished = True
        return result

    def run(self) -> GameState:
        """
        Tick, draw, sleep, repeat. Returns the final state once the game-over
        notice has fired or the tick limit is hit.
        """
        while not self.finished:
            result = self.step()
            if self.finished or result.terminal:
                break
            self.sleep(self.interval_ms / 1000)
        return self.simulation.state

    def build_replay(self) -> Dict[str, Any]:
        final_state = self.simulation.state
        metadata = {
            "game_id": self.game_id,
            "start_time": datetime.fromtimestamp(self.start_time, tz=timezone.utc).isoformat(),
            "end_time": datetime.now(timezone.utc).isoformat(),
            "tick_interval_ms": self.interval_ms,
            "ticks": self.simulation.tick_count,
            "final_score": final_state.score,
            "game_over": final_state.game_over,
            "player": self.player.__class__.__name__ if self.player is not None else None,
        }
        return {"metadata": metadata, "frames": list(self.history)}

    def save_history_to_json(self, directory: str, filename: Optional[str] = None) -> str:
        """Write the replay to <directory>/snake_game_<game_id>.json and return the path."""
        if filename is None:
            filename = f"snake_game_{self.game_id}.json"

        os.makedirs(directory, exist_ok=True)
        path = os.path.join(directory, filename)
        with open(path, "w") as f:
            json.dump(self.build_replay(), f, indent=2)

        logger.info(f"Saved replay to {path}")
        return path


# -------------------------------
# Simulation Function
# -------------------------------

def run_game(
    seed: Optional[int] = None,
    config: Optional[GameConfig] = None,
    interval_ms: Optional[int] = None,
    max_ticks: Optional[int] = None,
    autoplay: bool = True,
    quiet: bool = False,
    sleep: Callable[[float], None] = time.sleep
) -> GameLoop:
    """
    Play one headless game and return the finished GameLoop.

    Args:
        seed: Seed for the game's random source (defaults to SNAKE_SEED)
        config: Game policies (defaults to the environment's)
        interval_ms: Milliseconds between ticks (defaults to SNAKE_TICK_INTERVAL_MS)
        max_ticks: Stop after this many ticks even if the snake is alive
        autoplay: Steer with a RandomPlayer; otherwise the snake goes straight
        quiet: Don't print the board every tick
        sleep: Sleep function used between ticks
    """
    rng = make_rng(seed)
    simulation = Simulation(rng=rng, config=config if config is not None else load_game_config())

    simulation.food_listeners.append(lambda state: print(f"Score: {score_text(state)}"))
    simulation.game_over_listeners.append(lambda state: print("Game over!"))

    def print_board(state: GameState):
        if not quiet:
            print("\n" + state.print_board() + "\n")

    loop = GameLoop(
        simulation,
        interval_ms=interval_ms if interval_ms is not None else get_tick_interval_ms(),
        sleep=sleep,
        on_frame=print_board,
        player=RandomPlayer(rng) if autoplay else None,
        max_ticks=max_ticks,
    )
    print(f"Game ID: {loop.game_id}")
    print_board(simulation.state)
    loop.run()
    return loop


def main(argv=None):
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    parser = argparse.ArgumentParser(
        description="Run a headless Trap Snake game in the terminal."
    )
    parser.add_argument("--seed", type=int, required=False, default=None,
                        help="Seed for reproducible games (default: SNAKE_SEED or random)")
    parser.add_argument("--tick-ms", type=int, required=False, default=None,
                        help="Milliseconds between ticks (default: SNAKE_TICK_INTERVAL_MS or 200)")
    parser.add_argument("--max-ticks", type=int, required=False, default=None,
                        help="Stop after this many ticks")
    parser.add_argument("--no-autoplay", action="store_true",
                        help="Let the snake run straight instead of steering randomly")
    parser.add_argument("--save-replay", action="store_true",
                        help="Write a replay JSON to SNAKE_REPLAY_DIR")
    parser.add_argument("--quiet", action="store_true",
                        help="Don't print the board each tick")

    args = parser.parse_args(argv)

    loop = run_game(
        seed=args.seed,
        interval_ms=args.tick_ms,
        max_ticks=args.max_ticks,
        autoplay=not args.no_autoplay,
        quiet=args.quiet,
    )

    if args.save_replay:
        loop.save_history_to_json(get_replay_dir())

    summary = {
        "game_id": loop.game_id,
        "ticks": loop.simulation.tick_count,
        "final_score": loop.simulation.state.score,
        "game_over": loop.simulation.state.game_over,
    }
    print("\nGame Summary:")
    print(json.dumps(summary, indent=2))


if __name__ == "__main__":
    main()
