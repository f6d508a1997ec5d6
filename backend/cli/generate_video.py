#!/usr/bin/env python3
"""
CLI tool to generate videos from Snake game replays

Usage:
    python generate_video.py <game_id>
    python generate_video.py --local <path_to_replay.json>

Examples:
    # Generate from the replay directory (SNAKE_REPLAY_DIR)
    python generate_video.py abc-123-def-456

    # Generate from specific local file
    python generate_video.py --local ../completed_games/snake_game_xyz.json

    # Custom output path
    python generate_video.py abc-123 --output ./my_video.mp4

    # Custom video settings
    python generate_video.py abc-123 --fps 10 --cell-size 32
"""

import os
import sys
import argparse
import logging
from pathlib import Path

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from services.video_generator import (  # noqa: E402
    DEFAULT_FPS,
    CELL_SIZE,
    SnakeVideoGenerator,
    get_video_local_path,
    load_replay,
)
from settings import get_replay_dir  # noqa: E402

logger = logging.getLogger(__name__)


def extract_game_id_from_filename(file_path: str) -> str:
    """Extract game ID from filename"""
    # Expected format: snake_game_<game_id>.json
    filename = Path(file_path).stem
    if filename.startswith('snake_game_'):
        return filename.replace('snake_game_', '')
    return filename


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Generate MP4 videos from Snake game replays',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )

    # Input options
    input_group = parser.add_mutually_exclusive_group(required=True)
    input_group.add_argument(
        'game_id',
        nargs='?',
        help='Game ID to load from the replay directory'
    )
    input_group.add_argument(
        '--local',
        type=str,
        help='Path to local replay JSON file'
    )

    # Output options
    parser.add_argument(
        '--output', '-o',
        type=str,
        help='Output video file path (default: next to the replays)'
    )

    # Video settings
    parser.add_argument(
        '--fps',
        type=int,
        default=DEFAULT_FPS,
        help=f'Frames per second (default: {DEFAULT_FPS})'
    )
    parser.add_argument(
        '--cell-size',
        type=int,
        default=CELL_SIZE,
        help=f'Pixels per board cell (default: {CELL_SIZE})'
    )
    return parser


def main(argv=None):
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    args = build_parser().parse_args(argv)
    replay_dir = get_replay_dir()

    try:
        if args.local:
            game_id = extract_game_id_from_filename(args.local)
            replay_path = args.local
            logger.info(f"Using game ID: {game_id}")
        else:
            game_id = args.game_id
            replay_path = os.path.join(replay_dir, f"snake_game_{game_id}.json")

        replay_data = load_replay(replay_path)

        if not args.output:
            args.output = get_video_local_path(replay_dir, game_id)

        generator = SnakeVideoGenerator(fps=args.fps, cell_size=args.cell_size)

        logger.info(f"Generating video for game {game_id}...")
        video_path = generator.generate_video(replay_data, output_path=args.output)

        logger.info(f"[OK] Video generated successfully: {video_path}")

    except KeyboardInterrupt:
        logger.info("\nCancelled by user")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == '__main__':
    main()
