"""
Video Generation Service for Snake Game Replays

This service generates MP4 videos from replay JSON files by:
1. Rendering each frame using PIL (Pillow)
2. Encoding frames to video using MoviePy/FFmpeg
3. Saving the video next to the replays

The rendering matches the browser page:
- Grid board with wraparound edges
- Snake rendering (tail segments and a darker head with eyes)
- Food coloured by type (slug, rat, frog)
- Trap tile
- Score and game-over banner
"""

import os
import json
import logging
import tempfile
from typing import Any, Dict, List, Optional, Tuple

from PIL import Image, ImageDraw, ImageFont
from moviepy import ImageSequenceClip
import numpy as np

from domain.constants import BOARD_SIZE, TICK_INTERVAL_MS
from domain.food import FoodType
from domain.game_state import GameState
from services.renderer import CellType, classify_cells

logger = logging.getLogger(__name__)

# Video settings
DEFAULT_FPS = 1000 // TICK_INTERVAL_MS  # Matches live playback speed (200ms = 5 FPS)
CELL_SIZE = 24  # Size of each grid cell in pixels
MARGIN = 20
HEADER_HEIGHT = 50


class ColorScheme:
    """Color configuration matching the browser stylesheet"""

    BACKGROUND = "#1a1f2e"
    BOARD = "#FFFFFF"
    GRID_LINE = "#E5E7EB"

    SNAKE = "#4F7022"
    TRAP = "#3F3F46"

    SLUG = "#C9A227"
    RAT = "#8B6F5A"
    FROG = "#2FA84F"

    SCORE_TEXT = "#FFFFFF"
    GAME_OVER_TEXT = "#EA2014"


FOOD_COLORS = {
    FoodType.SLUG: ColorScheme.SLUG,
    FoodType.RAT: ColorScheme.RAT,
    FoodType.FROG: ColorScheme.FROG,
}


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple"""
    hex_color = hex_color.lstrip('#')
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


def darken_color(hex_color: str, amount: float = 0.3) -> Tuple[int, int, int]:
    """Darken a hex color by a given amount"""
    r, g, b = hex_to_rgb(hex_color)
    r = max(0, int(r * (1 - amount)))
    g = max(0, int(g * (1 - amount)))
    b = max(0, int(b * (1 - amount)))
    return (r, g, b)


def load_replay(file_path: str) -> Dict[str, Any]:
    """Load replay data from a JSON file written by the game loop"""
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"Replay file not found: {file_path}")

    with open(file_path, 'r') as f:
        replay_data = json.load(f)

    if not isinstance(replay_data, dict) or not isinstance(replay_data.get("frames"), list):
        raise ValueError(f"Replay file has no frames: {file_path}")

    logger.info(f"Loaded replay with {len(replay_data['frames'])} frames")
    return replay_data


class SnakeVideoGenerator:
    """Generate MP4 videos from Snake game replays"""

    def __init__(
        self,
        fps: int = DEFAULT_FPS,
        cell_size: int = CELL_SIZE,
        board_size: int = BOARD_SIZE
    ):
        self.fps = fps
        self.cell_size = cell_size
        self.board_size = board_size

        self.board_pixels = board_size * cell_size
        self.width = self.board_pixels + 2 * MARGIN
        self.height = self.board_pixels + 2 * MARGIN + HEADER_HEIGHT

        # Try to load a font, fallback to default if not available
        try:
            self.font = ImageFont.truetype("DejaVuSans.ttf", 22)
        except Exception:
            self.font = ImageFont.load_default()

    def render_frame(
        self,
        state: GameState,
        tick_number: Optional[int] = None,
        total_ticks: Optional[int] = None
    ) -> Image.Image:
        """Render a single frame of the game"""
        img = Image.new('RGB', (self.width, self.height), hex_to_rgb(ColorScheme.BACKGROUND))
        draw = ImageDraw.Draw(img)

        self._draw_header(draw, state, tick_number, total_ticks)
        self._draw_board(draw, state, MARGIN, MARGIN + HEADER_HEIGHT)

        return img

    def _draw_header(
        self,
        draw: ImageDraw.ImageDraw,
        state: GameState,
        tick_number: Optional[int],
        total_ticks: Optional[int]
    ):
        header = f"Score: {state.score}"
        if tick_number is not None and total_ticks is not None:
            header += f" | Tick {tick_number + 1} / {total_ticks}"
        draw.text((MARGIN, MARGIN), header, fill=hex_to_rgb(ColorScheme.SCORE_TEXT), font=self.font)

        if state.game_over:
            text = "GAME OVER"
            bbox = draw.textbbox((0, 0), text, font=self.font)
            text_width = bbox[2] - bbox[0]
            draw.text(
                (self.width - MARGIN - text_width, MARGIN),
                text,
                fill=hex_to_rgb(ColorScheme.GAME_OVER_TEXT),
                font=self.font
            )

    def _draw_board(self, draw: ImageDraw.ImageDraw, state: GameState, board_x: int, board_y: int):
        """Draw the game board with grid and every occupied cell"""
        size = self.cell_size

        draw.rectangle(
            [board_x, board_y, board_x + self.board_pixels, board_y + self.board_pixels],
            fill=hex_to_rgb(ColorScheme.BOARD),
            outline=(100, 100, 100),
            width=2
        )

        # Draw grid
        for i in range(self.board_size + 1):
            offset = i * size
            draw.line(
                [board_x + offset, board_y, board_x + offset, board_y + self.board_pixels],
                fill=hex_to_rgb(ColorScheme.GRID_LINE),
                width=1
            )
            draw.line(
                [board_x, board_y + offset, board_x + self.board_pixels, board_y + offset],
                fill=hex_to_rgb(ColorScheme.GRID_LINE),
                width=1
            )

        for y, row in enumerate(classify_cells(state, self.board_size)):
            for x, cell in enumerate(row):
                cell_x = board_x + x * size
                cell_y = board_y + y * size
                if cell.type == CellType.TRAP:
                    self._draw_cell(draw, cell_x, cell_y, size, hex_to_rgb(ColorScheme.TRAP), padding=0)
                elif cell.type == CellType.FOOD:
                    draw.ellipse(
                        [cell_x + 3, cell_y + 3, cell_x + size - 3, cell_y + size - 3],
                        fill=hex_to_rgb(FOOD_COLORS[cell.food_type])
                    )
                elif cell.type == CellType.SNAKE_TAIL:
                    self._draw_cell(draw, cell_x, cell_y, size, hex_to_rgb(ColorScheme.SNAKE))
                elif cell.type == CellType.SNAKE_HEAD:
                    self._draw_head(draw, cell_x, cell_y, size)

    def _draw_head(self, draw: ImageDraw.ImageDraw, x: int, y: int, size: int):
        self._draw_cell(draw, x, y, size, darken_color(ColorScheme.SNAKE, 0.3), padding=0)

        # Eyes
        eye_size = max(2, size // 5)
        eye_y = y + size // 3
        draw.ellipse(
            [x + size // 4, eye_y, x + size // 4 + eye_size, eye_y + eye_size],
            fill=(255, 255, 255)
        )
        draw.ellipse(
            [x + 3 * size // 4 - eye_size, eye_y, x + 3 * size // 4, eye_y + eye_size],
            fill=(255, 255, 255)
        )

    def _draw_cell(
        self,
        draw: ImageDraw.ImageDraw,
        x: int,
        y: int,
        size: int,
        color: Tuple[int, int, int],
        padding: int = 1
    ):
        """Draw a single filled cell"""
        draw.rectangle(
            [x + padding, y + padding, x + size - padding, y + size - padding],
            fill=color
        )

    def render_frames(self, replay_data: Dict[str, Any]) -> List[np.ndarray]:
        """Render every replay frame to an RGB array"""
        frames_data = replay_data.get("frames", [])
        frames = []
        for i, frame_data in enumerate(frames_data):
            if i % 50 == 0:
                logger.info(f"Rendering frame {i + 1}/{len(frames_data)}")
            state = GameState.from_dict(frame_data)
            frames.append(np.array(self.render_frame(state, i, len(frames_data))))
        return frames

    def generate_video(
        self,
        replay_data: Dict[str, Any],
        output_path: Optional[str] = None
    ) -> str:
        """
        Generate a video from a game replay

        Args:
            replay_data: Replay dict with "metadata" and "frames"
            output_path: Optional output path (if None, uses temp file)

        Returns:
            Path to the generated video file
        """
        game_id = replay_data.get("metadata", {}).get("game_id", "replay")
        logger.info(f"Starting video generation for game {game_id}")

        frames = self.render_frames(replay_data)
        if not frames:
            raise ValueError(f"Replay for game {game_id} has no frames to render")

        logger.info(f"Rendered {len(frames)} frames, creating video...")

        if output_path is None:
            output_path = os.path.join(tempfile.gettempdir(), f"{game_id}_replay.mp4")

        clip = ImageSequenceClip(frames, fps=self.fps)
        clip.write_videofile(
            output_path,
            codec='libx264',
            audio=False,
            logger=None
        )

        logger.info(f"Video created successfully at {output_path}")
        return output_path


def get_video_local_path(replay_dir: str, game_id: str) -> str:
    """
    Get the local path for a game's video

    Args:
        replay_dir: Directory holding the replays
        game_id: The game ID

    Returns:
        Local path to the video file
    """
    return os.path.join(replay_dir, f"{game_id}_replay.mp4")
