# config.py
from __future__ import annotations
from dataclasses import dataclass
import logging
import math
import os

logger = logging.getLogger(__name__)

# ----- Grid & window -----
GRID_SIZE = 24
CELL_SIZE = 24
BOARD_PX = GRID_SIZE * CELL_SIZE
HUD_H = 40                      # score strip above the board
PANEL_H = 132                   # buttons, slider and d-pad below the board
WIDTH, HEIGHT = BOARD_PX, HUD_H + BOARD_PX + PANEL_H

# ----- Colors (white board) -----
BG         = (255, 255, 255)
GRID_LINE  = (243, 244, 246)
SNAKE      = (22, 163, 74)
SNAKE_HEAD = (21, 128, 61)
FOOD       = (239, 68, 68)
TEXT       = (31, 41, 55)
PANEL      = (229, 231, 235)
BUTTON     = (209, 213, 219)
OVERLAY    = (0, 0, 0, 64)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)

HIGH_SCORE_KEY = "snake_high_score"

# ----- Tunables -----
@dataclass
class Config:
    seed: int | None = None
    grid_size: int = GRID_SIZE
    min_tick_ms: int = 60        # fastest
    max_tick_ms: int = 220       # slowest
    initial_speed: float = 0.5   # normalized slider position
    swipe_threshold: int = 24    # px; shorter gestures are taps
    food_attempts: int = 512     # random samples before scanning for a free cell
    fps: int = 60
    high_score_path: str = os.path.join(os.path.expanduser("~"), ".snake_scores.json")
    high_score_key: str = HIGH_SCORE_KEY
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ=None) -> "Config":
        """Build a Config, letting SNAKE_* environment variables override defaults."""
        env = os.environ if environ is None else environ
        cfg = cls()
        if env.get("SNAKE_SEED"):
            try:
                cfg.seed = int(env["SNAKE_SEED"])
            except ValueError:
                logger.warning("Ignoring SNAKE_SEED=%r: not an integer", env["SNAKE_SEED"])
        if env.get("SNAKE_SPEED"):
            try:
                speed = float(env["SNAKE_SPEED"])
            except ValueError:
                speed = math.nan
            if math.isfinite(speed):
                cfg.initial_speed = min(max(speed, 0.0), 1.0)
            else:
                logger.warning("Ignoring SNAKE_SPEED=%r: not a number", env["SNAKE_SPEED"])
        if env.get("SNAKE_HIGH_SCORE_PATH"):
            cfg.high_score_path = env["SNAKE_HIGH_SCORE_PATH"]
        if env.get("SNAKE_LOG_LEVEL"):
            cfg.log_level = env["SNAKE_LOG_LEVEL"].upper()
        return cfg

CFG = Config()
