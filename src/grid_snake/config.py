"""Centralized configuration and palette definitions for Grid Snake."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

import pygame


def _default_data_dir() -> Path:
    """Return a platform-appropriate user data directory for saves/logs."""

    if sys.platform.startswith("win"):
        base = Path(os.getenv("LOCALAPPDATA") or Path.home() / "AppData" / "Local")
    elif sys.platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        base = Path(os.getenv("XDG_DATA_HOME") or Path.home() / ".local" / "share")
    return base / "grid-snake"


DATA_DIR = Path(os.getenv("GRID_SNAKE_DATA_DIR") or _default_data_dir())
HIGHSCORE_FILE = Path(
    os.getenv("GRID_SNAKE_HIGHSCORE_FILE") or DATA_DIR / "highscore.txt"
)
LOG_LEVEL: str = os.getenv("GRID_SNAKE_LOG_LEVEL", "INFO").upper()

# Simulation
TILE_COUNT: int = 20
START_CELL: tuple[int, int] = (10, 10)
FOOD_POINTS: int = 10
FOOD_MAX_ATTEMPTS: int = 100
FOOD_FALLBACK: tuple[int, int] = (1, 1)

TICK_INTERVAL_MS: float = 150.0
MIN_TICK_INTERVAL_MS: float = 50.0
TICK_DECREMENT_MS: float = 10.0
SPEED_UP_EVERY: int = 50  # points

# Host window
BLOCK: int = 20  # 400 / 20 => 20 cells
WINDOW_SIZE: int = TILE_COUNT * BLOCK
HUD_HEIGHT: int = 36
FONT_NAME: str = "consolas"
FONT_SIZE: int = 20
FPS: int = 60
SWIPE_MIN_DISTANCE: int = 12  # px; shorter drags count as taps

KEY_TO_DIRECTION = {
    pygame.K_UP: "UP",
    pygame.K_w: "UP",
    pygame.K_DOWN: "DOWN",
    pygame.K_s: "DOWN",
    pygame.K_LEFT: "LEFT",
    pygame.K_a: "LEFT",
    pygame.K_RIGHT: "RIGHT",
    pygame.K_d: "RIGHT",
}
KEY_TO_COMMAND = {
    pygame.K_SPACE: "pause",
    pygame.K_RETURN: "start",
    pygame.K_KP_ENTER: "start",
    pygame.K_r: "restart",
    pygame.K_q: "quit",
    pygame.K_ESCAPE: "quit",
    pygame.K_f: "fullscreen",
    pygame.K_F11: "fullscreen",
}

PALETTE = {
    "bg": pygame.Color(144, 238, 144),
    "grid": pygame.Color(122, 200, 122),
    "head": pygame.Color(65, 105, 225),
    "head_outline": pygame.Color(30, 58, 138),
    "body": pygame.Color(100, 149, 237),
    "food": pygame.Color(220, 40, 40),
    "food_marker": pygame.Color(255, 255, 0, 110),
    "text": pygame.Color(74, 124, 74),
    "overlay_text": pygame.Color(255, 255, 255),
    "hud": pygame.Color(34, 70, 34),
    "hud_text": pygame.Color(230, 255, 230),
}


def configure_logging(level: str | None = None) -> None:
    """Install the root handler once; the entry point calls this."""

    logging.basicConfig(
        level=getattr(logging, (level or LOG_LEVEL), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
