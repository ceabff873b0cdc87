"""Plain data shared by the simulation, the session and the renderer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple

from .config import START_CELL, TICK_INTERVAL_MS, TILE_COUNT


class Cell(NamedTuple):
    x: int
    y: int

    def shifted(self, direction: Direction) -> Cell:
        dx, dy = direction.vector
        return Cell(self.x + dx, self.y + dy)


class Direction(str, Enum):
    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    NONE = "NONE"

    @property
    def vector(self) -> tuple[int, int]:
        return _VECTORS[self]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITE[self]


_VECTORS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.NONE: (0, 0),
}
_OPPOSITE: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.NONE: Direction.NONE,
}


class SessionState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class Classification(str, Enum):
    WALL = "wall"
    SELF = "self"
    FOOD = "food"
    EMPTY = "empty"


class TickResult(str, Enum):
    CONTINUE = "continue"
    ATE = "ate"
    DIED = "died"


def start_cell(tile_count: int) -> Cell:
    """The configured start cell, or the board centre when it does not fit."""
    x, y = START_CELL
    if 0 <= x < tile_count and 0 <= y < tile_count:
        return Cell(x, y)
    return Cell(tile_count // 2, tile_count // 2)


@dataclass(slots=True)
class GridModel:
    """Mutable board state for one play session; no behavior lives here."""

    tile_count: int = TILE_COUNT
    snake: list[Cell] = field(default_factory=list)
    previous_snake: list[Cell] = field(default_factory=list)
    food: Cell | None = None
    direction: Direction = Direction.NONE
    pending_direction: Direction = Direction.NONE
    score: int = 0
    tick_interval: float = TICK_INTERVAL_MS

    def __post_init__(self) -> None:
        if self.tile_count <= 0:
            raise ValueError(f"tile_count must be positive, got {self.tile_count}")
        if self.tick_interval <= 0:
            raise ValueError(
                f"tick_interval must be positive, got {self.tick_interval}"
            )
        if not self.snake:
            self.snake = [start_cell(self.tile_count)]
        for cell in self.snake:
            if not self.in_bounds(cell):
                raise ValueError(f"snake segment {tuple(cell)} is off the board")
        if len(set(self.snake)) != len(self.snake):
            raise ValueError("snake segments must be distinct")

    @property
    def head(self) -> Cell:
        return self.snake[0]

    def in_bounds(self, cell: Cell) -> bool:
        return 0 <= cell.x < self.tile_count and 0 <= cell.y < self.tile_count


@dataclass(frozen=True, slots=True)
class Snapshot:
    """Read-only view handed to the renderer once per frame."""

    snake: tuple[Cell, ...]
    previous_snake: tuple[Cell, ...]
    food: Cell | None
    interpolation: float
    state: SessionState
    direction: Direction
    score: int
    high_score: int
    tick_interval: float
    tile_count: int


@dataclass(frozen=True, slots=True)
class GameOverEvent:
    score: int
    new_high_score: bool
