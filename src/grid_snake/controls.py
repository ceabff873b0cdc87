"""Translate keys and swipes into session intents."""

from __future__ import annotations

from .config import KEY_TO_COMMAND, KEY_TO_DIRECTION, SWIPE_MIN_DISTANCE
from .model import Direction


def direction_for_key(key: int) -> Direction | None:
    name = KEY_TO_DIRECTION.get(key)
    return Direction(name) if name else None


def command_for_key(key: int) -> str | None:
    return KEY_TO_COMMAND.get(key)


def swipe_direction(
    dx: float, dy: float, min_distance: float = SWIPE_MIN_DISTANCE
) -> Direction | None:
    """Pick the dominant axis of a drag; short drags are taps and return None."""
    if max(abs(dx), abs(dy)) < min_distance:
        return None
    if abs(dx) > abs(dy):
        return Direction.RIGHT if dx > 0 else Direction.LEFT
    return Direction.DOWN if dy > 0 else Direction.UP


class SwipeTracker:
    """Remember where a touch or mouse drag began."""

    def __init__(self, min_distance: float = SWIPE_MIN_DISTANCE) -> None:
        self.min_distance = min_distance
        self._origin: tuple[float, float] | None = None

    def begin(self, pos: tuple[float, float]) -> None:
        self._origin = (float(pos[0]), float(pos[1]))

    def end(self, pos: tuple[float, float]) -> Direction | None:
        if self._origin is None:
            return None
        ox, oy = self._origin
        self._origin = None
        return swipe_direction(pos[0] - ox, pos[1] - oy, self.min_distance)
