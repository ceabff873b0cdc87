"""Grid Snake: a fixed-step snake simulation with a pygame host."""

from .model import Cell, Direction, GameOverEvent, SessionState, Snapshot, TickResult
from .session import GameSession

__all__ = [
    "Cell",
    "Direction",
    "GameOverEvent",
    "GameSession",
    "SessionState",
    "Snapshot",
    "TickResult",
]
