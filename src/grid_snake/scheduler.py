"""Fixed-step scheduling: frame timestamps in, whole ticks out."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True, slots=True)
class FrameResult:
    ticks: int
    interpolation: float


class FixedStepScheduler:
    """Turn wall-clock frame callbacks into a deterministic tick count.

    ``interval`` is called on every frame so a speed change made by the last
    tick applies to the very next frame. Timestamps are in milliseconds.
    The first frame after construction or :meth:`reset` only seeds the clock.
    """

    def __init__(self, interval: Callable[[], float]) -> None:
        self._interval = interval
        self.last_timestamp: float | None = None
        self.accumulator: float = 0.0

    def reset(self) -> None:
        """Drop carried-over time so resuming never bursts catch-up ticks."""
        self.last_timestamp = None
        self.accumulator = 0.0

    def on_frame(self, timestamp: float) -> FrameResult:
        interval = self._interval()
        if interval <= 0:
            raise ValueError(f"tick interval must be positive, got {interval}")

        if self.last_timestamp is None:
            self.last_timestamp = timestamp
        delta = max(0.0, timestamp - self.last_timestamp)
        self.last_timestamp = timestamp

        self.accumulator += delta
        ticks = math.floor(self.accumulator / interval)
        self.accumulator -= ticks * interval
        # Float residue can leave the accumulator a hair off either edge.
        if self.accumulator < 0.0:
            self.accumulator = 0.0
        interpolation = self.accumulator / interval
        if interpolation >= 1.0:
            ticks += 1
            self.accumulator = 0.0
            interpolation = 0.0
        return FrameResult(ticks=ticks, interpolation=interpolation)
