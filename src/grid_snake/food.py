"""Food placement on free grid cells."""

from __future__ import annotations

import logging
import random
from typing import Sequence

from .config import FOOD_FALLBACK, FOOD_MAX_ATTEMPTS
from .model import Cell

logger = logging.getLogger(__name__)


class FoodPlacer:
    """Rejection-sample a random free cell, giving up after a fixed budget.

    The random source is injectable so tests can pin placements with a seeded
    ``random.Random``.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        *,
        max_attempts: int = FOOD_MAX_ATTEMPTS,
        fallback: tuple[int, int] = FOOD_FALLBACK,
    ) -> None:
        self.rng = rng or random.Random()
        self.max_attempts = max_attempts
        self.fallback = Cell(*fallback)

    def place(self, snake: Sequence[Cell], tile_count: int) -> Cell:
        occupied = set(snake)
        for _ in range(self.max_attempts):
            pos = Cell(
                self.rng.randrange(0, tile_count),
                self.rng.randrange(0, tile_count),
            )
            if pos not in occupied:
                logger.debug("New food placed at %d, %d", pos.x, pos.y)
                return pos

        # Near-full board: the fallback may sit on the snake.
        logger.warning(
            "No free cell after %d attempts, using fallback %s",
            self.max_attempts,
            tuple(self.fallback),
        )
        return self.fallback
