"""Shared test doubles."""

import random

from grid_snake.food import FoodPlacer
from grid_snake.model import Cell


class FixedPlacer(FoodPlacer):
    """Hands out queued cells, then falls back to seeded random placement."""

    def __init__(self, *cells):
        super().__init__(random.Random(0))
        self.queue = [Cell(*c) for c in cells]

    def place(self, snake, tile_count):
        if self.queue:
            return self.queue.pop(0)
        return super().place(snake, tile_count)
