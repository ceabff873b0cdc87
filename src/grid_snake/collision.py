"""Collision rules for a proposed head position."""

from __future__ import annotations

from typing import Sequence

from .model import Cell, Classification


def classify(
    candidate: Cell,
    snake: Sequence[Cell],
    food: Cell | None,
    tile_count: int,
) -> Classification:
    """Classify ``candidate`` against walls, the body, and the food.

    The whole current body is checked, tail included, because the tail only
    moves after the head has been committed.
    """

    if not (0 <= candidate.x < tile_count and 0 <= candidate.y < tile_count):
        return Classification.WALL
    if candidate in snake:
        return Classification.SELF
    if food is not None and candidate == food:
        return Classification.FOOD
    return Classification.EMPTY
