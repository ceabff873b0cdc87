"""One discrete simulation step: move, eat, grow, speed up."""

from __future__ import annotations

import logging

from .collision import classify
from .config import (
    FOOD_POINTS,
    MIN_TICK_INTERVAL_MS,
    SPEED_UP_EVERY,
    TICK_DECREMENT_MS,
)
from .food import FoodPlacer
from .model import Classification, Direction, GridModel, TickResult

logger = logging.getLogger(__name__)


def _apply_speed_up(model: GridModel, previous_score: int) -> None:
    """Shorten the tick interval when the score crosses a threshold."""
    if SPEED_UP_EVERY <= 0:
        return
    crossed = model.score // SPEED_UP_EVERY > previous_score // SPEED_UP_EVERY
    if crossed and model.tick_interval > MIN_TICK_INTERVAL_MS:
        model.tick_interval = max(
            MIN_TICK_INTERVAL_MS, model.tick_interval - TICK_DECREMENT_MS
        )
        logger.info(
            "Speed up at score %d: tick interval now %.0f ms",
            model.score,
            model.tick_interval,
        )


def advance(model: GridModel, placer: FoodPlacer) -> TickResult:
    """Advance the snake by exactly one grid cell.

    The buffered direction request is committed first, so a turn never
    lands halfway through a tick. On a lethal move the body is left as it
    was; the caller owns the game-over transition.
    """
    model.direction = model.pending_direction
    if model.direction is Direction.NONE:
        return TickResult.CONTINUE

    model.previous_snake = list(model.snake)
    new_head = model.head.shifted(model.direction)
    outcome = classify(new_head, model.snake, model.food, model.tile_count)

    if outcome in (Classification.WALL, Classification.SELF):
        logger.info(
            "Snake died (%s) at %s with score %d",
            outcome.value,
            tuple(new_head),
            model.score,
        )
        return TickResult.DIED

    model.snake.insert(0, new_head)

    if outcome is Classification.FOOD:
        previous_score = model.score
        model.score += FOOD_POINTS
        model.food = placer.place(model.snake, model.tile_count)
        _apply_speed_up(model, previous_score)
        return TickResult.ATE

    model.snake.pop()
    return TickResult.CONTINUE
