"""Game session state machine: idle, running, paused, game over."""

from __future__ import annotations

import logging
import random
from typing import Callable

from .config import TICK_INTERVAL_MS, TILE_COUNT
from .food import FoodPlacer
from .model import (
    Cell,
    Direction,
    GameOverEvent,
    GridModel,
    SessionState,
    Snapshot,
    TickResult,
    start_cell,
)
from .scheduler import FixedStepScheduler, FrameResult
from .simulation import advance

logger = logging.getLogger(__name__)

GameOverListener = Callable[[GameOverEvent], None]

START_DIRECTION = Direction.RIGHT


class GameSession:
    """Owns the board, the food placer and the scheduler for one player.

    The host calls :meth:`on_frame` from its frame callback and feeds input
    through :meth:`start`, :meth:`toggle_pause`, :meth:`restart` and
    :meth:`request_direction`. Game-over listeners receive a
    :class:`GameOverEvent` so persistence stays outside the core.
    """

    def __init__(
        self,
        *,
        tile_count: int = TILE_COUNT,
        tick_interval: float = TICK_INTERVAL_MS,
        rng: random.Random | None = None,
        placer: FoodPlacer | None = None,
        high_score: int = 0,
    ) -> None:
        self.tile_count = tile_count
        self.initial_tick_interval = tick_interval
        self.placer = placer or FoodPlacer(rng)
        self.high_score = max(0, int(high_score))
        self.state = SessionState.IDLE
        self.model = self._new_model()
        self.scheduler = FixedStepScheduler(lambda: self.model.tick_interval)
        self.interpolation: float = 0.0
        self._listeners: list[GameOverListener] = []

    def _new_model(self) -> GridModel:
        model = GridModel(
            tile_count=self.tile_count,
            snake=[start_cell(self.tile_count)],
            tick_interval=self.initial_tick_interval,
        )
        model.food = self.placer.place(model.snake, model.tile_count)
        return model

    # --- Read side ----------------------------------------------------

    @property
    def direction(self) -> Direction:
        return self.model.direction

    @property
    def tick_interval(self) -> float:
        return self.model.tick_interval

    @property
    def running(self) -> bool:
        return self.state is SessionState.RUNNING

    @property
    def paused(self) -> bool:
        return self.state is SessionState.PAUSED

    def current_score(self) -> int:
        return self.model.score

    def snapshot(self) -> Snapshot:
        return Snapshot(
            snake=tuple(self.model.snake),
            previous_snake=tuple(self.model.previous_snake),
            food=self.model.food,
            interpolation=self.interpolation,
            state=self.state,
            direction=self.model.direction,
            score=self.model.score,
            high_score=self.high_score,
            tick_interval=self.model.tick_interval,
            tile_count=self.model.tile_count,
        )

    def subscribe(self, listener: GameOverListener) -> None:
        self._listeners.append(listener)

    # --- Commands -----------------------------------------------------

    def start(self) -> bool:
        if self.state is not SessionState.IDLE:
            return False
        self.model.direction = START_DIRECTION
        self.model.pending_direction = START_DIRECTION
        self.state = SessionState.RUNNING
        self.scheduler.reset()
        logger.info("Game started")
        return True

    def toggle_pause(self) -> None:
        """Flip between running and paused; ignored in any other state."""
        if self.state is SessionState.RUNNING:
            self.state = SessionState.PAUSED
        elif self.state is SessionState.PAUSED:
            self.state = SessionState.RUNNING
        else:
            return
        self.scheduler.reset()
        logger.debug("Session is now %s", self.state.value)

    def request_direction(self, direction: Direction) -> bool:
        """Buffer a turn for the next tick; reverses and idle turns are ignored."""
        if self.state is not SessionState.RUNNING:
            return False
        if direction is Direction.NONE or direction is self.model.direction.opposite:
            logger.debug(
                "Ignored turn %s while heading %s",
                direction.value,
                self.model.direction.value,
            )
            return False
        self.model.pending_direction = direction
        return True

    def restart(self) -> None:
        self.model = self._new_model()
        self.state = SessionState.IDLE
        self.interpolation = 0.0
        self.scheduler.reset()
        logger.info("Session reset")

    # --- Loop ---------------------------------------------------------

    def on_tick(self) -> TickResult | None:
        if self.state is not SessionState.RUNNING:
            return None
        result = advance(self.model, self.placer)
        if result is TickResult.DIED:
            self._game_over()
        return result

    def on_frame(self, timestamp: float) -> FrameResult:
        """Run every tick that elapsed since the previous frame."""
        frame = self.scheduler.on_frame(timestamp)
        for _ in range(frame.ticks):
            if self.on_tick() is TickResult.DIED:
                break
        self.interpolation = frame.interpolation if self.running else 0.0
        return frame

    def ensure_food(self) -> Cell:
        """Regenerate food if it went missing or left the board."""
        food = self.model.food
        if food is None or not self.model.in_bounds(food):
            logger.error("Food state is invalid (%r); placing new food", food)
            food = self.placer.place(self.model.snake, self.model.tile_count)
            self.model.food = food
        return food

    def _game_over(self) -> None:
        self.state = SessionState.GAME_OVER
        score = self.model.score
        new_high = score > self.high_score
        if new_high:
            self.high_score = score
        logger.info("Game over: score %d%s", score, " (new best)" if new_high else "")
        event = GameOverEvent(score=score, new_high_score=new_high)
        for listener in list(self._listeners):
            listener(event)
