"""Tests for the GameSession state machine."""

import random

import pytest
from helpers import FixedPlacer

from grid_snake.model import Cell, Direction, GridModel, SessionState, TickResult
from grid_snake.session import GameSession


def running_session(**kwargs):
    session = GameSession(placer=FixedPlacer((0, 0)), **kwargs)
    session.start()
    return session


class TestTransitions:
    def test_starts_idle(self, session):
        assert session.state is SessionState.IDLE
        assert session.direction is Direction.NONE
        assert session.current_score() == 0
        assert session.tick_interval == 150
        assert session.model.snake == [Cell(10, 10)]

    def test_start_heads_right(self, session):
        assert session.start() is True
        assert session.state is SessionState.RUNNING
        assert session.direction is Direction.RIGHT

    def test_start_only_from_idle(self, session):
        session.start()
        session.toggle_pause()
        assert session.start() is False
        assert session.state is SessionState.PAUSED

    def test_toggle_pause(self, session):
        session.start()
        session.toggle_pause()
        assert session.paused
        session.toggle_pause()
        assert session.running

    def test_toggle_pause_ignored_when_idle(self, session):
        session.toggle_pause()
        assert session.state is SessionState.IDLE

    def test_tick_ignored_unless_running(self, session):
        assert session.on_tick() is None
        session.start()
        session.toggle_pause()
        assert session.on_tick() is None
        assert session.model.snake == [Cell(10, 10)]

    def test_restart_from_game_over(self):
        session = running_session()
        session.model.snake = [Cell(19, 10)]
        assert session.on_tick() is TickResult.DIED
        assert session.state is SessionState.GAME_OVER
        session.restart()
        assert session.state is SessionState.IDLE
        assert session.model.snake == [Cell(10, 10)]

    def test_restart_is_idempotent(self):
        """Restarting twice gives the same initial state as once."""
        a = GameSession(rng=random.Random(5))
        b = GameSession(rng=random.Random(5))
        for s in (a, b):
            s.start()
            s.model.score = 70
            s.model.tick_interval = 130
        a.restart()
        b.restart()
        b.restart()
        for s in (a, b):
            assert s.state is SessionState.IDLE
            assert s.model.snake == [Cell(10, 10)]
            assert s.model.score == 0
            assert s.model.tick_interval == 150
            assert s.direction is Direction.NONE
            assert s.model.pending_direction is Direction.NONE
            assert s.model.food is not None
            assert s.model.food not in s.model.snake
            assert s.scheduler.accumulator == 0.0


class TestDirection:
    def test_reverse_rejected(self):
        session = running_session()
        assert session.request_direction(Direction.LEFT) is False
        assert session.model.pending_direction is Direction.RIGHT
        session.on_tick()
        assert session.direction is Direction.RIGHT

    def test_turn_buffered_until_tick(self):
        """A request changes nothing until the next tick commits it."""
        session = running_session()
        assert session.request_direction(Direction.UP) is True
        assert session.direction is Direction.RIGHT
        session.on_tick()
        assert session.direction is Direction.UP
        assert session.model.snake == [Cell(10, 9)]

    def test_latest_request_wins(self):
        session = running_session()
        session.request_direction(Direction.UP)
        session.request_direction(Direction.DOWN)
        session.on_tick()
        assert session.direction is Direction.DOWN

    def test_double_turn_cannot_reverse(self):
        """Reverse is judged against the committed heading, not the buffer."""
        session = running_session()
        session.request_direction(Direction.UP)
        assert session.request_direction(Direction.LEFT) is False
        session.on_tick()
        assert session.direction is Direction.UP

    def test_ignored_when_not_running(self, session):
        assert session.request_direction(Direction.UP) is False
        session.start()
        session.toggle_pause()
        assert session.request_direction(Direction.UP) is False

    def test_none_rejected(self):
        session = running_session()
        assert session.request_direction(Direction.NONE) is False


class TestGameOver:
    def test_event_emitted(self):
        events = []
        session = running_session(high_score=100)
        session.subscribe(events.append)
        session.model.score = 40
        session.model.snake = [Cell(19, 10)]
        session.on_tick()
        assert len(events) == 1
        assert events[0].score == 40
        assert events[0].new_high_score is False
        assert session.high_score == 100

    def test_new_high_score(self):
        events = []
        session = running_session(high_score=20)
        session.subscribe(events.append)
        session.model.score = 30
        session.model.snake = [Cell(19, 10)]
        session.on_tick()
        assert events[0].new_high_score is True
        assert session.high_score == 30
        assert session.snapshot().high_score == 30


class TestFrames:
    def test_frame_runs_elapsed_ticks(self):
        session = running_session()
        assert session.on_frame(1000).ticks == 0
        frame = session.on_frame(1160)
        assert frame.ticks == 1
        assert session.model.snake == [Cell(11, 10)]
        assert 0.0 <= session.interpolation < 1.0

    def test_pause_discards_elapsed_time(self):
        """Resuming after a long pause does not replay the paused time."""
        session = running_session()
        session.on_frame(0)
        session.toggle_pause()
        session.on_frame(10_000)
        session.on_frame(60_000)
        assert session.model.snake == [Cell(10, 10)]
        session.toggle_pause()
        assert session.on_frame(60_100).ticks == 0
        assert session.on_frame(60_250).ticks == 1
        assert session.model.snake == [Cell(11, 10)]

    def test_ticks_stop_after_death(self):
        session = running_session()
        session.model.snake = [Cell(18, 10)]
        session.on_frame(0)
        session.on_frame(150 * 5)
        assert session.state is SessionState.GAME_OVER
        assert session.model.snake == [Cell(19, 10)]
        assert session.interpolation == 0.0

    def test_idle_frames_do_not_move(self, session):
        session.on_frame(0)
        session.on_frame(5000)
        assert session.model.snake == [Cell(10, 10)]


class TestFoodRecovery:
    def test_missing_food_regenerated(self, session):
        session.model.food = None
        food = session.ensure_food()
        assert food is not None
        assert session.model.food == food
        assert food not in session.model.snake

    def test_out_of_bounds_food_regenerated(self, session):
        session.model.food = Cell(50, 50)
        assert session.model.in_bounds(session.ensure_food())

    def test_valid_food_untouched(self, session):
        session.model.food = Cell(3, 4)
        assert session.ensure_food() == Cell(3, 4)


class TestBoardSize:
    def test_small_board_starts_in_the_centre(self):
        """A board too small for (10, 10) starts the snake in its centre."""
        session = GameSession(tile_count=8, placer=FixedPlacer((0, 0)))
        assert session.model.snake == [Cell(4, 4)]
        assert session.model.in_bounds(session.model.head)

    def test_small_board_first_tick_moves(self):
        session = GameSession(tile_count=8, placer=FixedPlacer((0, 0)))
        session.start()
        assert session.on_tick() is TickResult.CONTINUE
        assert session.model.snake == [Cell(5, 4)]

    def test_small_board_restart_stays_on_board(self):
        session = GameSession(tile_count=5, placer=FixedPlacer((0, 0), (0, 0)))
        session.restart()
        assert session.model.snake == [Cell(2, 2)]

    def test_board_large_enough_keeps_default_start(self):
        session = GameSession(tile_count=11, placer=FixedPlacer((0, 0)))
        assert session.model.snake == [Cell(10, 10)]

    def test_off_board_segment_rejected(self):
        with pytest.raises(ValueError):
            GridModel(tile_count=8, snake=[Cell(10, 10)])

    def test_negative_segment_rejected(self):
        with pytest.raises(ValueError):
            GridModel(snake=[Cell(0, 0), Cell(-1, 0)])

    def test_repeated_segment_rejected(self):
        with pytest.raises(ValueError):
            GridModel(snake=[Cell(3, 3), Cell(3, 4), Cell(3, 3)])

    def test_empty_snake_gets_start_cell(self):
        assert GridModel(tile_count=6).snake == [Cell(3, 3)]
