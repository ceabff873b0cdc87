import os
import random

# Headless SDL so the host modules import and draw without a display.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from grid_snake.model import Cell, GridModel
from grid_snake.session import GameSession
from helpers import FixedPlacer


@pytest.fixture
def placer():
    return FixedPlacer((0, 0))


@pytest.fixture
def model():
    m = GridModel(snake=[Cell(10, 10)])
    m.food = Cell(0, 0)
    return m


@pytest.fixture
def session():
    return GameSession(rng=random.Random(1234))
