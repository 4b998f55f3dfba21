import os
import random

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from flappy_plane.data_models import GameConfig
from flappy_plane.game_engine import GameEngine
from flappy_plane.score_db import ScoreStore


class FixedRandom(random.Random):
    """Always places the top pipe at the same height."""

    def __init__(self, top_height):
        super().__init__(0)
        self.top_height = top_height

    def randint(self, a, b):
        return self.top_height


@pytest.fixture
def store():
    with ScoreStore(":memory:") as s:
        yield s


@pytest.fixture
def engine(store):
    return GameEngine(store, "Ann", rng=random.Random(1234))


@pytest.fixture
def gliding_engine(store):
    """No gravity and every gap at 250..390, so the plane at y=300 always fits."""
    return GameEngine(store, "Ann", GameConfig(gravity=0.0), rng=FixedRandom(250))
