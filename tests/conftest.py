import random

import pytest

from flappy_box.config import DifficultyConfig
from flappy_box.data_models import Obstacle, Viewport
from flappy_box.physics_engine import SimulationEngine


class FixedRandom:
    """Stands in for random.Random: uniform() always lands at the same fraction."""

    def __init__(self, fraction: float = 0.5):
        self.fraction = fraction

    def uniform(self, a, b):
        return a + (b - a) * self.fraction


@pytest.fixture
def viewport():
    return Viewport(800, 600)


@pytest.fixture
def zero_gravity():
    return DifficultyConfig(gravity_ratio=0.0, gravity_min=0.0)


@pytest.fixture
def engine(zero_gravity, viewport):
    """Actor hovers at (200, 300); every spawned gap starts at y=300."""
    return SimulationEngine(config=zero_gravity, rng=FixedRandom(), viewport=viewport)


@pytest.fixture
def seeded_rng():
    return random.Random(1234)


def passed_obstacle(x=-50.0, width=80.0):
    """An obstacle already behind the actor but still on screen."""
    return Obstacle(x=x, width=width, gap_top=0.0, spacing=600.0, speed=3.0)
