import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from lumisky.models import FireworkConfig, PhysicsConfig, Shape


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def make_config():
    def _make(shape=Shape.SPHERE, count=100, velocity=6.0, decay=0.015, friction=0.95, gravity=0.04, colors=("#ff0000",)):
        return FireworkConfig(
            colors=colors,
            particle_count=count,
            physics=PhysicsConfig(friction=friction, gravity=gravity, initial_velocity=velocity, decay=decay),
            shape=shape,
        )

    return _make
