"""
Burst velocity fields.

Each shape maps (index, total, config) to an initial velocity plus the
per-frame alpha decay for one particle of the burst. Generators are pure
apart from the random source they are handed, so a seeded
``random.Random`` reproduces a burst exactly.
"""
import math
import random
from typing import Callable, Dict, Tuple

from .models import FireworkConfig, Shape

Velocity = Tuple[float, float, float]  # vx, vy, decay per frame

TWO_PI = math.pi * 2

STAR_SPIKES = 5
STAR_JITTER = 0.25
HEART_SCALE = 0.15
WILLOW_VELOCITY = 0.6
WILLOW_DECAY = 0.5
RING_BAND = 0.1


def _jittered_decay(config: FireworkConfig, rng: random.Random) -> float:
    return config.physics.decay * rng.uniform(0.8, 1.2)


def _sphere(index: int, total: int, config: FireworkConfig, rng: random.Random) -> Velocity:
    angle = rng.uniform(0, TWO_PI)
    speed = rng.uniform(0, config.physics.initial_velocity)
    return math.cos(angle) * speed, math.sin(angle) * speed, _jittered_decay(config, rng)


def _willow(index: int, total: int, config: FireworkConfig, rng: random.Random) -> Velocity:
    # same disk as the sphere, just slower and twice as long-lived
    angle = rng.uniform(0, TWO_PI)
    speed = rng.uniform(0, config.physics.initial_velocity * WILLOW_VELOCITY)
    return math.cos(angle) * speed, math.sin(angle) * speed, config.physics.decay * WILLOW_DECAY


def heart_point(t: float) -> Tuple[float, float]:
    """Unscaled heart curve at parameter t, y pointing down (screen space)."""
    x = 16 * math.sin(t) ** 3
    y = -(13 * math.cos(t) - 5 * math.cos(2 * t) - 2 * math.cos(3 * t) - math.cos(4 * t))
    return x, y


def _heart(index: int, total: int, config: FireworkConfig, rng: random.Random) -> Velocity:
    t = (index / total) * TWO_PI
    scale = rng.uniform(0, config.physics.initial_velocity) * HEART_SCALE
    hx, hy = heart_point(t)
    return hx * scale, hy * scale, _jittered_decay(config, rng)


def _ring(index: int, total: int, config: FireworkConfig, rng: random.Random) -> Velocity:
    angle = rng.uniform(0, TWO_PI)
    speed = config.physics.initial_velocity * (1 - RING_BAND + RING_BAND * rng.random())
    return math.cos(angle) * speed, math.sin(angle) * speed, _jittered_decay(config, rng)


def star_spike_angle(index: int, total: int) -> float:
    """Base angle of the spike a particle belongs to; spikes start straight up."""
    sector = math.floor(index / (total / STAR_SPIKES))
    return sector * (TWO_PI / STAR_SPIKES) - math.pi / 2


def _star(index: int, total: int, config: FireworkConfig, rng: random.Random) -> Velocity:
    angle = star_spike_angle(index, total) + rng.uniform(-STAR_JITTER, STAR_JITTER)
    speed = config.physics.initial_velocity * (0.5 + 0.8 * rng.random())
    return math.cos(angle) * speed, math.sin(angle) * speed, _jittered_decay(config, rng)


GENERATORS: Dict[Shape, Callable[[int, int, FireworkConfig, random.Random], Velocity]] = {
    Shape.SPHERE: _sphere,
    Shape.WILLOW: _willow,
    Shape.HEART: _heart,
    Shape.RING: _ring,
    Shape.STAR: _star,
}


def generate(index: int, total: int, config: FireworkConfig, rng: random.Random | None = None) -> Velocity:
    """Initial (vx, vy, decay) for particle ``index`` of a ``total``-particle burst."""
    return GENERATORS[config.shape](index, total, config, rng or random)
