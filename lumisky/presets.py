"""
Built-in firework presets and the random variations applied to them.

Responsibilities:
- Default physics / default recipe
- The preset catalogue (keys 1-4 in the interactive loop)
- Click and auto-fire variations, which always return new frozen configs
"""
import random
from dataclasses import dataclass, replace
from typing import List

from . import config as C
from .colors import random_hsl
from .models import FireworkConfig, PhysicsConfig, Shape

DEFAULT_PHYSICS = PhysicsConfig()
DEFAULT_CONFIG = FireworkConfig()


@dataclass(frozen=True)
class Preset:
    id: str
    name: str
    config: FireworkConfig


PRESETS: List[Preset] = [
    Preset(
        id="classic",
        name="Classic Multi",
        config=FireworkConfig(
            colors=("#ef4444", "#3b82f6", "#22c55e", "#ffffff"),
            particle_count=120,
            physics=replace(DEFAULT_PHYSICS, decay=0.015),
            shape=Shape.SPHERE,
            name="Classic Multi",
        ),
    ),
    Preset(
        id="golden_willow",
        name="Golden Willow",
        config=FireworkConfig(
            colors=("#fbbf24", "#d97706"),
            particle_count=150,
            physics=replace(DEFAULT_PHYSICS, friction=0.98, gravity=0.02, decay=0.008),
            shape=Shape.WILLOW,
            name="Golden Willow",
        ),
    ),
    Preset(
        id="love_heart",
        name="Love Heart",
        config=FireworkConfig(
            colors=("#ec4899", "#f472b6"),
            particle_count=80,
            physics=replace(DEFAULT_PHYSICS, friction=0.94),
            shape=Shape.HEART,
            name="Love Heart",
        ),
    ),
    Preset(
        id="neon_ring",
        name="Neon Ring",
        config=FireworkConfig(
            colors=("#06b6d4", "#8b5cf6"),
            particle_count=100,
            physics=replace(DEFAULT_PHYSICS, initial_velocity=8),
            shape=Shape.RING,
            name="Neon Ring",
        ),
    ),
]


def preset_by_id(preset_id: str) -> Preset:
    for p in PRESETS:
        if p.id == preset_id:
            return p
    raise KeyError(preset_id)


def _scaled_velocity(config: FireworkConfig, lo: float, hi: float, rng) -> PhysicsConfig:
    return replace(config.physics, initial_velocity=config.physics.initial_velocity * rng.uniform(lo, hi))


def vary_for_click(rng: random.Random | None = None) -> FireworkConfig:
    """Random preset with a chance of a fresh palette, a punchier/softer burst and a star swap."""
    rng = rng or random
    base = rng.choice(PRESETS).config

    colors = base.colors
    if rng.random() <= 0.5:
        colors = (random_hsl(rng), random_hsl(rng), "#ffffff")

    shape = Shape.STAR if rng.random() > 0.8 else base.shape

    return replace(
        base,
        colors=colors,
        physics=_scaled_velocity(base, 0.8, 1.2, rng),
        shape=shape,
    )


def vary_for_autofire(rng: random.Random | None = None) -> FireworkConfig:
    rng = rng or random
    base = rng.choice(PRESETS).config
    return replace(base, physics=_scaled_velocity(base, 0.9, 1.1, rng))
