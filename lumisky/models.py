"""
Firework data model.

Responsibilities:
- Burst recipe records (PhysicsConfig, FireworkConfig) - frozen, so a rocket
  can hold the very object it was launched with
- Live entities (Rocket, Particle) - plain mutable slots, touched every frame
"""
from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional, Tuple

from . import config as C
from .colors import RGB


class Shape(str, enum.Enum):
    SPHERE = "sphere"
    HEART = "heart"
    STAR = "star"
    WILLOW = "willow"
    RING = "ring"


@dataclass(frozen=True)
class PhysicsConfig:
    friction: float = C.DEFAULT_FRICTION
    gravity: float = C.DEFAULT_GRAVITY
    initial_velocity: float = C.DEFAULT_INITIAL_VELOCITY
    decay: float = C.DEFAULT_DECAY

    def __post_init__(self) -> None:
        if not 0.0 < self.friction <= 1.0:
            raise ValueError(f"friction must be in (0, 1], got {self.friction}")
        if self.gravity < 0:
            raise ValueError(f"gravity must be >= 0, got {self.gravity}")
        if self.initial_velocity < 0:
            raise ValueError(f"initial_velocity must be >= 0, got {self.initial_velocity}")
        if not 0.0 < self.decay < 1.0:
            raise ValueError(f"decay must be in (0, 1), got {self.decay}")


@dataclass(frozen=True)
class FireworkConfig:
    colors: Tuple[str, ...] = C.DEFAULT_COLORS
    particle_count: int = C.DEFAULT_PARTICLE_COUNT
    physics: PhysicsConfig = field(default_factory=PhysicsConfig)
    shape: Shape = Shape.SPHERE
    name: Optional[str] = None

    def __post_init__(self) -> None:
        # accept lists / plain strings from callers, store immutable forms
        object.__setattr__(self, "colors", tuple(self.colors))
        object.__setattr__(self, "shape", Shape(self.shape))
        if not self.colors:
            raise ValueError("colors must not be empty")
        if int(self.particle_count) != self.particle_count or self.particle_count < 0:
            raise ValueError(f"particle_count must be a non-negative integer, got {self.particle_count}")
        object.__setattr__(self, "particle_count", int(self.particle_count))


class Rocket:
    __slots__ = ("x", "y", "prev_x", "prev_y", "vx", "vy", "color", "target_y", "config")

    def __init__(self, x, y, vx, vy, color: RGB, target_y, config: FireworkConfig):
        self.x = float(x)
        self.y = float(y)
        self.prev_x = self.x
        self.prev_y = self.y
        self.vx = float(vx)
        self.vy = float(vy)
        self.color = color
        self.target_y = float(target_y)
        self.config = config

    def __repr__(self):
        return (
            f"Rocket(x={self.x:.1f}, y={self.y:.1f}, vx={self.vx:.2f}, vy={self.vy:.2f}, "
            f"target_y={self.target_y:.1f}, shape={self.config.shape.value})"
        )


class Particle:
    __slots__ = (
        "x", "y", "prev_x", "prev_y", "vx", "vy",
        "color", "alpha", "decay", "size", "flicker",
        "friction", "gravity",
    )

    def __init__(
        self,
        x,
        y,
        vx,
        vy,
        color: RGB,
        decay,
        size,
        flicker=False,
        alpha=1.0,
        friction=C.DEFAULT_FRICTION,
        gravity=C.DEFAULT_GRAVITY,
    ):
        self.x = float(x)
        self.y = float(y)
        self.prev_x = self.x
        self.prev_y = self.y
        self.vx = float(vx)
        self.vy = float(vy)
        self.color = color
        self.alpha = float(alpha)
        self.decay = float(decay)
        self.size = float(size)
        self.flicker = bool(flicker)
        self.friction = float(friction)
        self.gravity = float(gravity)

    @property
    def damping(self) -> float:
        """Per-frame velocity scale; flickering sparks die down faster."""
        if self.flicker:
            return self.friction
        return 1.0 - (1.0 - self.friction) * C.STEADY_DRAG_SCALE
