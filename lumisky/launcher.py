"""
Launch controller: turns a firework recipe (plus an optional on-screen target)
into a Rocket starting at the bottom edge of the viewport.

Targeted launches fly a true ballistic arc whose apex is the target point;
ambient launches just head upward with a little drift.
"""
import logging
import math
import random
from typing import Optional, Tuple

from . import config as C
from .colors import to_rgb
from .models import FireworkConfig, Rocket

logger = logging.getLogger("lumisky")

Point = Tuple[float, float]


def apex_launch_velocity(start: Point, target: Point, gravity: float) -> Optional[Tuple[float, float]]:
    """
    Launch velocity (vx, vy) whose vertical component reaches zero exactly at
    the target height, arriving above the target x at that same instant.

    Returns None when no arc exists (target not above the start, or no gravity).
    """
    dy = max(0.0, start[1] - target[1])
    if dy <= 0 or gravity <= 0:
        return None

    vy = -math.sqrt(2 * gravity * dy)
    time_to_apex = -vy / gravity
    vx = (target[0] - start[0]) / time_to_apex
    return vx, vy


class Launcher:
    def __init__(self, width: int, height: int, gravity: float = C.ROCKET_GRAVITY, rng: random.Random | None = None):
        self.width = width
        self.height = height
        self.gravity = gravity
        self.rng = rng or random.Random()

    def resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    def launch(self, config: FireworkConfig, target: Optional[Point] = None) -> Rocket:
        color = to_rgb(config.colors[0])

        if target is not None:
            rocket = self._targeted(config, color, target)
            if rocket is not None:
                return rocket
            logger.debug(f"No arc to target {target}; falling back to an ambient launch")

        return self._ambient(config, color)

    def _targeted(self, config: FireworkConfig, color, target: Point) -> Optional[Rocket]:
        tx, ty = target
        offset = self.rng.uniform(-C.LAUNCH_SPREAD, C.LAUNCH_SPREAD) * self.width
        start_x = max(self.width * C.LAUNCH_MIN_X, min(self.width * C.LAUNCH_MAX_X, tx + offset))
        start_y = float(self.height)

        velocity = apex_launch_velocity((start_x, start_y), (tx, ty), self.gravity)
        if velocity is None:
            return None

        vx, vy = velocity
        logger.debug(f"Targeted launch {config.shape.value} from x={start_x:.1f} to ({tx:.1f}, {ty:.1f}) vx={vx:.2f} vy={vy:.2f}")
        return Rocket(start_x, start_y, vx, vy, color, ty, config)

    def _ambient(self, config: FireworkConfig, color) -> Rocket:
        span = C.LAUNCH_MAX_X - C.LAUNCH_MIN_X
        start_x = self.width * (C.LAUNCH_MIN_X + span * self.rng.random())
        target_y = self.height * self.rng.uniform(C.AMBIENT_TARGET_MIN, C.AMBIENT_TARGET_MAX)
        vy = self.rng.uniform(C.AMBIENT_VY_MIN, C.AMBIENT_VY_MAX)
        vx = self.rng.uniform(-C.AMBIENT_DRIFT, C.AMBIENT_DRIFT)
        logger.debug(f"Ambient launch {config.shape.value} from x={start_x:.1f} target_y={target_y:.1f}")
        return Rocket(start_x, self.height, vx, vy, color, target_y, config)
