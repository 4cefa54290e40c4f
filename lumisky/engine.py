"""
Simulation engine.

Responsibilities:
- Own the live rockets and particles (the frame update is the only mutator)
- Accept launch requests from any producer (clicks, auto-fire, recipe threads)
  and drain them at the start of each frame
- Integrate rockets, detect the apex trigger, spawn bursts via the shape generator
- Integrate particles and retire them once fully faded
- Bound the live particle count (oldest first)
"""
import logging
import queue
import random
from typing import List, Optional, Tuple

from . import config as C
from . import shapes
from .colors import to_rgb
from .launcher import Launcher, Point
from .models import FireworkConfig, Particle, Rocket

logger = logging.getLogger("lumisky")

# alpha at or below this counts as fully faded (absorbs float drift in 1 - n*d)
ALPHA_EPSILON = 1e-9


class Engine:
    def __init__(
        self,
        width: int = C.WIDTH,
        height: int = C.HEIGHT,
        rng: random.Random | None = None,
        rocket_gravity: float = C.ROCKET_GRAVITY,
        trigger_vy_tolerance: float = C.TRIGGER_VY_TOLERANCE,
        sparkle_probability: float = C.SPARKLE_PROBABILITY,
        max_particles: int = C.MAX_LIVE_PARTICLES,
    ):
        self.rng = rng or random.Random()
        self.width = width
        self.height = height
        self.rocket_gravity = rocket_gravity
        self.trigger_vy_tolerance = trigger_vy_tolerance
        self.sparkle_probability = sparkle_probability
        self.max_particles = max_particles
        self.launcher = Launcher(width, height, gravity=rocket_gravity, rng=self.rng)

        self.rockets: List[Rocket] = []
        self.particles: List[Particle] = []
        self._requests: "queue.SimpleQueue[Tuple[FireworkConfig, Optional[Point]]]" = queue.SimpleQueue()

        self.frame = 0
        self.bursts = 0
        self.evicted = 0

    # ------------------------------------------------------------------
    # Producers (safe from any thread)
    # ------------------------------------------------------------------
    def launch(self, config: FireworkConfig, target: Optional[Point] = None) -> None:
        """Queue a launch; the rocket appears on the next update()."""
        self._requests.put((config, target))

    @property
    def pending_launches(self) -> int:
        return self._requests.qsize()

    # ------------------------------------------------------------------
    # Frame task
    # ------------------------------------------------------------------
    def resize(self, width: int, height: int) -> None:
        # in-flight entities keep their coordinates
        self.width = width
        self.height = height
        self.launcher.resize(width, height)

    def clean(self) -> None:
        self.rockets.clear()
        self.particles.clear()
        while True:
            try:
                self._requests.get_nowait()
            except queue.Empty:
                break

    def update(self) -> List[Tuple[float, float]]:
        """Advance one frame. Returns the points where rockets exploded."""
        self.frame += 1
        self._drain_requests()
        explosions = self._update_rockets()
        self._enforce_capacity()
        self._update_particles()
        return explosions

    def _drain_requests(self) -> None:
        while True:
            try:
                config, target = self._requests.get_nowait()
            except queue.Empty:
                return
            self.rockets.append(self.launcher.launch(config, target))

    def has_reached_apex(self, rocket: Rocket) -> bool:
        reached_target = rocket.y <= rocket.target_y and rocket.vy > self.trigger_vy_tolerance
        falling = rocket.vy >= 0
        return reached_target or falling

    def _update_rockets(self) -> List[Tuple[float, float]]:
        explosions = []
        ascending = []
        for r in self.rockets:
            r.prev_x, r.prev_y = r.x, r.y
            r.x += r.vx
            r.y += r.vy
            r.vy += self.rocket_gravity

            if self.rng.random() < self.sparkle_probability:
                self.particles.append(self._sparkle(r))

            if self.has_reached_apex(r):
                self.spawn_burst(r.x, r.y, r.config)
                explosions.append((r.x, r.y))
            else:
                ascending.append(r)
        self.rockets = ascending
        return explosions

    def _sparkle(self, rocket: Rocket) -> Particle:
        rng = self.rng
        return Particle(
            rocket.x,
            rocket.y,
            vx=rng.uniform(-0.5, 0.5),
            vy=rng.uniform(0.5, 1.5),
            color=rocket.color,
            alpha=C.SPARKLE_ALPHA,
            decay=rng.uniform(C.SPARKLE_DECAY_MIN, C.SPARKLE_DECAY_MAX),
            size=rng.uniform(0, 2),
            flicker=True,
        )

    def spawn_burst(self, x: float, y: float, config: FireworkConfig) -> List[Particle]:
        """Append one burst of ``config.particle_count`` particles centred on (x, y)."""
        rng = self.rng
        palette = [to_rgb(c) for c in config.colors]
        physics = config.physics
        total = config.particle_count

        burst = []
        for i in range(total):
            vx, vy, decay = shapes.generate(i, total, config, rng)
            burst.append(
                Particle(
                    x,
                    y,
                    vx,
                    vy,
                    color=rng.choice(palette),
                    decay=decay,
                    size=rng.uniform(1, 3),
                    flicker=rng.random() > 0.5,
                    friction=physics.friction,
                    gravity=physics.gravity,
                )
            )

        self.particles.extend(burst)
        self.bursts += 1
        logger.debug(f"Burst {config.shape.value} x{total} at ({x:.1f}, {y:.1f}); live particles={len(self.particles)}")
        return burst

    def _enforce_capacity(self) -> None:
        excess = len(self.particles) - self.max_particles
        if excess <= 0:
            return
        del self.particles[:excess]
        if self.evicted == 0:
            logger.warning(f"Particle capacity {self.max_particles} reached; evicting oldest particles")
        self.evicted += excess

    def _update_particles(self) -> None:
        alive = []
        for p in self.particles:
            p.prev_x, p.prev_y = p.x, p.y
            damping = p.damping
            p.vx *= damping
            p.vy *= damping
            p.vy += p.gravity
            p.x += p.vx
            p.y += p.vy
            p.alpha -= p.decay
            if p.alpha > ALPHA_EPSILON:
                alive.append(p)
            else:
                p.alpha = 0.0
        self.particles = alive
