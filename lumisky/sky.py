import random
from typing import List, Tuple

import pygame

from . import config as C


class Sky:
    """Night-sky backdrop: vertical gradient plus a scatter of dim stars, cached per size."""

    def __init__(
        self,
        width: int,
        height: int,
        count: int = C.STAR_COUNT,
        size_range: Tuple[int, int] = C.STAR_SIZES,
        top: Tuple[int, int, int] = C.SKY_TOP,
        bottom: Tuple[int, int, int] = C.SKY_BOTTOM,
    ) -> None:
        self.width = width
        self.height = height
        self.count = count
        self.size_range = size_range
        self.top = top
        self.bottom = bottom

        self.seed = random.randint(0, 999_999)
        self.stars: List[Tuple[float, float, int, Tuple[int, int, int]]] = []
        self.cached_surface: pygame.Surface | None = None

        self._generate()

    def _generate(self) -> None:
        rng = random.Random(self.seed)
        self.stars.clear()

        min_size, max_size = self.size_range
        min_size = max(1, min_size)
        max_size = max(min_size, max_size)

        for _ in range(self.count):
            brightness = rng.randint(60, 160)
            self.stars.append(
                (
                    rng.uniform(0, self.width),
                    # stars thin out toward the horizon
                    self.height * rng.random() ** 1.6,
                    rng.randint(min_size, max_size),
                    (brightness, brightness, min(255, brightness + 30)),
                )
            )

        surface = pygame.Surface((self.width, self.height))
        span = max(1, self.height - 1)
        for y in range(self.height):
            t = y / span
            color = tuple(int(a + (b - a) * t) for a, b in zip(self.top, self.bottom))
            pygame.draw.line(surface, color, (0, y), (self.width, y))

        for x, y, size, color in self.stars:
            pygame.draw.circle(surface, color, (int(x), int(y)), size)

        self.cached_surface = surface

    def resize(self, width: int, height: int) -> None:
        if (width, height) == (self.width, self.height):
            return
        self.width = width
        self.height = height
        self._generate()

    def draw(self, target: pygame.Surface) -> None:
        if self.cached_surface:
            target.blit(self.cached_surface, (0, 0))
