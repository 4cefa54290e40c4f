"""
Firework renderer.

The canvas is a persistent premultiplied-alpha surface that is never cleared:
- each frame starts by eating away a fixed share of every pixel (trail fade),
  so earlier strokes linger as fading afterimages
- rockets and particles are stroked as short segments from their previous to
  their current position, and every segment is *added* onto the canvas so
  overlapping sparks saturate toward white instead of hiding each other
"""
import pygame

from . import config as C
from .colors import to_rgba


class Renderer:
    def __init__(self, width: int, height: int, fade_opacity: float = C.TRAIL_FADE_OPACITY):
        self.width = width
        self.height = height
        self.fade_opacity = fade_opacity
        self.canvas = pygame.Surface((width, height), pygame.SRCALPHA)
        self._strokes = pygame.Surface((width, height), pygame.SRCALPHA)

    @property
    def fade_keep(self) -> int:
        """8-bit multiplier applied to every channel by the trail fade."""
        return int(round(255 * (1.0 - self.fade_opacity)))

    def resize(self, width: int, height: int) -> None:
        # keep whatever is already glowing; only the surface extent changes
        canvas = pygame.Surface((width, height), pygame.SRCALPHA)
        canvas.blit(self.canvas, (0, 0), special_flags=pygame.BLEND_RGBA_MAX)
        self.canvas = canvas
        self._strokes = pygame.Surface((width, height), pygame.SRCALPHA)
        self.width = width
        self.height = height

    def fade(self) -> None:
        keep = self.fade_keep
        self.canvas.fill((keep, keep, keep, keep), special_flags=pygame.BLEND_RGBA_MULT)
        # 8-bit multiply never reaches zero on its own
        self.canvas.fill((1, 1, 1, 1), special_flags=pygame.BLEND_RGBA_SUB)

    def _add_stroke(self, color, start, end, width: int) -> None:
        # each segment is composited on its own so same-frame overlaps sum too
        scratch = self._strokes
        rect = pygame.draw.line(scratch, color, start, end, width)
        if rect.width and rect.height:
            self.canvas.blit(scratch, rect.topleft, area=rect, special_flags=pygame.BLEND_RGBA_ADD)
            scratch.fill((0, 0, 0, 0), rect)

    def draw(self, engine) -> None:
        for r in engine.rockets:
            self._add_stroke(
                to_rgba(r.color, 1.0),
                (r.prev_x, r.prev_y),
                (r.x, r.y),
                C.ROCKET_STROKE_WIDTH,
            )

        for p in engine.particles:
            self._add_stroke(
                to_rgba(p.color, p.alpha),
                (p.prev_x, p.prev_y),
                (p.x, p.y),
                max(1, int(round(p.size))),
            )

    def render(self, engine) -> None:
        self.fade()
        self.draw(engine)

    def present(self, target: pygame.Surface) -> None:
        target.blit(self.canvas, (0, 0), special_flags=pygame.BLEND_PREMULTIPLIED)

    def clear(self) -> None:
        self.canvas.fill((0, 0, 0, 0))
