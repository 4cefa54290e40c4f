"""
Palette color handling.

Palettes are kept as CSS-style strings (the form presets and AI recipes use):
"#rrggbb", "#rgb", color names pygame knows, and "hsl(h, s%, l%)".
"""
import logging
import random
import re
from typing import Tuple

import pygame

logger = logging.getLogger("lumisky")

RGB = Tuple[int, int, int]

WHITE: RGB = (255, 255, 255)

_HSL_RE = re.compile(
    r"^hsla?\(\s*([-\d.]+)\s*,\s*([\d.]+)%\s*,\s*([\d.]+)%\s*(?:,\s*[\d.]+%?\s*)?\)$",
    re.IGNORECASE,
)
_SHORT_HEX_RE = re.compile(r"^#([0-9a-f])([0-9a-f])([0-9a-f])$", re.IGNORECASE)


def to_rgb(value: str) -> RGB:
    """Convert a palette string to an RGB tuple; unparseable values become white."""
    text = value.strip()

    m = _HSL_RE.match(text)
    if m:
        h, s, l = (float(g) for g in m.groups())
        color = pygame.Color(0, 0, 0)
        color.hsla = (h % 360, min(100.0, s), min(100.0, l), 100)
        return (color.r, color.g, color.b)

    m = _SHORT_HEX_RE.match(text)
    if m:
        text = "#" + "".join(ch * 2 for ch in m.groups())

    try:
        color = pygame.Color(text)
    except ValueError:
        logger.debug(f"Unparseable color {value!r}, using white")
        return WHITE
    return (color.r, color.g, color.b)


def to_rgba(rgb: RGB, alpha: float) -> Tuple[int, int, int, int]:
    """
    Premultiplied RGBA for an opacity in [0, 1].

    The color channels are scaled by the opacity too, which is what additive
    blending onto a premultiplied canvas expects.
    """
    a = max(0.0, min(1.0, alpha))
    return (int(rgb[0] * a), int(rgb[1] * a), int(rgb[2] * a), int(round(a * 255)))


def random_hex(rng: random.Random | None = None) -> str:
    rng = rng or random
    return f"#{rng.randrange(0x1000000):06x}"


def random_hsl(rng: random.Random | None = None) -> str:
    rng = rng or random
    return f"hsl({rng.uniform(0, 360):.0f}, 100%, 60%)"
