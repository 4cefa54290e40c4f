import random

import pygame
import pytest

from lumisky.engine import Engine
from lumisky.hud import draw_hud, legend_lines, status_lines
from lumisky.sky import Sky


def test_sky_gradient_and_resize():
    sky = Sky(60, 40, count=0, top=(0, 0, 0), bottom=(0, 0, 200))
    target = pygame.Surface((60, 40))
    sky.draw(target)
    assert target.get_at((5, 0)).b < target.get_at((5, 39)).b

    sky.resize(80, 50)
    assert sky.cached_surface.get_size() == (80, 50)


def test_sky_star_count():
    sky = Sky(100, 100, count=25)
    assert len(sky.stars) == 25
    assert all(0 <= x <= 100 and 0 <= y <= 100 for x, y, _, _ in sky.stars)


def test_hud_lines():
    engine = Engine(100, 100, rng=random.Random(0))
    lines = status_lines(engine, True, 59.6)
    assert "Particles" in lines[0][0]
    assert "Show ON" in lines[1][0]
    assert len(legend_lines()) == 6


@pytest.fixture
def font():
    pygame.font.init()
    yield pygame.font.Font(None, 22)


def test_draw_hud_paints_panel(font):
    screen = pygame.Surface((400, 300))
    engine = Engine(400, 300, rng=random.Random(0))
    draw_hud(screen, font, engine, False, 60.0, notice="Designing: gold")
    assert tuple(screen.get_at((12, 12)))[:3] != (0, 0, 0)
