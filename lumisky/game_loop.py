import logging
import random

import pygame

from . import config as C
from .autofire import AutoFire
from .engine import Engine
from .hud import draw_hud
from .presets import preset_by_id, vary_for_click
from .recipe import RecipeClient
from .renderer import Renderer
from .sky import Sky

logger = logging.getLogger("lumisky")

PRESET_KEYS = {
    pygame.K_1: "classic",
    pygame.K_2: "golden_willow",
    pygame.K_3: "love_heart",
    pygame.K_4: "neon_ring",
}


def run(width=C.WIDTH, height=C.HEIGHT, fps=C.FPS, autofire=False, recipe_prompt=None, show_hud=C.SHOW_HUD, seed=None):
    pygame.init()
    pygame.display.set_caption(C.TITLE)
    screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
    clock = pygame.time.Clock()
    font = pygame.font.SysFont(None, 22)

    rng = random.Random(seed)
    engine = Engine(width, height, rng=rng)
    renderer = Renderer(width, height)
    sky = Sky(width, height) if C.SHOW_SKY else None
    show = AutoFire(engine, rng=rng)
    show.set_enabled(autofire, pygame.time.get_ticks())

    recipe_thread = None
    if recipe_prompt:
        recipe_thread = RecipeClient().generate_in_background(recipe_prompt, engine.launch)

    logger.info(f"Sky open at {width}x{height}, {fps} fps cap")

    running = True
    while running:
        clock.tick(fps)
        now = pygame.time.get_ticks()

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                running = False
            elif e.type == pygame.VIDEORESIZE:
                width, height = e.w, e.h
                engine.resize(width, height)
                renderer.resize(width, height)
                if sky:
                    sky.resize(width, height)
                logger.debug(f"Resized to {width}x{height}")
            elif e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
                engine.launch(vary_for_click(rng), target=e.pos)
            elif e.type == pygame.KEYDOWN:
                if e.key == pygame.K_ESCAPE:
                    running = False
                elif e.key == pygame.K_SPACE:
                    show.toggle(now)
                elif e.key == pygame.K_c:
                    engine.clean()
                    renderer.clear()
                elif e.key == pygame.K_h:
                    show_hud = not show_hud
                elif e.key in PRESET_KEYS:
                    engine.launch(preset_by_id(PRESET_KEYS[e.key]).config)

        show.update(now)
        engine.update()
        renderer.render(engine)

        if sky:
            sky.draw(screen)
        else:
            screen.fill((0, 0, 0))
        renderer.present(screen)
        if show_hud:
            notice = None
            if recipe_thread is not None and recipe_thread.is_alive():
                notice = f"Designing: {recipe_prompt[:28]}"
            draw_hud(screen, font, engine, show.enabled, clock.get_fps(), notice)

        pygame.display.flip()

    show.cancel()
    logger.info(f"Closing sky after {engine.frame} frames, {engine.bursts} bursts")
    pygame.quit()
