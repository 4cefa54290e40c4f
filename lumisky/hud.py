"""
Status overlay.

Responsibilities:
- One-line engine status (rockets, particles, show on/off, fps)
- Preset key legend
- Transient notices ("Designing: ...")
"""
import pygame

from .presets import PRESETS


def draw_panel(screen, rect, font, lines):
    surface = pygame.Surface(rect.size, pygame.SRCALPHA)
    surface.fill((15, 23, 42, 170))
    screen.blit(surface, rect.topleft)
    pygame.draw.rect(screen, (71, 85, 105), rect, 1)

    y = rect.y + 6
    for text, color in lines:
        t = font.render(text, True, color)
        screen.blit(t, (rect.x + 8, y))
        y += t.get_height() + 4


def status_lines(engine, autofire_on, fps):
    show = "ON" if autofire_on else "OFF"
    return [
        (f"Rockets {len(engine.rockets):3d}   Particles {len(engine.particles):5d}", (226, 232, 240)),
        (f"Show {show}   {fps:4.0f} fps", (250, 204, 21) if autofire_on else (148, 163, 184)),
    ]


def legend_lines():
    lines = [(f"{i + 1}  {p.name} ({p.config.shape.value})", (203, 213, 225)) for i, p in enumerate(PRESETS)]
    lines.append(("Space  start/stop show   C  clear   H  hud", (148, 163, 184)))
    lines.append(("Click the sky to launch", (148, 163, 184)))
    return lines


def draw_hud(screen, font, engine, autofire_on, fps, notice=None):
    lines = status_lines(engine, autofire_on, fps) + legend_lines()
    if notice:
        lines.append((notice, (167, 139, 250)))

    line_h = font.get_linesize() + 4
    rect = pygame.Rect(12, 12, 350, 12 + line_h * len(lines))
    draw_panel(screen, rect, font, lines)
