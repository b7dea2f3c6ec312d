"""helpers.py - Reusable drawing functions."""

import pygame
from entities.entity import EntityKind
from settings import (
    WHITE, FONT_SIZE,
    BG_COLOR, PLAYER_COLOR, ENEMY_COLOR, ORB_COLOR,
)

_KIND_COLORS = {
    EntityKind.PLAYER: PLAYER_COLOR,
    EntityKind.ENEMY: ENEMY_COLOR,
    EntityKind.ORB: ORB_COLOR,
}


def draw_text(surface, text, x, y, color=WHITE, size=FONT_SIZE):
    """Render a single line of text at (x, y)."""
    font = pygame.font.SysFont(None, size)
    rendered = font.render(text, True, color)
    surface.blit(rendered, (x, y))


def draw_world(surface, snapshot):
    """Clear the canvas and fill every entity box of a WorldSnapshot."""
    surface.fill(BG_COLOR)
    for view in snapshot.entities:
        pygame.draw.rect(surface, _KIND_COLORS[view.kind],
                         (int(view.x), int(view.y), int(view.width), int(view.height)))
    if snapshot.player is not None:
        p = snapshot.player
        pygame.draw.rect(surface, PLAYER_COLOR,
                         (int(p.x), int(p.y), int(p.width), int(p.height)))


def draw_end_screen(surface, message, lines=()):
    """Dark overlay with a large message, optional detail lines,
    and a restart hint."""
    width, height = surface.get_size()
    overlay = pygame.Surface((width, height))
    overlay.set_alpha(180)
    overlay.fill((0, 0, 0))
    surface.blit(overlay, (0, 0))

    big_font = pygame.font.SysFont(None, 72)
    text = big_font.render(message, True, WHITE)
    rect = text.get_rect(center=(width // 2, height // 2 - 60))
    surface.blit(text, rect)

    detail_font = pygame.font.SysFont(None, 30)
    y = height // 2
    for line in lines:
        surf = detail_font.render(line, True, (200, 200, 220))
        surface.blit(surf, surf.get_rect(center=(width // 2, y)))
        y += 30

    small_font = pygame.font.SysFont(None, 30)
    hint = small_font.render("Press N for a New Game  |  ESC for Title", True, WHITE)
    hint_rect = hint.get_rect(center=(width // 2, y + 40))
    surface.blit(hint, hint_rect)
