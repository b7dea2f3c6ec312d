"""hud.py - Level, experience and health readout drawn over the canvas."""

from __future__ import annotations

import pygame
from entities.character import StatsSnapshot
from settings import WHITE, GRAY, HUD_COLOR, SMALL_FONT_SIZE
from systems.game_session import SessionListener

_BAR_WIDTH = 200
_BAR_HEIGHT = 14
_MARGIN = 16
_HEALTH_FILL = (50, 200, 50)
_HEALTH_LOW = (220, 60, 60)
_XP_FILL = (255, 220, 60)


class Hud(SessionListener):
    """Keeps the last published stats and draws them each frame."""

    def __init__(self):
        self.stats: StatsSnapshot | None = None

    def on_stats(self, stats: StatsSnapshot) -> None:
        self.stats = stats

    def lines(self) -> list[str]:
        s = self.stats
        if s is None:
            return []
        return [
            f"Level: {s.level}",
            f"Experience: {s.experience}/{s.experience_to_next}",
            f"Health: {s.health}/{s.max_health}",
        ]

    def draw(self, surface: pygame.Surface) -> None:
        if self.stats is None:
            return
        font = pygame.font.SysFont(None, SMALL_FONT_SIZE)
        y = _MARGIN
        for text in self.lines():
            surface.blit(font.render(text, True, HUD_COLOR), (_MARGIN, y))
            y += 20

        s = self.stats
        hp_frac = s.health / max(1, s.max_health)
        _draw_bar(surface, _MARGIN, y + 4, hp_frac,
                  _HEALTH_FILL if hp_frac > 0.25 else _HEALTH_LOW)
        xp_frac = s.experience / max(1, s.experience_to_next)
        _draw_bar(surface, _MARGIN, y + 8 + _BAR_HEIGHT, xp_frac, _XP_FILL)


def _draw_bar(surface, x, y, frac, fill_color):
    pygame.draw.rect(surface, GRAY, (x, y, _BAR_WIDTH, _BAR_HEIGHT), border_radius=4)
    fill_w = int(_BAR_WIDTH * max(0.0, min(1.0, frac)))
    if fill_w > 0:
        pygame.draw.rect(surface, fill_color, (x, y, fill_w, _BAR_HEIGHT), border_radius=4)
    pygame.draw.rect(surface, WHITE, (x, y, _BAR_WIDTH, _BAR_HEIGHT), 1, border_radius=4)
