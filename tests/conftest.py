from __future__ import annotations

import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame
import pytest

from systems.game_session import GameSession
from systems.simulation import SpawnPolicy

BINDINGS = {
    "move_left": ["left", "a"],
    "move_right": ["right", "d"],
    "move_up": ["up", "w"],
    "move_down": ["down", "s"],
}


class ScriptedRandom:
    """Stands in for random.Random with a fixed sequence of draws."""

    def __init__(self, values, ranges=()):
        self._values = list(values)
        self._ranges = list(ranges)

    def random(self) -> float:
        return self._values.pop(0) if self._values else 0.999

    def randrange(self, stop: int) -> int:
        return self._ranges.pop(0) if self._ranges else 0


@pytest.fixture
def pygame_display():
    pygame.display.init()
    pygame.font.init()
    yield
    pygame.quit()


@pytest.fixture
def quiet_spawner() -> SpawnPolicy:
    return SpawnPolicy(random.Random(0), orb_chance=0.0, enemy_chance=0.0)


@pytest.fixture
def session(quiet_spawner) -> GameSession:
    return GameSession(bounds=(960, 640), rng=random.Random(0),
                       spawner=quiet_spawner, bindings=BINDINGS)
