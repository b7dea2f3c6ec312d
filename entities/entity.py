"""
entity.py – Axis-aligned bounding-box entities on the canvas.

Every entity carries an explicit kind tag (player, enemy, orb).  Positions
are floats so pursuit can advance by fractions of a unit; ``rect`` gives
the integer pygame rect used for drawing.
"""

from __future__ import annotations

import itertools
from enum import Enum

import pygame
from settings import ORB_SIZE_LIMIT

_next_id = itertools.count(1)


class EntityKind(Enum):
    PLAYER = "player"
    ENEMY = "enemy"
    ORB = "orb"


def classify_by_size(width: float) -> EntityKind:
    """Legacy size rule: anything narrower than 20 units is an orb."""
    return EntityKind.ORB if width < ORB_SIZE_LIMIT else EntityKind.ENEMY


class SpatialEntity:
    """Bounding box {x, y, width, height} with a kind and a unique id."""

    __slots__ = ("id", "kind", "x", "y", "width", "height")

    def __init__(self, x: float, y: float, width: float, height: float,
                 kind: EntityKind | None = None):
        self.id = next(_next_id)
        self.kind = kind if kind is not None else classify_by_size(width)
        self.x = float(x)
        self.y = float(y)
        self.width = width
        self.height = height

    @property
    def is_orb(self) -> bool:
        return self.kind is EntityKind.ORB

    @property
    def is_enemy(self) -> bool:
        return self.kind is EntityKind.ENEMY

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)

    @property
    def box(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.width, self.height)

    @property
    def rect(self) -> pygame.Rect:
        """Integer rect for rendering."""
        return pygame.Rect(int(self.x), int(self.y), int(self.width), int(self.height))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(id={self.id}, kind={self.kind.value}, "
            f"x={self.x:.1f}, y={self.y:.1f}, w={self.width}, h={self.height})"
        )
