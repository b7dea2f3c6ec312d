"""
enemy.py – Non-player entities: enemies and experience orbs.

Both drift toward the player each tick (see ai/pursuit.py).  What happens
on contact is decided by the collision resolver from ``kind``.
"""

from __future__ import annotations

from entities.entity import SpatialEntity, EntityKind
from settings import ENEMY_SIZE, ORB_SIZE


class Enemy(SpatialEntity):
    """Hostile square; costs health on contact."""

    __slots__ = ()

    def __init__(self, x: float, y: float, size: float = ENEMY_SIZE):
        super().__init__(x, y, size, size, kind=EntityKind.ENEMY)


class ExperienceOrb(SpatialEntity):
    """Small pickup; grants experience on contact."""

    __slots__ = ()

    def __init__(self, x: float, y: float, size: float = ORB_SIZE):
        super().__init__(x, y, size, size, kind=EntityKind.ORB)
