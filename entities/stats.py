"""
stats.py – Character archetypes and the derived stat model.

Each archetype maps to four immutable base attributes.  Health and the
experience curve are derived from them:

    max health        = vitality × 10
    first threshold   = 100
    next threshold    = floor(current × 1.2)
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum

from errors import InvalidArchetype
from settings import (
    CLASS_STATS, HEALTH_PER_VITALITY,
    INITIAL_EXPERIENCE_THRESHOLD, EXPERIENCE_GROWTH,
)


class Archetype(str, Enum):
    """Playable character classes."""

    WARRIOR = "warrior"
    MAGE = "mage"
    ROGUE = "rogue"
    PRIEST = "priest"
    ARCHER = "archer"

    @classmethod
    def parse(cls, value) -> "Archetype":
        """Accept an Archetype or its name; fail fast on anything else."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise InvalidArchetype(value) from None


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"


@dataclass(frozen=True)
class Attributes:
    """Base attribute block.  Frozen; level-ups produce a new copy."""

    strength: int
    dexterity: int
    intelligence: int
    vitality: int

    def with_vitality(self, vitality: int) -> "Attributes":
        return replace(self, vitality=vitality)

    def as_dict(self) -> dict:
        return {
            "strength": self.strength,
            "dexterity": self.dexterity,
            "intelligence": self.intelligence,
            "vitality": self.vitality,
        }


# Built once at import; never mutated.
_BASE_ATTRIBUTES: dict[Archetype, Attributes] = {
    Archetype(name): Attributes(**values) for name, values in CLASS_STATS.items()
}


def base_attributes(archetype) -> Attributes:
    """Return the base attributes of *archetype*.

    Raises InvalidArchetype if the archetype is not a known class.
    """
    return _BASE_ATTRIBUTES[Archetype.parse(archetype)]


def derive_max_health(vitality: int) -> int:
    return vitality * HEALTH_PER_VITALITY


def initial_experience_threshold() -> int:
    return INITIAL_EXPERIENCE_THRESHOLD


def next_experience_threshold(current: int) -> int:
    """Experience required for the level after one that needed *current*."""
    return math.floor(current * EXPERIENCE_GROWTH)
