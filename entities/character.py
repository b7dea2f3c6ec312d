"""
character.py – Progression state of the player's character.

Holds level, experience and health for one run.  Damage and experience
events arrive from the collision resolver; everything derived (max health,
thresholds) is recomputed through the stat model so the invariants

    max_health == vitality × 10
    0 <= health <= max_health

hold after every mutation.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from entities.stats import (
    Archetype, Attributes, Gender,
    base_attributes, derive_max_health,
    initial_experience_threshold, next_experience_threshold,
)
from settings import LEVEL_UP_VITALITY

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StatsSnapshot:
    """Values published to the HUD after every resolution pass."""

    level: int
    experience: int
    experience_to_next: int
    health: int
    max_health: int


class PlayerCharacter:
    """The player's class, attributes and progression for a single run."""

    def __init__(self, archetype: Archetype, gender: Gender | None = None):
        self.archetype = Archetype.parse(archetype)
        self.gender = gender
        self.attributes: Attributes = base_attributes(self.archetype)

        self.level = 1
        self.experience = 0
        self.experience_to_next = initial_experience_threshold()

        self.max_health = derive_max_health(self.attributes.vitality)
        self.health = self.max_health

    # ── Queries ───────────────────────────────────────────

    @property
    def vitality(self) -> int:
        return self.attributes.vitality

    @property
    def alive(self) -> bool:
        return self.health > 0

    def stats_snapshot(self) -> StatsSnapshot:
        return StatsSnapshot(
            level=self.level,
            experience=self.experience,
            experience_to_next=self.experience_to_next,
            health=self.health,
            max_health=self.max_health,
        )

    # ── Events ────────────────────────────────────────────

    def take_damage(self, amount: int) -> bool:
        """Apply *amount* damage.  Returns True if this hit was lethal."""
        self.health = max(0, self.health - amount)
        return not self.alive

    def gain_experience(self, amount: int) -> int:
        """Add experience and apply every level-up it pays for.

        A single large gain may cross several thresholds, so the check
        loops until experience is below the current threshold.

        Returns the number of levels gained.
        """
        self.experience += amount
        gained = 0
        while self.experience >= self.experience_to_next:
            self._level_up()
            gained += 1
        return gained

    def _level_up(self) -> None:
        self.experience -= self.experience_to_next
        self.experience_to_next = next_experience_threshold(self.experience_to_next)
        self.level += 1

        self.attributes = self.attributes.with_vitality(
            self.attributes.vitality + LEVEL_UP_VITALITY,
        )
        self.max_health = derive_max_health(self.attributes.vitality)
        self.health = self.max_health   # full heal
        logger.info(
            "Level up: %s reached level %d (HP %d, next at %d xp)",
            self.archetype.value, self.level,
            self.max_health, self.experience_to_next,
        )

    def __repr__(self) -> str:
        return (
            f"PlayerCharacter({self.archetype.value}, lvl={self.level}, "
            f"xp={self.experience}/{self.experience_to_next}, "
            f"hp={self.health}/{self.max_health})"
        )
