"""
collision_system.py – Contact between the player and enemies/orbs,
and the progression it causes.

Responsibilities:
- AABB overlap test (half-open on both axes)
- Orb contact: experience gain, level-ups (looped), orb removed
- Enemy contact: damage, enemy removed, game over at zero health

Runs after the simulation step so it sees post-movement positions.
Each entity present at the start of the pass is resolved at most once.
"""

from __future__ import annotations

import logging

from entities.character import PlayerCharacter
from entities.entity import EntityKind
from settings import ORB_EXPERIENCE, ENEMY_DAMAGE
from systems.entity_store import EntityStore

logger = logging.getLogger(__name__)


def is_colliding(a, b) -> bool:
    """True if the boxes of *a* and *b* overlap.

    Touching edges do not count.  Symmetric in its arguments.
    """
    return (a.x < b.x + b.width
            and a.x + a.width > b.x
            and a.y < b.y + b.height
            and a.y + a.height > b.y)


class ResolutionReport:
    """Encapsulates the result of one resolution pass for the game loop."""

    __slots__ = ("orbs_collected", "hits_taken", "levels_gained",
                 "damage_taken", "experience_gained", "game_over")

    def __init__(self):
        self.orbs_collected = 0
        self.hits_taken = 0
        self.levels_gained = 0
        self.damage_taken = 0
        self.experience_gained = 0
        self.game_over = False

    @property
    def any_contact(self) -> bool:
        return bool(self.orbs_collected or self.hits_taken)


class CollisionResolver:
    """Applies contact effects to the player character."""

    def __init__(self, orb_experience: int = ORB_EXPERIENCE,
                 enemy_damage: int = ENEMY_DAMAGE):
        self.orb_experience = orb_experience
        self.enemy_damage = enemy_damage

    def resolve(self, store: EntityStore,
                character: PlayerCharacter) -> ResolutionReport:
        report = ResolutionReport()
        player = store.player
        if player is None:
            return report

        for entity in store.all_entities():
            if not is_colliding(player, entity):
                continue

            store.remove(entity.id)
            if entity.kind is EntityKind.ORB:
                report.orbs_collected += 1
                report.experience_gained += self.orb_experience
                report.levels_gained += character.gain_experience(self.orb_experience)
            else:
                report.hits_taken += 1
                report.damage_taken += self.enemy_damage
                if character.take_damage(self.enemy_damage):
                    report.game_over = True
                    logger.info("Player fell at level %d", character.level)
                    # Frozen from here on; remaining contacts are left alone.
                    break

        if report.any_contact:
            logger.debug(
                "Resolved %d orb(s), %d hit(s) -> %r",
                report.orbs_collected, report.hits_taken, character,
            )
        return report
