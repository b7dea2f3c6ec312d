"""
entity_store.py – Owns the player avatar and the enemy/orb collection.

Entities are kept in an insertion-ordered dict keyed by id, so removal is
O(1) and order is never relied upon.  Readers get tuples, never the live
collection, which keeps removal during a pass safe.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from entities.entity import SpatialEntity, EntityKind
from entities.player import PlayerAvatar
from settings import PLAYER_SIZE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EntityView:
    """Render-ready bounding box of one entity."""

    kind: EntityKind
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class WorldSnapshot:
    """Read-only view of the store handed to the renderer each tick."""

    player: EntityView | None
    entities: tuple[EntityView, ...]


def _view(entity: SpatialEntity) -> EntityView:
    return EntityView(entity.kind, entity.x, entity.y, entity.width, entity.height)


class EntityStore:
    """Player avatar plus an unordered collection of enemies and orbs."""

    def __init__(self):
        self.player: PlayerAvatar | None = None
        self._entities: dict[int, SpatialEntity] = {}

    # ── Player ────────────────────────────────────────────

    def spawn_player(self, center: tuple[float, float],
                     size: float = PLAYER_SIZE) -> PlayerAvatar:
        """Create the avatar with its bounding box centred at *center*."""
        self.player = PlayerAvatar.centered_at(center, size)
        return self.player

    # ── Enemies / orbs ────────────────────────────────────

    def spawn(self, entity: SpatialEntity) -> SpatialEntity:
        if entity.kind is EntityKind.PLAYER:
            raise ValueError("the player avatar is owned by spawn_player()")
        self._entities[entity.id] = entity
        logger.debug("Spawned %r", entity)
        return entity

    def remove(self, entity_id: int) -> bool:
        """Drop an entity.  Returns False if it was already gone."""
        return self._entities.pop(entity_id, None) is not None

    def clear(self) -> None:
        self._entities.clear()

    def all_entities(self) -> tuple[SpatialEntity, ...]:
        return tuple(self._entities.values())

    def __len__(self) -> int:
        return len(self._entities)

    def __contains__(self, entity_id: int) -> bool:
        return entity_id in self._entities

    # ── Rendering ─────────────────────────────────────────

    def snapshot(self) -> WorldSnapshot:
        return WorldSnapshot(
            player=_view(self.player) if self.player is not None else None,
            entities=tuple(_view(e) for e in self._entities.values()),
        )
