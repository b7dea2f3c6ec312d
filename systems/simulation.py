"""
simulation.py – Per-tick world update.

One call to ``SimulationStep.step()`` does, in order:

1. move the player from the held movement keys (clamped to the canvas)
2. move every enemy/orb one step toward the player, culling any that
   drift more than DESPAWN_MARGIN past an edge
3. roll the spawn policy

Speeds are units per tick.  Real-time pacing comes from the fixed-step
clock in game_session.py, not from scaling here.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

from ai.pursuit import pursue
from entities.enemy import Enemy, ExperienceOrb
from entities.entity import SpatialEntity
from keybinds import MOVE_KEYS
from settings import (
    PLAYER_SPEED, PURSUIT_STEP, DESPAWN_MARGIN,
    ORB_SPAWN_CHANCE, ORB_SIZE,
    ENEMY_SPAWN_CHANCE, ENEMY_SIZE,
)
from systems.entity_store import EntityStore
from systems.input_tracker import InputTracker

logger = logging.getLogger(__name__)


@dataclass
class StepReport:
    """What one simulation step changed besides positions."""

    spawned: list[SpatialEntity] = field(default_factory=list)
    culled: int = 0


def movement_direction(tracker: InputTracker,
                       bindings: dict[str, list[str]] | None = None) -> tuple[int, int]:
    """Resolve held keys to (dir_x, dir_y), each -1, 0 or 1.

    Opposite directions held together cancel out.
    """
    b = bindings if bindings is not None else MOVE_KEYS
    dir_x = int(tracker.is_any_held(*b["move_right"])) - int(tracker.is_any_held(*b["move_left"]))
    dir_y = int(tracker.is_any_held(*b["move_down"])) - int(tracker.is_any_held(*b["move_up"]))
    return dir_x, dir_y


def is_out_of_bounds(entity: SpatialEntity, bounds: tuple[float, float],
                     margin: float = DESPAWN_MARGIN) -> bool:
    width, height = bounds
    return (entity.x < -margin or entity.x > width + margin
            or entity.y < -margin or entity.y > height + margin)


# ══════════════════════════════════════════════════════════
#  Spawn policy
# ══════════════════════════════════════════════════════════

class SpawnPolicy:
    """Random per-tick spawns.

    Orbs appear anywhere on the canvas.  Enemies appear just outside a
    random edge and walk in.
    """

    def __init__(self, rng: random.Random | None = None,
                 orb_chance: float = ORB_SPAWN_CHANCE,
                 enemy_chance: float = ENEMY_SPAWN_CHANCE):
        self.rng = rng or random.Random()
        self.orb_chance = orb_chance
        self.enemy_chance = enemy_chance

    def roll(self, bounds: tuple[float, float]) -> list[SpatialEntity]:
        width, height = bounds
        spawned: list[SpatialEntity] = []
        if self.rng.random() < self.orb_chance:
            spawned.append(ExperienceOrb(
                self.rng.random() * width,
                self.rng.random() * height,
                ORB_SIZE,
            ))
        if self.rng.random() < self.enemy_chance:
            spawned.append(self._enemy_at_edge(width, height))
        return spawned

    def _enemy_at_edge(self, width: float, height: float) -> Enemy:
        edge = self.rng.randrange(4)
        if edge == 0:      # left
            x, y = -ENEMY_SIZE, self.rng.random() * height
        elif edge == 1:    # right
            x, y = width, self.rng.random() * height
        elif edge == 2:    # top
            x, y = self.rng.random() * width, -ENEMY_SIZE
        else:              # bottom
            x, y = self.rng.random() * width, height
        return Enemy(x, y, ENEMY_SIZE)


# ══════════════════════════════════════════════════════════
#  Simulation step
# ══════════════════════════════════════════════════════════

class SimulationStep:
    """Moves the player and the drifting entities, then spawns."""

    def __init__(self, store: EntityStore, tracker: InputTracker,
                 bounds: tuple[float, float],
                 spawner: SpawnPolicy | None = None,
                 bindings: dict[str, list[str]] | None = None,
                 player_speed: float = PLAYER_SPEED,
                 pursuit_step: float = PURSUIT_STEP):
        self.store = store
        self.tracker = tracker
        self.bounds = bounds
        self.spawner = spawner or SpawnPolicy()
        self.bindings = bindings
        self.player_speed = player_speed
        self.pursuit_step = pursuit_step

    def step(self) -> StepReport:
        report = StepReport()
        player = self.store.player

        # ── Player ───────────────────────────────────────
        if player is not None:
            dir_x, dir_y = movement_direction(self.tracker, self.bindings)
            if dir_x or dir_y:
                player.move(dir_x, dir_y, self.bounds, self.player_speed)

        # ── Pursuit + culling ────────────────────────────
        for entity in self.store.all_entities():
            if player is not None:
                pursue(entity, player, self.pursuit_step)
            if is_out_of_bounds(entity, self.bounds):
                self.store.remove(entity.id)
                report.culled += 1

        # ── Spawns ───────────────────────────────────────
        for entity in self.spawner.roll(self.bounds):
            self.store.spawn(entity)
            report.spawned.append(entity)

        return report
