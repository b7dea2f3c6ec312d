from __future__ import annotations

import random

import pytest

from conftest import BINDINGS, ScriptedRandom
from entities.enemy import Enemy, ExperienceOrb
from entities.entity import EntityKind
from systems.entity_store import EntityStore
from systems.input_tracker import InputTracker
from systems.simulation import (
    SimulationStep, SpawnPolicy, is_out_of_bounds, movement_direction,
)

BOUNDS = (960, 640)


def _quiet_step(store: EntityStore, tracker: InputTracker) -> SimulationStep:
    spawner = SpawnPolicy(ScriptedRandom([]), orb_chance=0.0, enemy_chance=0.0)
    return SimulationStep(store, tracker, BOUNDS, spawner=spawner, bindings=BINDINGS)


def test_opposite_keys_cancel() -> None:
    tracker = InputTracker()
    tracker.set_key("left", True)
    tracker.set_key("d", True)
    tracker.set_key("w", True)
    assert movement_direction(tracker, BINDINGS) == (0, -1)


def test_player_moves_three_units_per_tick() -> None:
    store, tracker = EntityStore(), InputTracker()
    store.spawn_player((480, 320), size=30)
    tracker.set_key("right", True)

    _quiet_step(store, tracker).step()

    assert (store.player.x, store.player.y) == (468, 305)


def test_player_stays_inside_canvas() -> None:
    store, tracker = EntityStore(), InputTracker()
    store.spawn_player((16, 16), size=30)
    tracker.set_key("left", True)
    tracker.set_key("up", True)
    sim = _quiet_step(store, tracker)

    for _ in range(5):
        sim.step()

    assert (store.player.x, store.player.y) == (0, 0)


@pytest.mark.parametrize("bounds", [(960, 640), (100, 80), (31, 31)])
def test_player_never_leaves_the_canvas(bounds) -> None:
    rng = random.Random(2024)
    store, tracker = EntityStore(), InputTracker()
    store.spawn_player((bounds[0] / 2, bounds[1] / 2), size=30)
    spawner = SpawnPolicy(ScriptedRandom([]), orb_chance=0.0, enemy_chance=0.0)
    sim = SimulationStep(store, tracker, bounds, spawner=spawner, bindings=BINDINGS)
    keys = [key for bound in BINDINGS.values() for key in bound]

    for _ in range(2000):
        for key in keys:
            tracker.set_key(key, rng.random() < 0.5)
        sim.step()
        player = store.player
        assert 0 <= player.x <= bounds[0] - player.width
        assert 0 <= player.y <= bounds[1] - player.height


def test_pursuer_advances_one_unit_toward_player() -> None:
    store, tracker = EntityStore(), InputTracker()
    store.spawn_player((480, 320), size=30)
    enemy = store.spawn(Enemy(365, 305))

    _quiet_step(store, tracker).step()

    assert enemy.x == pytest.approx(366)
    assert enemy.y == pytest.approx(305)


def test_pursuer_on_top_of_player_does_not_move() -> None:
    store, tracker = EntityStore(), InputTracker()
    player = store.spawn_player((480, 320), size=30)
    orb = store.spawn(ExperienceOrb(player.x, player.y))

    _quiet_step(store, tracker).step()

    assert (orb.x, orb.y) == (player.x, player.y)


def test_entities_past_the_margin_are_culled() -> None:
    store, tracker = EntityStore(), InputTracker()
    far = store.spawn(Enemy(-50.5, 100))
    edge = store.spawn(Enemy(-50, 100))
    below = store.spawn(ExperienceOrb(100, 691))

    report = _quiet_step(store, tracker).step()

    assert report.culled == 2
    assert far.id not in store
    assert below.id not in store
    assert edge.id in store


def test_out_of_bounds_margin() -> None:
    assert not is_out_of_bounds(Enemy(1010, 0), BOUNDS)
    assert is_out_of_bounds(Enemy(1010.1, 0), BOUNDS)
    assert is_out_of_bounds(Enemy(0, -51), BOUNDS)


def test_spawn_policy_places_orbs_on_the_canvas() -> None:
    policy = SpawnPolicy(ScriptedRandom([0.005, 0.25, 0.5, 0.9]),
                         orb_chance=0.01, enemy_chance=0.005)

    spawned = policy.roll(BOUNDS)

    assert len(spawned) == 1
    orb = spawned[0]
    assert orb.kind is EntityKind.ORB
    assert (orb.x, orb.y) == (240, 320)
    assert orb.width == 10


def test_spawn_policy_places_enemies_outside_an_edge() -> None:
    policy = SpawnPolicy(ScriptedRandom([0.5, 0.001, 0.25], ranges=[0]),
                         orb_chance=0.01, enemy_chance=0.005)

    spawned = policy.roll(BOUNDS)

    assert len(spawned) == 1
    enemy = spawned[0]
    assert enemy.kind is EntityKind.ENEMY
    assert (enemy.x, enemy.y) == (-30, 160)


@pytest.mark.parametrize(
    "edge, expected",
    [(1, (960, 320)), (2, (480, -30)), (3, (480, 640))],
)
def test_enemy_edges(edge, expected) -> None:
    policy = SpawnPolicy(ScriptedRandom([0.5, 0.0, 0.5], ranges=[edge]),
                         orb_chance=0.01, enemy_chance=0.005)
    (enemy,) = policy.roll(BOUNDS)
    assert (enemy.x, enemy.y) == expected


def test_step_reports_spawns() -> None:
    store, tracker = EntityStore(), InputTracker()
    spawner = SpawnPolicy(ScriptedRandom([0.0, 0.5, 0.5, 0.9]),
                          orb_chance=0.01, enemy_chance=0.005)
    sim = SimulationStep(store, tracker, BOUNDS, spawner=spawner, bindings=BINDINGS)

    report = sim.step()

    assert len(report.spawned) == 1
    assert report.spawned[0].id in store
