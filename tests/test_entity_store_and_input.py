from __future__ import annotations

import pygame
import pytest

from entities.enemy import Enemy, ExperienceOrb
from entities.entity import EntityKind
from entities.player import PlayerAvatar
from systems.entity_store import EntityStore
from systems.input_tracker import InputTracker


def test_spawn_player_centres_the_avatar() -> None:
    store = EntityStore()
    avatar = store.spawn_player((100, 100), size=30)
    assert store.player is avatar
    assert (avatar.x, avatar.y) == (85, 85)


def test_spawn_and_remove() -> None:
    store = EntityStore()
    orb = store.spawn(ExperienceOrb(1, 1))
    enemy = store.spawn(Enemy(5, 5))
    assert len(store) == 2
    assert orb.id in store

    assert store.remove(orb.id) is True
    assert store.remove(orb.id) is False
    assert store.all_entities() == (enemy,)


def test_store_rejects_a_second_player() -> None:
    store = EntityStore()
    with pytest.raises(ValueError):
        store.spawn(PlayerAvatar(0, 0))


def test_all_entities_is_a_snapshot() -> None:
    store = EntityStore()
    for i in range(5):
        store.spawn(ExperienceOrb(i, i))
    seen = []
    for entity in store.all_entities():
        store.remove(entity.id)
        seen.append(entity.id)
    assert len(seen) == 5
    assert len(store) == 0


def test_world_snapshot_is_render_ready() -> None:
    store = EntityStore()
    store.spawn_player((50, 50), size=30)
    store.spawn(ExperienceOrb(1, 2))
    store.spawn(Enemy(3, 4))

    snap = store.snapshot()
    assert snap.player.kind is EntityKind.PLAYER
    assert (snap.player.x, snap.player.y, snap.player.width) == (35, 35, 30)
    assert sorted(v.kind.value for v in snap.entities) == ["enemy", "orb"]


def test_clear_keeps_the_player() -> None:
    store = EntityStore()
    store.spawn_player((50, 50))
    store.spawn(Enemy(0, 0))
    store.clear()
    assert len(store) == 0
    assert store.player is not None


# ── Input tracker ─────────────────────────────────────────

def test_set_key_is_idempotent() -> None:
    tracker = InputTracker()
    tracker.set_key("a", True)
    before = tracker.state()
    tracker.set_key("a", True)
    tracker.set_key("a", True)
    assert tracker.state() == before == {"a": True}


def test_is_any_held() -> None:
    tracker = InputTracker()
    assert not tracker.is_any_held("left", "a")
    tracker.set_key("a", True)
    assert tracker.is_any_held("left", "a")
    tracker.set_key("a", False)
    assert not tracker.is_any_held("left", "a")


def test_clear_releases_everything() -> None:
    tracker = InputTracker()
    tracker.set_key("w", True)
    tracker.clear()
    assert not tracker.is_held("w")


def test_handle_event_uses_key_names(pygame_display) -> None:
    tracker = InputTracker()
    down = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_LEFT)
    up = pygame.event.Event(pygame.KEYUP, key=pygame.K_LEFT)

    assert tracker.handle_event(down) == "left"
    assert tracker.is_held("left")
    tracker.handle_event(up)
    assert not tracker.is_held("left")


def test_handle_event_ignores_other_events(pygame_display) -> None:
    tracker = InputTracker()
    assert tracker.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(0, 0))) is None
    assert tracker.state() == {}
