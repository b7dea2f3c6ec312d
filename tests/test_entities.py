from __future__ import annotations

import pytest

from ai.pursuit import pursuit_step, pursue
from entities.enemy import Enemy, ExperienceOrb
from entities.entity import SpatialEntity, EntityKind, classify_by_size
from entities.player import PlayerAvatar


@pytest.mark.parametrize(
    "width, kind",
    [(10, EntityKind.ORB), (19.9, EntityKind.ORB), (20, EntityKind.ENEMY), (30, EntityKind.ENEMY)],
)
def test_size_rule_boundary(width, kind) -> None:
    assert classify_by_size(width) is kind
    assert SpatialEntity(0, 0, width, width).kind is kind


def test_explicit_kind_overrides_size() -> None:
    big_orb = SpatialEntity(0, 0, 40, 40, kind=EntityKind.ORB)
    assert big_orb.is_orb
    assert Enemy(0, 0, size=5).is_enemy
    assert ExperienceOrb(0, 0).is_orb


def test_entities_get_unique_ids() -> None:
    ids = {Enemy(0, 0).id for _ in range(50)}
    assert len(ids) == 50


def test_player_centered_at() -> None:
    avatar = PlayerAvatar.centered_at((480, 320), size=30)
    assert (avatar.x, avatar.y) == (465, 305)
    assert avatar.center == (480, 320)
    assert avatar.kind is EntityKind.PLAYER


def test_player_move_is_clamped_to_canvas() -> None:
    avatar = PlayerAvatar(1, 2, size=30)
    avatar.move(-1, -1, (100, 80), speed=3)
    assert (avatar.x, avatar.y) == (0, 0)

    avatar = PlayerAvatar(69, 49, size=30)
    avatar.move(1, 1, (100, 80), speed=3)
    assert (avatar.x, avatar.y) == (70, 50)


def test_player_move_steps_by_speed() -> None:
    avatar = PlayerAvatar(50, 50, size=30)
    avatar.move(1, -1, (500, 500), speed=3)
    assert (avatar.x, avatar.y) == (53, 47)


def test_pursuit_step_is_unit_length() -> None:
    dx, dy = pursuit_step(0, 0, 30, 40, step=1.0)
    assert dx == pytest.approx(0.6)
    assert dy == pytest.approx(0.8)


def test_pursuit_at_zero_distance_stays_put() -> None:
    orb = ExperienceOrb(10, 10)
    target = PlayerAvatar(10, 10)
    assert pursue(orb, target) is False
    assert (orb.x, orb.y) == (10, 10)


def test_pursue_moves_toward_target() -> None:
    enemy = Enemy(110, 10)
    target = PlayerAvatar(10, 10)
    assert pursue(enemy, target, step=1.0) is True
    assert (enemy.x, enemy.y) == (109, 10)
