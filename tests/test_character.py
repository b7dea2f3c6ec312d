from __future__ import annotations

from entities.character import PlayerCharacter, StatsSnapshot
from entities.stats import Archetype, Gender


def _warrior() -> PlayerCharacter:
    return PlayerCharacter(Archetype.WARRIOR, Gender.FEMALE)


def test_new_character_starts_at_full_health_level_one() -> None:
    hero = _warrior()
    assert hero.stats_snapshot() == StatsSnapshot(
        level=1, experience=0, experience_to_next=100, health=120, max_health=120,
    )


def test_enemy_hits_drain_health_until_death() -> None:
    hero = _warrior()
    assert hero.take_damage(10) is False
    assert hero.health == 110

    for _ in range(9):
        hero.take_damage(10)
    assert hero.health == 20

    assert hero.take_damage(10) is False
    assert hero.health == 10
    assert hero.take_damage(10) is True
    assert hero.health == 0
    assert not hero.alive


def test_health_never_goes_negative() -> None:
    hero = PlayerCharacter(Archetype.MAGE)
    hero.take_damage(1000)
    assert hero.health == 0


def test_hundred_experience_levels_up_once() -> None:
    hero = _warrior()
    hero.take_damage(50)

    gained = sum(hero.gain_experience(10) for _ in range(10))

    assert gained == 1
    assert hero.level == 2
    assert hero.experience == 0
    assert hero.experience_to_next == 120
    assert hero.vitality == 13
    assert hero.max_health == 130
    assert hero.health == 130


def test_large_gain_crosses_several_thresholds() -> None:
    hero = _warrior()
    assert hero.gain_experience(250) == 2
    assert hero.level == 3
    assert hero.experience == 30
    assert hero.experience_to_next == 144
    assert hero.max_health == 140
    assert hero.health == hero.max_health


def test_below_threshold_does_not_level() -> None:
    hero = _warrior()
    assert hero.gain_experience(90) == 0
    assert hero.level == 1
    assert hero.experience == 90


def test_max_health_tracks_vitality_across_levels() -> None:
    hero = PlayerCharacter("archer")
    for _ in range(5):
        hero.gain_experience(hero.experience_to_next)
        assert hero.max_health == hero.vitality * 10
        assert 0 <= hero.health <= hero.max_health
    assert hero.level == 6
