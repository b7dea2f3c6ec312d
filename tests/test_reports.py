from __future__ import annotations

import random

from ai.simulation_runner import RunResult, ScriptedPilot, SimulationRunner
from ai.stats import RunStats
from entities.enemy import Enemy, ExperienceOrb
from entities.stats import Archetype, Gender
from keybinds import MOVE_KEYS
from systems.game_session import GameSession
from systems.simulation import SpawnPolicy


def _kill(session: GameSession) -> None:
    player = session.store.player
    for _ in range(20):
        session.store.spawn(Enemy(player.x, player.y))
    session.tick()


# ── RunStats ──────────────────────────────────────────────

def test_run_stats_counts_contacts(session) -> None:
    stats = RunStats("warrior", graph_path=None, sample_interval=1)
    session.add_listener(stats)
    session.create_character(Archetype.WARRIOR, Gender.MALE)
    player = session.store.player
    session.store.spawn(ExperienceOrb(player.x, player.y))
    session.store.spawn(Enemy(player.x, player.y))

    session.tick()

    assert stats.ticks == 1
    assert stats.orbs_collected == 1
    assert stats.hits_taken == 1
    assert stats.damage_taken == 10
    assert stats.experience_gained == 10
    assert [t for t, _, _ in stats.trend] == [0, 1]


def test_run_stats_report_and_graph(session, tmp_path, capsys) -> None:
    graph = tmp_path / "trend.png"
    stats = RunStats("mage", graph_path=str(graph), sample_interval=2)
    session.add_listener(stats)
    session.create_character(Archetype.MAGE, Gender.FEMALE)
    session.run_ticks(4)
    _kill(session)

    assert session.is_game_over
    assert stats.final_stats.health == 0
    assert graph.exists()
    assert "RUN SUMMARY" in capsys.readouterr().out

    data = stats.as_dict()
    assert data["archetype"] == "mage"
    assert data["ticks"] == 5
    assert data["hits_taken"] == 6
    assert data["trend"][-1] == (5, 1, 0)


# ── Scripted pilot / runner ───────────────────────────────

def test_pilot_heads_for_the_nearest_orb(session) -> None:
    session.create_character(Archetype.ROGUE, Gender.MALE)
    player = session.store.player
    session.store.spawn(ExperienceOrb(player.x + 200, player.y - 100))

    direction = ScriptedPilot(random.Random(0)).drive(session)

    assert direction == (1, -1)
    assert session.tracker.is_held(MOVE_KEYS["move_right"][0])
    assert session.tracker.is_held(MOVE_KEYS["move_up"][0])


def test_pilot_flees_close_enemies(session) -> None:
    session.create_character(Archetype.ROGUE, Gender.MALE)
    player = session.store.player
    session.store.spawn(ExperienceOrb(player.x + 200, player.y))
    session.store.spawn(Enemy(player.x - 40, player.y))

    assert ScriptedPilot(random.Random(0)).drive(session) == (1, 0)


def _busy_factory(rng):
    return GameSession(rng=rng, spawner=SpawnPolicy(rng, orb_chance=0.02, enemy_chance=0.02))


def test_runner_is_reproducible_with_a_seed() -> None:
    first = SimulationRunner(3, seed=11, max_ticks=400, session_factory=_busy_factory)
    second = SimulationRunner(3, seed=11, max_ticks=400, session_factory=_busy_factory)

    a = first.run(print_summary=False)
    b = second.run(print_summary=False)

    assert a == b
    assert [r.run_number for r in a] == [1, 2, 3]
    for result in a:
        assert isinstance(result, RunResult)
        assert result.outcome in ("game_over", "timeout")
        assert 0 < result.ticks <= 400
        assert result.archetype in {kind.value for kind in Archetype}


def test_runner_prints_a_summary(capsys) -> None:
    SimulationRunner(2, seed=3, max_ticks=50, session_factory=_busy_factory).run()
    out = capsys.readouterr().out
    assert "Simulation Results  (2 runs)" in out
