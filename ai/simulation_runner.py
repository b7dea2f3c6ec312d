"""
simulation_runner.py – Automated headless runs.

Runs N full runs with a scripted pilot holding the movement keys, no
window and no real-time clock.  Each tick is a plain GameSession.tick(),
so the numbers match what a human would see at the fixed tick rate.

Usage (from CLI):
    python main.py --simulate 50 --seed 7
"""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass

from entities.entity import EntityKind
from entities.stats import Archetype, Gender
from keybinds import MOVE_KEYS
from settings import SIMULATION_MAX_TICKS, SIMULATION_DIRECTION_HOLD
from systems.game_session import GameSession

logger = logging.getLogger(__name__)

_FLEE_RADIUS = 90.0


# ══════════════════════════════════════════════════════════
#  Per-run result
# ══════════════════════════════════════════════════════════

@dataclass
class RunResult:
    """Lightweight record for one simulated run."""
    run_number: int = 0
    archetype: str = ""
    outcome: str = ""              # "game_over" or "timeout"
    ticks: int = 0
    final_level: int = 1
    orbs_collected: int = 0
    hits_taken: int = 0


# ══════════════════════════════════════════════════════════
#  Scripted pilot
# ══════════════════════════════════════════════════════════

class ScriptedPilot:
    """Presses movement keys on behalf of a player.

    Flees the nearest enemy inside _FLEE_RADIUS, otherwise heads for the
    nearest orb, otherwise wanders in a random direction for a while.
    """

    def __init__(self, rng: random.Random,
                 hold_ticks: int = SIMULATION_DIRECTION_HOLD):
        self.rng = rng
        self.hold_ticks = hold_ticks
        self._wander = (0, 0)
        self._wander_left = 0

    def drive(self, session: GameSession) -> tuple[int, int]:
        direction = self._choose(session)
        self._press(session, direction)
        return direction

    def _choose(self, session: GameSession) -> tuple[int, int]:
        player = session.store.player
        if player is None:
            return (0, 0)
        px, py = player.center

        nearest_enemy, enemy_dist = None, math.inf
        nearest_orb, orb_dist = None, math.inf
        for entity in session.store.all_entities():
            ex, ey = entity.center
            dist = math.hypot(ex - px, ey - py)
            if entity.kind is EntityKind.ORB:
                if dist < orb_dist:
                    nearest_orb, orb_dist = entity, dist
            elif dist < enemy_dist:
                nearest_enemy, enemy_dist = entity, dist

        if nearest_enemy is not None and enemy_dist < _FLEE_RADIUS:
            ex, ey = nearest_enemy.center
            return (_sign(px - ex), _sign(py - ey))
        if nearest_orb is not None:
            ox, oy = nearest_orb.center
            return (_sign(ox - px), _sign(oy - py))

        if self._wander_left <= 0:
            self._wander = (self.rng.randint(-1, 1), self.rng.randint(-1, 1))
            self._wander_left = self.hold_ticks
        self._wander_left -= 1
        return self._wander

    @staticmethod
    def _press(session: GameSession, direction: tuple[int, int]) -> None:
        dx, dy = direction
        held = {
            "move_left": dx < 0,
            "move_right": dx > 0,
            "move_up": dy < 0,
            "move_down": dy > 0,
        }
        for action, is_held in held.items():
            # First binding of each action is enough to drive movement.
            session.tracker.set_key(MOVE_KEYS[action][0], is_held)


def _sign(value: float) -> int:
    if value > 0.5:
        return 1
    if value < -0.5:
        return -1
    return 0


# ══════════════════════════════════════════════════════════
#  Simulation Runner
# ══════════════════════════════════════════════════════════

class SimulationRunner:
    """Run *n_runs* headless runs.

    Parameters
    ----------
    n_runs : int
        How many runs to play.
    seed : int | None
        Seed for the shared RNG; the same seed replays the same runs.
    max_ticks : int
        Hard cap per run.
    """

    def __init__(self, n_runs: int = 10, seed: int | None = None,
                 max_ticks: int = SIMULATION_MAX_TICKS,
                 session_factory=None) -> None:
        self._n_runs = max(1, n_runs)
        self._rng = random.Random(seed)
        self._max_ticks = max_ticks
        self._session_factory = session_factory or (lambda rng: GameSession(rng=rng))
        self._results: list[RunResult] = []

    # ── Public entry point ────────────────────────────────

    def run(self, print_summary: bool = True) -> list[RunResult]:
        """Execute all N runs, then print and return results."""
        for i in range(1, self._n_runs + 1):
            logger.info("=== Simulation run %d / %d ===", i, self._n_runs)
            result = self._run_one(i)
            self._results.append(result)
            logger.info(
                "Run %d: class=%s  outcome=%s  ticks=%d  level=%d  orbs=%d  hits=%d",
                i, result.archetype, result.outcome, result.ticks,
                result.final_level, result.orbs_collected, result.hits_taken,
            )
        if print_summary:
            self._print_summary()
        return self._results

    # ── Single run ────────────────────────────────────────

    def _run_one(self, run_number: int) -> RunResult:
        session = self._session_factory(self._rng)
        archetype = self._rng.choice(list(Archetype))
        gender = self._rng.choice(list(Gender))
        character = session.create_character(archetype, gender)
        pilot = ScriptedPilot(self._rng)

        orbs = hits = 0
        outcome = "timeout"
        while session.tick_count < self._max_ticks:
            pilot.drive(session)
            report = session.tick()
            if report is None:
                break
            orbs += report.resolution.orbs_collected
            hits += report.resolution.hits_taken
            if session.is_game_over:
                outcome = "game_over"
                break

        if outcome == "timeout":
            logger.warning("Run %d hit the %d tick cap", run_number, self._max_ticks)

        return RunResult(
            run_number=run_number,
            archetype=archetype.value,
            outcome=outcome,
            ticks=session.tick_count,
            final_level=character.level,
            orbs_collected=orbs,
            hits_taken=hits,
        )

    # ── Summary printout ──────────────────────────────────

    def _print_summary(self) -> None:
        n = len(self._results)
        if n == 0:
            print("\nNo runs completed.")
            return

        print(f"\n{'=' * 58}")
        print(f"  Simulation Results  ({n} runs)")
        print(f"{'=' * 58}")

        deaths = sum(1 for r in self._results if r.outcome == "game_over")
        print(f"\n  Game over   : {deaths:>4d}  ({100 * deaths / n:.1f}%)")
        print(f"  Timed out   : {n - deaths:>4d}")

        avg_ticks = sum(r.ticks for r in self._results) / n
        avg_level = sum(r.final_level for r in self._results) / n
        print(f"\n  Avg ticks survived : {avg_ticks:.0f}")
        print(f"  Avg final level    : {avg_level:.2f}")

        # ── Per-class table ───────────────────────────────
        counts: dict[str, int] = {}
        levels: dict[str, int] = {}
        for r in self._results:
            counts[r.archetype] = counts.get(r.archetype, 0) + 1
            levels[r.archetype] = levels.get(r.archetype, 0) + r.final_level

        print(f"\n  {'Class':<10s}  {'Runs':>4s}  {'AvgLvl':>6s}")
        print(f"  {'-' * 24}")
        for name in sorted(counts, key=lambda k: counts[k], reverse=True):
            print(f"  {name:<10s}  {counts[name]:>4d}  {levels[name] / counts[name]:>6.2f}")

        print(f"\n{'=' * 58}\n")
