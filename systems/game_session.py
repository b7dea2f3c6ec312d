"""
game_session.py – The simulation context for one player's runs.

GameSession owns everything a tick touches (character, entity store,
input, run state, RNG) and is handed to whoever drives the loop: the
pygame window in main.py, the headless runner, or a test.  There is no
module-level game state.

Per tick:  SimulationStep.step()  →  CollisionResolver.resolve()
           →  listeners.on_stats()  (→ listeners.on_game_over())
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from entities.character import PlayerCharacter, StatsSnapshot
from entities.stats import Archetype, Gender
from errors import InvalidTransition, MissingSelection
from settings import (
    SCREEN_WIDTH, SCREEN_HEIGHT, PLAYER_SIZE,
    TICK_SECONDS, MAX_TICKS_PER_FRAME,
)
from systems.collision_system import CollisionResolver, ResolutionReport
from systems.entity_store import EntityStore, WorldSnapshot
from systems.input_tracker import InputTracker
from systems.run_state import RunState, RunPhase
from systems.simulation import SimulationStep, SpawnPolicy, StepReport

logger = logging.getLogger(__name__)


class SessionListener:
    """Hooks the session calls to publish state.  Override what you need."""

    def on_stats(self, stats: StatsSnapshot) -> None:
        pass

    def on_tick(self, report: "TickReport") -> None:
        pass

    def on_game_over(self, stats: StatsSnapshot) -> None:
        pass


@dataclass
class TickReport:
    tick: int
    step: StepReport
    resolution: ResolutionReport


# ══════════════════════════════════════════════════════════
#  Fixed-step clock
# ══════════════════════════════════════════════════════════

class FixedStepClock:
    """Turns variable frame times into a whole number of fixed ticks.

    Movement speeds are per tick, so running ticks at a fixed rate keeps
    game pacing the same on a 30 Hz and a 144 Hz display.
    """

    def __init__(self, tick_seconds: float = TICK_SECONDS,
                 max_ticks: int = MAX_TICKS_PER_FRAME):
        self.tick_seconds = tick_seconds
        self.max_ticks = max_ticks
        self._accumulator = 0.0

    def advance(self, elapsed: float) -> int:
        """Add *elapsed* seconds; return how many ticks are due."""
        self._accumulator += max(0.0, elapsed)
        due = int(self._accumulator // self.tick_seconds)
        if due > self.max_ticks:
            # Drop the backlog instead of spiralling after a stall.
            self._accumulator = 0.0
            return self.max_ticks
        self._accumulator -= due * self.tick_seconds
        return due

    def reset(self) -> None:
        self._accumulator = 0.0


# ══════════════════════════════════════════════════════════
#  Session
# ══════════════════════════════════════════════════════════

class GameSession:
    """Explicit context object driven by an external loop."""

    def __init__(self, bounds: tuple[float, float] = (SCREEN_WIDTH, SCREEN_HEIGHT),
                 rng: random.Random | None = None,
                 spawner: SpawnPolicy | None = None,
                 bindings: dict[str, list[str]] | None = None):
        self.bounds = bounds
        self.rng = rng or random.Random()
        self.store = EntityStore()
        self.tracker = InputTracker()
        self.run_state = RunState()
        self.character: PlayerCharacter | None = None
        self.tick_count = 0

        self.simulation = SimulationStep(
            self.store, self.tracker, bounds,
            spawner=spawner or SpawnPolicy(self.rng),
            bindings=bindings,
        )
        self.resolver = CollisionResolver()
        self._listeners: list[SessionListener] = []

    # ── Listeners ─────────────────────────────────────────

    def add_listener(self, listener: SessionListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: SessionListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # ── Queries ───────────────────────────────────────────

    @property
    def phase(self) -> RunPhase:
        return self.run_state.phase

    @property
    def is_game_over(self) -> bool:
        return self.run_state.is_game_over

    def snapshot(self) -> WorldSnapshot:
        return self.store.snapshot()

    def stats(self) -> StatsSnapshot | None:
        return self.character.stats_snapshot() if self.character else None

    # ── Lifecycle ─────────────────────────────────────────

    def begin_creation(self) -> None:
        """Title / game-over screen → character creation."""
        self.run_state.transition(RunPhase.CREATING)

    def return_to_title(self) -> None:
        if self.phase is not RunPhase.TITLE:
            self.run_state.transition(RunPhase.TITLE)
        self.tracker.clear()

    def create_character(self, archetype, gender) -> PlayerCharacter:
        """Character-creation event: build the character and start a run.

        Raises
        ------
        MissingSelection : *gender* was not chosen
        InvalidArchetype : *archetype* is not a known class
        """
        if gender is None:
            raise MissingSelection("choose a gender before starting")
        archetype = Archetype.parse(archetype)
        gender = Gender(gender)

        if self.phase in (RunPhase.TITLE, RunPhase.GAME_OVER):
            self.begin_creation()
        if not self.run_state.can_transition(RunPhase.ACTIVE):
            raise InvalidTransition(f"cannot start a run while {self.phase.value}")

        self.character = PlayerCharacter(archetype, gender)
        self.store.clear()
        self.tracker.clear()
        width, height = self.bounds
        self.store.spawn_player((width / 2, height / 2), PLAYER_SIZE)
        self.tick_count = 0

        self.run_state.transition(RunPhase.ACTIVE)
        logger.info("Character created: %s %s", gender.value, archetype.value)
        self._publish_stats()
        return self.character

    def resize(self, bounds: tuple[float, float]) -> None:
        """Canvas resized; later clamps and culls use the new size.

        The avatar is pulled back inside at once so a shrink never
        leaves it off-canvas.
        """
        self.bounds = bounds
        self.simulation.bounds = bounds
        if self.store.player is not None:
            self.store.player.move(0, 0, bounds)
        logger.debug("Canvas resized to %dx%d", *bounds)

    # ── Per-frame ─────────────────────────────────────────

    def tick(self) -> TickReport | None:
        """Advance one tick.  Does nothing unless a run is active."""
        if not self.run_state.is_active or self.character is None:
            return None

        step = self.simulation.step()
        resolution = self.resolver.resolve(self.store, self.character)
        self.tick_count += 1
        report = TickReport(self.tick_count, step, resolution)

        for listener in list(self._listeners):
            listener.on_tick(report)
        self._publish_stats()

        if resolution.game_over:
            self.run_state.transition(RunPhase.GAME_OVER)
            logger.info("Game Over after %d ticks", self.tick_count)
            final = self.character.stats_snapshot()
            for listener in list(self._listeners):
                listener.on_game_over(final)
        return report

    def run_ticks(self, count: int) -> int:
        """Run up to *count* ticks, stopping early at game over."""
        ran = 0
        for _ in range(count):
            if self.tick() is None:
                break
            ran += 1
        return ran

    def _publish_stats(self) -> None:
        stats = self.character.stats_snapshot()
        for listener in list(self._listeners):
            listener.on_stats(stats)
