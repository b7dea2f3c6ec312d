"""
stats.py  –  Per-run statistics tracking.

RunStats listens to a GameSession and collects contact and spawn events
during a single run, sampling level and health every
TREND_SAMPLE_INTERVAL ticks.  At game over it prints a formatted summary
and saves a level/health trend graph via matplotlib.
"""

import logging

logger = logging.getLogger(__name__)

import matplotlib
matplotlib.use("Agg")  # non-interactive backend so the plot doesn't block pygame
import matplotlib.pyplot as plt

from entities.entity import EntityKind
from settings import TREND_SAMPLE_INTERVAL, TREND_GRAPH_FILE
from systems.game_session import SessionListener


class RunStats(SessionListener):
    """Tracks events for one run and produces end-of-run reports.

    Attributes tracked:
        archetype          – str
        ticks              – int
        orbs_collected     – int
        hits_taken         – int
        damage_taken       – int
        experience_gained  – int
        levels_gained      – int
        orbs_spawned       – int
        enemies_spawned    – int
        culled             – int  (entities that left the canvas)
        trend              – list[(tick, level, health)]
    """

    def __init__(self, archetype: str = "", graph_path: str | None = TREND_GRAPH_FILE,
                 sample_interval: int = TREND_SAMPLE_INTERVAL):
        self.archetype = archetype
        self.graph_path = graph_path
        self.sample_interval = max(1, sample_interval)

        self.ticks = 0
        self.orbs_collected = 0
        self.hits_taken = 0
        self.damage_taken = 0
        self.experience_gained = 0
        self.levels_gained = 0
        self.orbs_spawned = 0
        self.enemies_spawned = 0
        self.culled = 0

        self.trend: list[tuple[int, int, int]] = []
        self.final_stats = None
        self._last_stats = None

    # ===========================================================
    #  Session hooks
    # ===========================================================

    def on_tick(self, report):
        self.ticks = report.tick
        res = report.resolution
        self.orbs_collected += res.orbs_collected
        self.hits_taken += res.hits_taken
        self.damage_taken += res.damage_taken
        self.experience_gained += res.experience_gained
        self.levels_gained += res.levels_gained
        self.culled += report.step.culled
        for entity in report.step.spawned:
            if entity.kind is EntityKind.ORB:
                self.orbs_spawned += 1
            else:
                self.enemies_spawned += 1

    def on_stats(self, stats):
        self._last_stats = stats
        if self.ticks % self.sample_interval == 0:
            self.trend.append((self.ticks, stats.level, stats.health))

    def on_game_over(self, stats):
        self.end_run(stats)

    # ===========================================================
    #  End-of-run
    # ===========================================================

    def end_run(self, stats=None):
        """Finalise stats, print summary, and save the trend graph."""
        self.final_stats = stats or self._last_stats
        if self.final_stats is not None:
            # Final sample so the graph always ends at the last tick
            self.trend.append((self.ticks, self.final_stats.level, self.final_stats.health))

        self._print_summary()
        if self.graph_path:
            self._plot_trend()

    # ===========================================================
    #  Reports
    # ===========================================================

    def _print_summary(self):
        """Print a clean formatted run summary to stdout."""
        print("\n" + "=" * 52)
        print("  RUN SUMMARY")
        print("=" * 52)
        print(f"  Class            : {self.archetype or '?'}")
        print(f"  Ticks survived   : {self.ticks}")
        if self.final_stats is not None:
            print(f"  Final level      : {self.final_stats.level}")
            print(f"  Experience       : {self.final_stats.experience}"
                  f"/{self.final_stats.experience_to_next}")
            print(f"  Health           : {self.final_stats.health}"
                  f"/{self.final_stats.max_health}")
        print("-" * 52)
        print(f"  Orbs collected   : {self.orbs_collected} / {self.orbs_spawned} spawned")
        print(f"  Enemy hits taken : {self.hits_taken} / {self.enemies_spawned} spawned")
        print(f"  Damage taken     : {self.damage_taken}")
        print(f"  Levels gained    : {self.levels_gained}")
        print(f"  Left the canvas  : {self.culled}")
        print("=" * 52 + "\n")

    def _plot_trend(self):
        """Save a line graph of level and health over the run to disk."""
        if not self.trend:
            return

        ticks = [t for t, _, _ in self.trend]
        levels = [lvl for _, lvl, _ in self.trend]
        health = [hp for _, _, hp in self.trend]

        fig, ax_hp = plt.subplots()
        ax_hp.plot(ticks, health, color="tab:red", marker="o", label="Health")
        ax_hp.set_xlabel("Tick")
        ax_hp.set_ylabel("Health")
        ax_lvl = ax_hp.twinx()
        ax_lvl.step(ticks, levels, color="tab:blue", where="post", label="Level")
        ax_lvl.set_ylabel("Level")
        ax_hp.set_title(f"Run Trend - {self.archetype or 'unknown'}")
        ax_hp.grid(True)

        fig.savefig(self.graph_path, dpi=100, bbox_inches="tight")
        plt.close(fig)
        logger.info("Trend graph saved to %s", self.graph_path)

    # ===========================================================
    #  Data accessors
    # ===========================================================

    def as_dict(self) -> dict:
        """Return a plain dict snapshot."""
        final = self.final_stats
        return {
            "archetype":         self.archetype,
            "ticks":             self.ticks,
            "orbs_collected":    self.orbs_collected,
            "hits_taken":        self.hits_taken,
            "damage_taken":      self.damage_taken,
            "experience_gained": self.experience_gained,
            "levels_gained":     self.levels_gained,
            "orbs_spawned":      self.orbs_spawned,
            "enemies_spawned":   self.enemies_spawned,
            "culled":            self.culled,
            "final_level":       final.level if final else None,
            "trend":             list(self.trend),
        }
