"""
main.py - Entry point for Orb Hunter.

Integrates all systems:
- Stat model and player character (entities/)
- Entity store, input tracker, simulation step, collisions (systems/)
- GameSession context driven by a fixed-step clock (systems/game_session.py)
- Character creation screen (systems/character_select.py)
- HUD and run statistics (systems/hud.py, ai/stats.py)
- Headless scripted runs (ai/simulation_runner.py)

Run:  python main.py
      python main.py --simulate 20 --seed 3
"""
VERSION = "1.0.0"

import argparse
import random
import logging
import sys

import pygame

logger = logging.getLogger(__name__)

# ── Project imports ───────────────────────────────────────
from settings import (
    SCREEN_WIDTH, SCREEN_HEIGHT, FPS, TITLE, WHITE, HINT_COLOR,
)
from keybinds import QUIT_KEY, ControlsMenu
from systems.game_session import GameSession, FixedStepClock, SessionListener
from systems.run_state import RunPhase
from systems.character_select import CharacterSelectScreen
from systems.hud import Hud
from ai.stats import RunStats
from ai.simulation_runner import SimulationRunner
from utils import draw_text, draw_world, draw_end_screen


# ══════════════════════════════════════════════════════════
#  GAME CLASS
# ══════════════════════════════════════════════════════════

class Game(SessionListener):
    """Top-level window controller.  Owns the loop, events, and rendering.

    All game state lives in ``self.session``; this class only turns
    pygame events into session calls and draws what the session exposes.
    """

    def __init__(self, seed: int | None = None):
        pygame.init()
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.RESIZABLE)
        pygame.display.set_caption(TITLE)
        self.clock = pygame.time.Clock()

        self.session = GameSession(bounds=(SCREEN_WIDTH, SCREEN_HEIGHT),
                                   rng=random.Random(seed))
        self.step_clock = FixedStepClock()
        self.hud = Hud()
        self.run_stats: RunStats | None = None
        self.session.add_listener(self.hud)
        self.session.add_listener(self)

        self.char_select: CharacterSelectScreen | None = None
        self.running = True
        self._title_message = ""

    # ── Session hooks ─────────────────────────────────────

    def on_game_over(self, stats) -> None:
        logger.info("Game Over! Level %d, %d/%d xp",
                    stats.level, stats.experience, stats.experience_to_next)

    # ── Main loop ─────────────────────────────────────────

    def run(self):
        """Start the game loop."""
        while self.running:
            self.clock.tick(FPS)
            dt = self.clock.get_time() / 1000.0
            phase = self.session.phase

            if phase is RunPhase.TITLE:
                self._handle_title_events()
                self._draw_title_screen()
            elif phase is RunPhase.CREATING:
                self._handle_creation_events(dt)
            elif phase is RunPhase.ACTIVE:
                self._handle_play_events()
                for _ in range(self.step_clock.advance(dt)):
                    self.session.tick()
                self._draw_play()
            elif phase is RunPhase.GAME_OVER:
                self._handle_game_over_events()
                self._draw_game_over()

        self._shutdown()

    def _shutdown(self):
        """Close the window, reporting a run that was quit mid-play."""
        if self.session.phase is RunPhase.ACTIVE and self.run_stats is not None:
            logger.info("Run abandoned after %d ticks", self.session.tick_count)
            self.run_stats.end_run(self.session.stats())
        pygame.quit()

    # ── Window events ─────────────────────────────────────

    def _handle_window_event(self, event) -> bool:
        """Quit and resize, shared by every screen.  True if consumed."""
        if event.type == pygame.QUIT:
            self.running = False
            return True
        if event.type == pygame.VIDEORESIZE:
            self.screen = pygame.display.set_mode(event.size, pygame.RESIZABLE)
            self._sync_canvas()
            return True
        return False

    def _sync_canvas(self):
        self.session.resize(self.screen.get_size())
        if self.char_select is not None:
            self.char_select.screen = self.screen

    # ── Title screen ──────────────────────────────────────

    def _handle_title_events(self):
        for event in pygame.event.get():
            if self._handle_window_event(event):
                continue
            if event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_RETURN, pygame.K_1):
                    self._open_creation()
                elif event.key == pygame.K_2:
                    logger.info("Load Game selected - not available.")
                    self._title_message = "Loading is not available yet."
                elif event.key == pygame.K_3:
                    self._open_options()
                elif event.key == pygame.K_ESCAPE:
                    self.running = False

    def _draw_title_screen(self):
        self.screen.fill((15, 15, 25))
        sw, sh = self.screen.get_size()
        cx = sw // 2
        cy = sh // 2

        title_font = pygame.font.SysFont(None, 72)
        opt_font = pygame.font.SysFont(None, 36)

        title_surf = title_font.render(TITLE.upper(), True, WHITE)
        self.screen.blit(title_surf, (cx - title_surf.get_width() // 2, cy - 120))

        y = cy - 20
        for text, color in (("1.  New Game", (180, 200, 255)),
                            ("2.  Load Game", (120, 120, 140)),
                            ("3.  Options", (180, 200, 255))):
            surf = opt_font.render(text, True, color)
            self.screen.blit(surf, (cx - surf.get_width() // 2, y))
            y += 48

        if self._title_message:
            draw_text(self.screen, self._title_message, cx - 150, y + 10, (255, 200, 80), 26)

        draw_text(self.screen, "Press ESC to Quit", cx - 80, sh - 60, HINT_COLOR, 28)
        pygame.display.flip()

    def _open_options(self):
        """Open the full-screen controls rebinding UI."""
        self._title_message = ""
        if not ControlsMenu().run(self.screen, self.clock):
            self.running = False
        # The menu may have resized the window.
        self.screen = pygame.display.get_surface()
        self._sync_canvas()

    # ── Character creation ────────────────────────────────

    def _open_creation(self):
        self.session.begin_creation()
        self.char_select = CharacterSelectScreen(self.screen)
        self._title_message = ""

    def _handle_creation_events(self, dt: float):
        screen = self.char_select
        for event in pygame.event.get():
            if self._handle_window_event(event):
                continue
            result = screen.handle_input(event)
            if result == "back":
                self.session.return_to_title()
                self.char_select = None
                return
            if result == "confirmed":
                archetype, gender = screen.get_selection()
                self._start_run(archetype, gender)
                return
        screen.update(dt)
        screen.draw()

    def _start_run(self, archetype, gender):
        if self.run_stats is not None:
            self.session.remove_listener(self.run_stats)
        self.run_stats = RunStats(archetype.value)
        self.session.add_listener(self.run_stats)
        self.step_clock.reset()
        self.session.create_character(archetype, gender)
        self.char_select = None

    # ── Playing ───────────────────────────────────────────

    def _handle_play_events(self):
        for event in pygame.event.get():
            if self._handle_window_event(event):
                continue
            if event.type == pygame.WINDOWFOCUSLOST:
                self.session.tracker.clear()
            else:
                key = self.session.tracker.handle_event(event)
                if key == QUIT_KEY and event.type == pygame.KEYDOWN:
                    self.running = False

    def _draw_play(self):
        draw_world(self.screen, self.session.snapshot())
        self.hud.draw(self.screen)
        pygame.display.flip()

    # ── Game over ─────────────────────────────────────────

    def _handle_game_over_events(self):
        for event in pygame.event.get():
            if self._handle_window_event(event):
                continue
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_n:
                    self._open_creation()
                elif event.key == pygame.K_ESCAPE:
                    self.session.return_to_title()

    def _draw_game_over(self):
        draw_world(self.screen, self.session.snapshot())
        stats = self.session.stats()
        lines = []
        if stats is not None:
            lines.append(f"Level {stats.level}  -  {stats.experience}/{stats.experience_to_next} xp")
        if self.run_stats is not None:
            lines.append(f"Orbs collected: {self.run_stats.orbs_collected}")
            lines.append(f"Survived {self.run_stats.ticks} ticks")
        draw_end_screen(self.screen, "Game Over", lines)
        pygame.display.flip()


# ══════════════════════════════════════════════════════════
#  CLI
# ══════════════════════════════════════════════════════════

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=f"{TITLE} v{VERSION}")
    parser.add_argument("--simulate", type=int, metavar="N", default=0,
                        help="run N headless scripted runs and print a summary")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed the random number generator")
    parser.add_argument("--ticks", type=int, default=None,
                        help="tick cap per simulated run")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="debug logging")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    if args.simulate > 0:
        kwargs = {"seed": args.seed}
        if args.ticks:
            kwargs["max_ticks"] = args.ticks
        SimulationRunner(args.simulate, **kwargs).run()
        return 0
    Game(seed=args.seed).run()
    return 0


# ── Run ───────────────────────────────────────────────────
if __name__ == "__main__":
    sys.exit(main())
