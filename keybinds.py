"""
keybinds.py – Rebindable movement keys with JSON persistence.

MOVE_KEYS maps each movement action to the key identifiers (pygame key
names) that trigger it.  Several keys may share an action, e.g. both the
left arrow and 'a' move left.

Usage:
    from keybinds import MOVE_KEYS
    if tracker.is_any_held(*MOVE_KEYS["move_left"]):
        ...

Persistence:
    save_keybinds()   – write current bindings to controls.json
    load_keybinds()   – load from controls.json (called on import)
    reset_keybinds()  – restore factory defaults

Rebinding UI:
    ControlsMenu().run(screen, clock)   – opened from the title screen
"""

from __future__ import annotations

import json
import logging
import os

import pygame

logger = logging.getLogger(__name__)

# ══════════════════════════════════════════════════════════
#  Path to persistence file
# ══════════════════════════════════════════════════════════

_CONTROLS_PATH = os.path.join(
    os.path.dirname(os.path.abspath(__file__)),
    "controls.json",
)

# ══════════════════════════════════════════════════════════
#  Actions and defaults
# ══════════════════════════════════════════════════════════

ACTIONS: list[str] = [
    "move_left",
    "move_right",
    "move_up",
    "move_down",
]

ACTION_LABELS: dict[str, str] = {
    "move_left":  "Move Left",
    "move_right": "Move Right",
    "move_up":    "Move Up",
    "move_down":  "Move Down",
}

QUIT_KEY = "escape"

_DEFAULT_MOVE: dict[str, list[str]] = {
    "move_left":  ["left", "a"],
    "move_right": ["right", "d"],
    "move_up":    ["up", "w"],
    "move_down":  ["down", "s"],
}

# Live binding dictionary (mutated at runtime)
MOVE_KEYS: dict[str, list[str]] = {a: list(k) for a, k in _DEFAULT_MOVE.items()}


# ══════════════════════════════════════════════════════════
#  Persistence helpers
# ══════════════════════════════════════════════════════════

def save_keybinds(path: str = _CONTROLS_PATH) -> None:
    """Persist current bindings to controls.json."""
    payload = {"move": {action: list(keys) for action, keys in MOVE_KEYS.items()}}
    try:
        with open(path, "w", encoding="utf-8") as fp:
            json.dump(payload, fp, indent=2)
        logger.info("Keybinds saved to %s", path)
    except OSError as exc:
        logger.error("Failed to save keybinds: %s", exc)


def load_keybinds(path: str = _CONTROLS_PATH) -> None:
    """Load bindings from controls.json into MOVE_KEYS.

    Missing actions are filled from defaults.  Unknown actions and
    malformed entries are ignored so a hand-edited file won't crash
    the game.
    """
    if not os.path.exists(path):
        logger.info("No controls.json found – using defaults.")
        return

    try:
        with open(path, "r", encoding="utf-8") as fp:
            data = json.load(fp)
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("Could not read controls.json (%s) – using defaults.", exc)
        return

    raw = data.get("move", {}) if isinstance(data, dict) else {}
    for action in ACTIONS:
        keys = raw.get(action)
        if isinstance(keys, list) and keys and all(isinstance(k, str) for k in keys):
            MOVE_KEYS[action] = [k.lower() for k in keys]
        else:
            MOVE_KEYS[action] = list(_DEFAULT_MOVE[action])
    logger.info("Keybinds loaded from %s", path)


def reset_keybinds(path: str = _CONTROLS_PATH) -> None:
    """Restore factory defaults and save."""
    for action, keys in _DEFAULT_MOVE.items():
        MOVE_KEYS[action] = list(keys)
    save_keybinds(path)
    logger.info("Keybinds reset to defaults.")


# ══════════════════════════════════════════════════════════
#  Conflict detection
# ══════════════════════════════════════════════════════════

def find_conflicts(bindings: dict[str, list[str]]) -> list[tuple[str, str, str]]:
    """Return (action_a, action_b, key) for every key bound to two actions."""
    seen: dict[str, str] = {}
    conflicts: list[tuple[str, str, str]] = []
    for action, keys in bindings.items():
        for key in keys:
            if key in seen and seen[key] != action:
                conflicts.append((seen[key], action, key))
            else:
                seen[key] = action
    return conflicts


def key_label(name: str) -> str:
    """Display form of a key identifier."""
    return name.upper()


# ══════════════════════════════════════════════════════════
#  Controls menu screen (self-contained Pygame loop)
# ══════════════════════════════════════════════════════════

_BG           = (20, 20, 30)
_HEADER_CLR   = (255, 255, 255)
_ACTION_CLR   = (200, 210, 230)
_KEY_CLR      = (100, 220, 160)
_ALT_KEY_CLR  = (120, 130, 150)
_SELECTED_BG  = (50, 60, 90)
_WAITING_CLR  = (255, 200, 80)
_CONFLICT_CLR = (255, 80, 80)
_HINT_CLR     = (140, 140, 140)


class ControlsMenu:
    """Full-screen movement-key rebinding UI.

    UP/DOWN pick an action, ENTER waits for a new primary key,
    DELETE/BACKSPACE restores that action's defaults, R resets everything.
    ESC saves and leaves.  A key already bound to another action is
    refused.
    """

    def __init__(self, path: str = _CONTROLS_PATH):
        self.path = path
        self.selected = 0
        self.waiting_for_key = False
        self.message = ""
        self._message_timer = 0.0

    # ── Public entry point ────────────────────────────────

    def run(self, screen: pygame.Surface, clock: pygame.time.Clock) -> bool:
        """Run the menu loop.  Returns False if the window was closed."""
        running = True
        while running:
            self.update(clock.tick(30) / 1000.0)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    save_keybinds(self.path)
                    return False
                if event.type == pygame.VIDEORESIZE:
                    screen = pygame.display.set_mode(event.size, pygame.RESIZABLE)
                elif event.type == pygame.KEYDOWN:
                    running = self.handle_key(event.key)

            self._draw(screen)
            pygame.display.flip()
        return True

    def update(self, dt: float) -> None:
        self._message_timer = max(0.0, self._message_timer - dt)
        if self._message_timer == 0.0:
            self.message = ""

    def handle_key(self, key: int) -> bool:
        """Process one key press.  Returns False when the menu should close."""
        if self.waiting_for_key:
            self.waiting_for_key = False
            if key != pygame.K_ESCAPE:
                self.rebind(ACTIONS[self.selected], pygame.key.name(key))
            return True
        return self._handle_nav(key)

    def rebind(self, action: str, key: str) -> bool:
        """Make *key* the primary binding of *action*.

        Returns False, leaving MOVE_KEYS untouched, if another action
        already uses *key*.
        """
        key = key.lower()
        candidate = {a: list(k) for a, k in MOVE_KEYS.items()}
        candidate[action] = [key] + [k for k in candidate[action][1:] if k != key]

        clashes = [c for c in find_conflicts(candidate) if c[2] == key]
        if clashes:
            first, second, _ = clashes[0]
            other = second if first == action else first
            self._show(f"'{key_label(key)}' already used by '{ACTION_LABELS[other]}'")
            return False

        MOVE_KEYS[action] = candidate[action]
        logger.info("Rebound %s -> %s", action, key_label(key))
        return True

    # ── Helpers ───────────────────────────────────────────

    def _handle_nav(self, key: int) -> bool:
        if key == pygame.K_ESCAPE:
            save_keybinds(self.path)
            return False

        if key == pygame.K_UP:
            self.selected = (self.selected - 1) % len(ACTIONS)
        elif key == pygame.K_DOWN:
            self.selected = (self.selected + 1) % len(ACTIONS)
        elif key in (pygame.K_RETURN, pygame.K_KP_ENTER):
            self.waiting_for_key = True
        elif key in (pygame.K_DELETE, pygame.K_BACKSPACE):
            action = ACTIONS[self.selected]
            defaults = {a: list(k) for a, k in MOVE_KEYS.items()}
            defaults[action] = list(_DEFAULT_MOVE[action])
            if find_conflicts(defaults):
                self._show(f"Defaults for '{ACTION_LABELS[action]}' clash with another action")
            else:
                MOVE_KEYS[action] = defaults[action]
        elif key == pygame.K_r:
            reset_keybinds(self.path)
            self._show("All bindings reset to defaults")
        return True

    def _show(self, message: str) -> None:
        self.message = message
        self._message_timer = 2.5

    # ── Rendering ─────────────────────────────────────────

    def _draw(self, surface: pygame.Surface) -> None:
        surface.fill(_BG)
        sw, sh = surface.get_size()
        cx = sw // 2

        title_font = pygame.font.SysFont(None, 48)
        row_font = pygame.font.SysFont(None, 28)
        hint_font = pygame.font.SysFont(None, 22)

        title = title_font.render("CONTROLS", True, _HEADER_CLR)
        surface.blit(title, (cx - title.get_width() // 2, 30))

        start_y = 110
        row_h = 40
        col_action_x = cx - 200
        col_key_x = cx + 20

        for i, action in enumerate(ACTIONS):
            y = start_y + i * row_h
            if i == self.selected:
                pygame.draw.rect(
                    surface, _SELECTED_BG,
                    (col_action_x - 10, y - 2, 430, row_h - 4),
                    border_radius=5,
                )

            label = row_font.render(ACTION_LABELS[action], True, _ACTION_CLR)
            surface.blit(label, (col_action_x, y + 4))

            if i == self.selected and self.waiting_for_key:
                key_surf = row_font.render("< press a key >", True, _WAITING_CLR)
                surface.blit(key_surf, (col_key_x, y + 4))
            else:
                primary, *alternates = MOVE_KEYS[action]
                key_surf = row_font.render(key_label(primary), True, _KEY_CLR)
                surface.blit(key_surf, (col_key_x, y + 4))
                if alternates:
                    alt = row_font.render(
                        " / ".join(key_label(k) for k in alternates), True, _ALT_KEY_CLR,
                    )
                    surface.blit(alt, (col_key_x + key_surf.get_width() + 16, y + 4))

        if self.message:
            msg = hint_font.render(self.message, True, _CONFLICT_CLR)
            surface.blit(msg, (cx - msg.get_width() // 2, start_y + len(ACTIONS) * row_h + 10))

        hints = [
            "UP/DOWN: Navigate   ENTER: Rebind   DEL: Reset action   R: Reset all",
            "ESC: Save and back",
        ]
        for j, h in enumerate(hints):
            txt = hint_font.render(h, True, _HINT_CLR)
            surface.blit(txt, (cx - txt.get_width() // 2, sh - 60 + j * 24))


# ══════════════════════════════════════════════════════════
#  Auto-load on import
# ══════════════════════════════════════════════════════════

load_keybinds()
