"""
input_tracker.py – Which keys are currently held.

Keys are identified by their pygame key name ("left", "a", "escape", ...)
so bindings stay readable in controls.json and tests can drive the
tracker without a display.
"""

from __future__ import annotations

import pygame


class InputTracker:
    """One boolean per key identifier."""

    def __init__(self):
        self._held: dict[str, bool] = {}

    def set_key(self, key: str, is_held: bool) -> None:
        self._held[key] = bool(is_held)

    def is_held(self, key: str) -> bool:
        return self._held.get(key, False)

    def is_any_held(self, *keys: str) -> bool:
        return any(self._held.get(k, False) for k in keys)

    def clear(self) -> None:
        """Release everything (new run, window focus lost)."""
        self._held.clear()

    def state(self) -> dict[str, bool]:
        return dict(self._held)

    def handle_event(self, event: pygame.event.Event) -> str | None:
        """Record a KEYDOWN/KEYUP event.

        Returns the key identifier, or None if the event was not a key
        event.
        """
        if event.type == pygame.KEYDOWN:
            held = True
        elif event.type == pygame.KEYUP:
            held = False
        else:
            return None
        key = pygame.key.name(event.key)
        self.set_key(key, held)
        return key
