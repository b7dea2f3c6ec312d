"""
run_state.py – Run lifecycle state machine.

    TITLE ──new game──▶ CREATING ──character──▶ ACTIVE ──health ≤ 0──▶ GAME_OVER
      ▲                    ▲                                            │
      └────────────────────┴──────────────new game / title──────────────┘

``is_game_over`` is true only in GAME_OVER; while it is set the simulation
does not mutate anything.
"""

from __future__ import annotations

import logging
from enum import Enum

from errors import InvalidTransition

logger = logging.getLogger(__name__)


class RunPhase(Enum):
    TITLE = "title"
    CREATING = "creating"
    ACTIVE = "active"
    GAME_OVER = "game_over"


_ALLOWED: dict[RunPhase, frozenset[RunPhase]] = {
    RunPhase.TITLE: frozenset({RunPhase.CREATING}),
    RunPhase.CREATING: frozenset({RunPhase.ACTIVE, RunPhase.TITLE}),
    RunPhase.ACTIVE: frozenset({RunPhase.GAME_OVER, RunPhase.TITLE}),
    RunPhase.GAME_OVER: frozenset({RunPhase.CREATING, RunPhase.TITLE}),
}


class RunState:
    """Current phase of the run."""

    def __init__(self, phase: RunPhase = RunPhase.TITLE):
        self.phase = phase

    @property
    def is_game_over(self) -> bool:
        return self.phase is RunPhase.GAME_OVER

    @property
    def is_active(self) -> bool:
        return self.phase is RunPhase.ACTIVE

    def can_transition(self, target: RunPhase) -> bool:
        return target in _ALLOWED[self.phase]

    def transition(self, target: RunPhase) -> None:
        if not self.can_transition(target):
            raise InvalidTransition(
                f"cannot move from {self.phase.value} to {target.value}"
            )
        logger.debug("Run phase %s -> %s", self.phase.value, target.value)
        self.phase = target
