"""errors.py - Exceptions raised by the game core."""


class GameError(Exception):
    """Base exception for the game core."""


class InvalidArchetype(GameError, ValueError):
    """Raised when an archetype name is not one of the known classes."""

    def __init__(self, archetype):
        super().__init__(f"Unknown archetype: {archetype!r}")
        self.archetype = archetype


class MissingSelection(GameError):
    """Raised when character creation is submitted without a gender."""


class InvalidTransition(GameError):
    """Raised when the run state machine is asked for an illegal move."""
