"""
player.py – The player's avatar on the canvas.

Movement is a fixed number of units per tick.  Opposite directions cancel
before the clamp, so holding left and right together leaves the avatar
where it was.
"""

from __future__ import annotations

from entities.entity import SpatialEntity, EntityKind
from settings import PLAYER_SIZE, PLAYER_SPEED


class PlayerAvatar(SpatialEntity):
    """Player-controlled square."""

    __slots__ = ()

    def __init__(self, x: float, y: float, size: float = PLAYER_SIZE):
        super().__init__(x, y, size, size, kind=EntityKind.PLAYER)

    @classmethod
    def centered_at(cls, center: tuple[float, float],
                    size: float = PLAYER_SIZE) -> "PlayerAvatar":
        cx, cy = center
        return cls(cx - size / 2, cy - size / 2, size)

    # ── Movement ──────────────────────────────────────────

    def move(self, dir_x: int, dir_y: int, bounds: tuple[float, float],
             speed: float = PLAYER_SPEED) -> None:
        """Step by *speed* along (dir_x, dir_y) and clamp inside *bounds*.

        Parameters
        ----------
        dir_x, dir_y : -1, 0 or 1 per axis (already cancelled)
        bounds       : (canvas_width, canvas_height)
        """
        width, height = bounds
        self.x = _clamp(self.x + dir_x * speed, 0, width - self.width)
        self.y = _clamp(self.y + dir_y * speed, 0, height - self.height)


def _clamp(value: float, low: float, high: float) -> float:
    # A canvas smaller than the avatar pins it to the origin.
    return max(low, min(value, max(low, high)))
