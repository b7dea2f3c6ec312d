"""
pursuit.py – Direct pursuit: step straight toward a target.

No pathing, no avoidance.  The step is the unit vector from the pursuer's
position to the target's position scaled by the step length.
"""

from __future__ import annotations

import math


def pursuit_step(from_x: float, from_y: float, to_x: float, to_y: float,
                 step: float = 1.0) -> tuple[float, float]:
    """Return (dx, dy) moving *step* units from (from_x, from_y) toward
    (to_x, to_y).

    A zero-length vector has no direction, so the pursuer stays put that
    tick and (0.0, 0.0) is returned.
    """
    dx = to_x - from_x
    dy = to_y - from_y
    distance = math.hypot(dx, dy)
    if distance == 0:
        return 0.0, 0.0
    return dx / distance * step, dy / distance * step


def pursue(entity, target, step: float = 1.0) -> bool:
    """Move *entity* one step toward *target* in place.

    Both need ``x`` and ``y``.  Returns False when the two positions
    coincide and nothing moved.
    """
    dx, dy = pursuit_step(entity.x, entity.y, target.x, target.y, step)
    if dx == 0.0 and dy == 0.0:
        return False
    entity.x += dx
    entity.y += dy
    return True
