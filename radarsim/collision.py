"""Collision and safe-area checks between aircraft and towers."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from .entities import Plane, Tower

_HALF_HITBOX = 10
_COLLISION_REACH = _HALF_HITBOX + _HALF_HITBOX


class Outline(Enum):
    """Hitbox outline colour showing an aircraft's state."""

    SAFE = (0, 255, 0)
    COLLIDING = (255, 0, 0)
    NORMAL = (255, 255, 255)


def _gap(a: float, b: float) -> int:
    # Distances are truncated to whole pixels before comparison.
    return abs(int(a - b))


def in_safe_area(plane: Plane, towers: Iterable[Tower]) -> bool:
    """True when ``plane`` lies within the safe area of any tower."""
    px, py = plane.position
    return any(
        _gap(px, tower.x) <= _HALF_HITBOX + tower.radius
        and _gap(py, tower.y) <= _HALF_HITBOX + tower.radius
        for tower in towers
    )


def planes_collide(plane: Plane, planes: Iterable[Plane], elapsed: float) -> bool:
    """Mark every airborne aircraft touching ``plane``, and ``plane`` with it.

    Aircraft whose delay has not yet passed are skipped. The result is
    whether the last aircraft compared was touching.
    """
    px, py = plane.position
    collision = False
    for other in planes:
        if other.id == plane.id or elapsed < other.delay:
            continue
        ox, oy = other.position
        collision = _gap(px, ox) <= _COLLISION_REACH and _gap(py, oy) <= _COLLISION_REACH
        if collision:
            plane.collided = True
            other.collided = True
    return collision


def detect_collision(
    plane: Plane, planes: Iterable[Plane], towers: Iterable[Tower], elapsed: float
) -> Outline:
    """Check ``plane`` and return the outline it should be drawn with."""
    if in_safe_area(plane, towers):
        return Outline.SAFE
    if planes_collide(plane, planes, elapsed):
        return Outline.COLLIDING
    return Outline.NORMAL