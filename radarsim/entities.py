"""Aircraft and control towers of the radar simulation."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass

from .parsing import PlaneSpec, TowerSpec

HITBOX_SIZE = 20.0
SPRITE_ORIGIN = (10.0, 10.0)
PLANE_SCALE = 0.07
TOWER_SCALE = 0.1
TOWER_SPRITE_OFFSET = 25


def _f32(value: float) -> float:
    """Round ``value`` to single precision, as screen coordinates are kept."""
    return struct.unpack("f", struct.pack("f", value))[0]


@dataclass
class Plane:
    """An aircraft flying in a straight line from departure to arrival."""

    id: int
    departure: tuple[int, int]
    arrival: tuple[int, int]
    speed: int
    delay: int
    move: tuple[float, float]
    angle: float
    total_steps: int
    position: tuple[float, float]
    steps: int = 0
    collided: bool = False

    @classmethod
    def from_spec(cls, spec: PlaneSpec, plane_id: int) -> Plane:
        """Build the aircraft for ``spec``, working out its step and heading."""
        x_len = spec.arr_x - spec.dep_x
        y_len = spec.arr_y - spec.dep_y
        length = math.hypot(x_len, y_len)
        if length == 0:
            raise ValueError("an aircraft's departure and arrival must differ")
        if spec.speed <= 0:
            raise ValueError("an aircraft's speed must be positive")
        move = (_f32(x_len / length * spec.speed), _f32(y_len / length * spec.speed))
        if move[0] != 0:
            total_steps = int(x_len / move[0])
        else:
            total_steps = int(y_len / move[1])
        arc = math.degrees(math.acos(max(-1.0, min(1.0, x_len / length))))
        angle = arc if x_len <= 0 and y_len >= 0 else -arc
        return cls(
            id=plane_id,
            departure=(spec.dep_x, spec.dep_y),
            arrival=(spec.arr_x, spec.arr_y),
            speed=spec.speed,
            delay=spec.delay,
            move=move,
            angle=angle,
            total_steps=total_steps,
            position=(float(spec.dep_x), float(spec.dep_y)),
        )

    def advance(self) -> None:
        """Move one step along the route."""
        self.steps += 1
        x, y = self.position
        self.position = (_f32(x + self.move[0]), _f32(y + self.move[1]))

    def is_finished(self) -> bool:
        """True once the aircraft has landed or been in a collision."""
        return self.collided or self.steps >= self.total_steps


@dataclass
class Tower:
    """A control tower with a circular safe area."""

    id: int
    x: int
    y: int
    radius: int

    @classmethod
    def from_spec(cls, spec: TowerSpec, tower_id: int) -> Tower:
        """Build the tower for ``spec``."""
        return cls(id=tower_id, x=spec.x, y=spec.y, radius=spec.radius)

    def circle_origin(self) -> tuple[int, int]:
        """Top-left corner at which the safe-area circle is drawn."""
        shift = TOWER_SPRITE_OFFSET - self.radius - 1
        return (self.x + shift, self.y + shift)