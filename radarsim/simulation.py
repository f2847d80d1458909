"""Frame-by-frame state of the radar simulation, independent of any display."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .collision import Outline, detect_collision
from .entities import Plane, Tower
from .parsing import PlaneSpec, TowerSpec


@dataclass
class ToggleKey:
    """A switch flipped once each time its key goes down."""

    on: bool = False
    held: bool = False

    def update(self, pressed: bool) -> bool:
        """Feed the key's current state and return whether the switch is on."""
        if pressed:
            if not self.held:
                self.on = not self.on
            self.held = True
        else:
            self.held = False
        return self.on


def _sprites_key() -> ToggleKey:
    return ToggleKey(on=True)


@dataclass
class Simulation:
    """Aircraft and towers on the radar, with the display switches."""

    planes: list[Plane] = field(default_factory=list)
    towers: list[Tower] = field(default_factory=list)
    sprites: ToggleKey = field(default_factory=_sprites_key)
    hitboxes: ToggleKey = field(default_factory=ToggleKey)

    @classmethod
    def from_specs(
        cls, plane_specs: Iterable[PlaneSpec], tower_specs: Iterable[TowerSpec]
    ) -> Simulation:
        """Build the simulation from script entries.

        Identifiers follow script order; the lists hold the last entry first,
        which is the order they are processed and drawn in.
        """
        planes = [Plane.from_spec(spec, index) for index, spec in enumerate(plane_specs)]
        towers = [Tower.from_spec(spec, index) for index, spec in enumerate(tower_specs)]
        planes.reverse()
        towers.reverse()
        return cls(planes=planes, towers=towers)

    def active_planes(self, elapsed: float) -> list[Plane]:
        """Aircraft whose delay has passed after ``elapsed`` seconds."""
        return [plane for plane in self.planes if elapsed >= plane.delay]

    def step(self, elapsed: float) -> list[tuple[Plane, tuple[float, float], Outline]]:
        """Run one frame at ``elapsed`` seconds.

        Each airborne aircraft is checked for collisions, then moved one
        step; aircraft that landed or collided are removed. Returns, for
        every aircraft handled, the aircraft, the position it is drawn at
        (before its move) and its hitbox outline.
        """
        frame: list[tuple[Plane, tuple[float, float], Outline]] = []
        for plane in list(self.planes):
            if elapsed < plane.delay:
                continue
            outline = detect_collision(plane, self.planes, self.towers, elapsed)
            frame.append((plane, plane.position, outline))
            plane.advance()
            if plane.is_finished():
                self.planes = [other for other in self.planes if other is not plane]
        return frame

    def is_over(self) -> bool:
        """True when no aircraft is left."""
        return not self.planes