"""Window, drawing and command-line entry point of the radar simulation."""

from __future__ import annotations

import os
import sys
import time
from collections.abc import Sequence
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .entities import HITBOX_SIZE, PLANE_SCALE, SPRITE_ORIGIN, TOWER_SCALE  # noqa: E402
from .parsing import load_script  # noqa: E402
from .simulation import Simulation  # noqa: E402

WINDOW_SIZE = (1920, 1080)
WINDOW_TITLE = "Radar Simulation"
FRAME_RATE = 60
BACKGROUND_SCALE = (1.2, 1.03)
BACKGROUND_IMAGE = Path("im/bg.jpg")
TOWER_IMAGE = Path("im/tower.png")
PLANE_IMAGE = Path("im/plane.png")
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)

EXIT_OK = 0
EXIT_HELP = 1
EXIT_USAGE = 84

_HELP = (
    "Introducing radarsim, an air traffic simulation.\n"
    "Pass file containing aircraft and control tower data as parameter to "
    "observe the magic.\n"
    'You can press the "S" key to show or hide the sprites.\n'
    'The same goes for hitboxes by pressing "L".\n'
    "\n"
    'You can press "q" at any moment to quit the simulation\n'
)


def help_text() -> str:
    """The usage text shown for ``-h``."""
    return _HELP


def check_args(argv: Sequence[str]) -> int:
    """Check the command-line arguments, program name excluded.

    Returns 0 to run, 1 when help was asked for and 84 on bad usage.
    """
    if len(argv) != 1:
        return EXIT_USAGE
    if argv[0] == "-h":
        return EXIT_HELP
    return EXIT_OK


def _load_image(path: Path, scale: tuple[float, float]) -> pygame.Surface | None:
    try:
        image = pygame.image.load(str(path)).convert_alpha()
    except (pygame.error, FileNotFoundError):
        return None
    width, height = image.get_size()
    size = (max(1, round(width * scale[0])), max(1, round(height * scale[1])))
    return pygame.transform.smoothscale(image, size)


def _draw_plane_sprite(
    screen: pygame.Surface,
    image: pygame.Surface,
    position: tuple[float, float],
    angle: float,
) -> None:
    rotated = pygame.transform.rotate(image, -angle)
    width, height = image.get_size()
    origin = pygame.math.Vector2(
        SPRITE_ORIGIN[0] * PLANE_SCALE - width / 2,
        SPRITE_ORIGIN[1] * PLANE_SCALE - height / 2,
    ).rotate(angle)
    center = pygame.math.Vector2(position) - origin
    screen.blit(rotated, rotated.get_rect(center=(center.x, center.y)))


def _draw_hitbox(
    screen: pygame.Surface,
    position: tuple[float, float],
    angle: float,
    colour: tuple[int, int, int],
) -> None:
    corners = [(0, 0), (HITBOX_SIZE, 0), (HITBOX_SIZE, HITBOX_SIZE), (0, HITBOX_SIZE)]
    base = pygame.math.Vector2(position)
    points = [base + pygame.math.Vector2(corner).rotate(angle) for corner in corners]
    pygame.draw.polygon(screen, colour, points, width=1)


def _draw_towers(
    screen: pygame.Surface, sim: Simulation, tower_image: pygame.Surface | None
) -> None:
    for tower in sim.towers:
        if sim.sprites.on and tower_image is not None:
            screen.blit(tower_image, (tower.x, tower.y))
        if sim.hitboxes.on:
            left, top = tower.circle_origin()
            centre = (left + tower.radius, top + tower.radius)
            pygame.draw.circle(screen, WHITE, centre, tower.radius, width=1)


def _quit_requested() -> bool:
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return True
        if pygame.key.get_pressed()[pygame.K_q]:
            return True
    return False


def run(path: str | os.PathLike[str]) -> None:
    """Load the script at ``path`` and run the simulation in a window."""
    plane_specs, tower_specs = load_script(path)
    sim = Simulation.from_specs(plane_specs, tower_specs)
    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE, pygame.RESIZABLE)
        pygame.display.set_caption(WINDOW_TITLE)
        background = _load_image(BACKGROUND_IMAGE, BACKGROUND_SCALE)
        tower_image = _load_image(TOWER_IMAGE, (TOWER_SCALE, TOWER_SCALE))
        plane_image = _load_image(PLANE_IMAGE, (PLANE_SCALE, PLANE_SCALE))
        clock = pygame.time.Clock()
        start = time.monotonic()
        while True:
            keys = pygame.key.get_pressed()
            sim.sprites.update(bool(keys[pygame.K_s]))
            sim.hitboxes.update(bool(keys[pygame.K_l]))
            screen.fill(BLACK)
            if background is not None:
                screen.blit(background, (0, 0))
            _draw_towers(screen, sim, tower_image)
            for plane, position, outline in sim.step(time.monotonic() - start):
                if sim.sprites.on and plane_image is not None:
                    _draw_plane_sprite(screen, plane_image, position, plane.angle)
                if sim.hitboxes.on:
                    _draw_hitbox(screen, position, plane.angle, outline.value)
            pygame.display.flip()
            if sim.is_over() or _quit_requested():
                break
            clock.tick(FRAME_RATE)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point; returns the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    status = check_args(args)
    if status == EXIT_HELP:
        sys.stdout.write(help_text())
        return status
    if status != EXIT_OK:
        return status
    try:
        run(args[0])
    except (OSError, ValueError) as error:
        print(f"radarsim: {error}", file=sys.stderr)
        return EXIT_USAGE
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())