# radarsim

An air traffic simulation in a window. You give it a script of aircraft
and control towers; it flies every aircraft in a straight line from its
departure point to its arrival point. The window closes once every
aircraft has either landed or crashed.

- An aircraft within the area of a control tower is safe. Its hitbox is
  drawn in green.
- Two airborne aircraft outside every tower area crash when they come
  within 20 pixels of each other both horizontally and vertically. Both
  are removed, and the hitbox is drawn in red in that frame.
- Otherwise the hitbox is drawn in white.

## Installing

```
pip install .
```

The window is drawn with pygame.

## Running

```
radarsim path/to/script.rdr
```

To print the help text instead:

```
radarsim -h
```

The command takes exactly one argument. Exit statuses:

| Status | Meaning                                                  |
|--------|----------------------------------------------------------|
| 0      | the simulation ran to its end or was quit                |
| 1      | the help text was printed                                |
| 84     | no argument, more than one, or the script could not be read or used |

While the simulation runs:

| Key | Effect                                 |
|-----|----------------------------------------|
| S   | show or hide the sprites (shown at start) |
| L   | show or hide hitboxes and tower areas (hidden at start) |
| Q   | quit                                   |

Closing the window also quits. The window is 1920×1080 and runs at 60
frames per second.

The background, aircraft and tower images are read from `im/bg.jpg`,
`im/plane.png` and `im/tower.png`, relative to the directory you start
from. An image that cannot be loaded is not drawn, and the simulation
still runs.

## Script format

A script is a whitespace-separated list of entries. Each entry starts with
a word beginning with a letter:

```
A <departure x> <departure y> <arrival x> <arrival y> <speed> <delay>
T <x> <y> <radius>
```

- `A` declares an aircraft. `speed` is in pixels per frame and must be
  positive. `delay` is the number of seconds before it takes off. The
  departure and arrival points must differ.
- `T` declares a control tower and the radius of its safe area.
- Other words are skipped.

Example:

```
A 815 321 1484 166 5 0
A 1000 800 200 100 3 2
T 1200 300 25
```

## Using the library

The simulation logic runs without a window:

```python
from radarsim.parsing import parse_script
from radarsim.simulation import Simulation

planes, towers = parse_script("A 0 0 100 0 5 0\nT 50 0 20")
sim = Simulation.from_specs(planes, towers)
elapsed = 0.0
while not sim.is_over():
    for plane, position, outline in sim.step(elapsed):
        print(plane.id, position, outline.name)
    elapsed += 1 / 60
```

- `radarsim.parsing` has `parse_script`, `load_script`, `PlaneSpec` and
  `TowerSpec`.
- `radarsim.entities` has `Plane` and `Tower`.
- `radarsim.collision` has `in_safe_area`, `planes_collide`,
  `detect_collision` and the `Outline` colours.
- `radarsim.simulation` has `Simulation` and `ToggleKey`.
- `radarsim.app` has `main`, `run`, `check_args` and `help_text`.

There are also some helper modules:

- `radarsim.printf` has `sprintf` and `printf`, a printf-style formatter
  with its own rules for numbers and field widths. It also has
  `format_base`, `format_float`, `format_sci`, `exponent`, `count_float`
  and `count_sci`.
- `radarsim.textutil` has string helpers, such as `get_number` and
  `split_words`, which the script reader uses.
- `radarsim.mathutil` has small integer helpers.

## What it does not do

The window shows no clock or score, and the simulation plays no sound. It
saves nothing: there is no record of which aircraft landed or crashed.