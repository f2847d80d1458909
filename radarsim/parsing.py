"""Reading the simulation script: aircraft (``A``) and control tower (``T``) entries."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .textutil import get_number, split_words

_PLANE_FIELDS = 6
_TOWER_FIELDS = 3


@dataclass(frozen=True)
class PlaneSpec:
    """One aircraft line: route, speed in pixels per frame, delay in seconds."""

    dep_x: int
    dep_y: int
    arr_x: int
    arr_y: int
    speed: int
    delay: int


@dataclass(frozen=True)
class TowerSpec:
    """One control tower line: position and radius of its safe area."""

    x: int
    y: int
    radius: int


def _fields(words: list[str], start: int, size: int, kind: str) -> list[int]:
    values = words[start + 1 : start + 1 + size]
    if len(values) < size:
        raise ValueError(f"{kind} entry at word {start} needs {size} values")
    return [get_number(value) for value in values]


def parse_script(text: str) -> tuple[list[PlaneSpec], list[TowerSpec]]:
    """Return the aircraft and towers described by ``text``, in file order.

    Words beginning with ``A`` open an aircraft entry of six values and
    words beginning with ``T`` open a tower entry of three values; all
    other words are skipped.
    """
    words = split_words(text)
    planes: list[PlaneSpec] = []
    towers: list[TowerSpec] = []
    index = 0
    while index < len(words):
        if words[index].startswith("A"):
            planes.append(PlaneSpec(*_fields(words, index, _PLANE_FIELDS, "aircraft")))
            index += _PLANE_FIELDS
        if words[index].startswith("T"):
            towers.append(TowerSpec(*_fields(words, index, _TOWER_FIELDS, "tower")))
        index += 1
    return planes, towers


def load_script(path: str | os.PathLike[str]) -> tuple[list[PlaneSpec], list[TowerSpec]]:
    """Read and parse the script file at ``path``."""
    return parse_script(Path(path).read_text())