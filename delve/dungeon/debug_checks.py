"""Structural checks run against a finished level.

Used by ``scripts/diagnose_seeds.py`` and the test-suite to report levels that
break the generation guarantees.
"""
from __future__ import annotations

from typing import Dict, List

from .cells import Coord, edge_coords
from .connectivity import reachable_from_spawn
from .doors import is_valid_door_position
from .tiles import DOOR, is_wall


def analyze(level) -> Dict[str, List[Coord]]:
    terrain = level.terrain
    water = level.water
    reached = reachable_from_spawn(terrain, water, level.spawn)
    unreachable = []
    invalid_doors = []
    for x in range(level.width):
        for y in range(level.height):
            open_cell = not is_wall(terrain[x][y]) or water[x][y]
            if open_cell and (x, y) not in reached:
                unreachable.append((x, y))
            if terrain[x][y] == DOOR and not is_valid_door_position(terrain, (x, y)):
                invalid_doors.append((x, y))
    border_water = [(x, y) for x, y in edge_coords(level.size) if water[x][y]]
    spawn_blocked = [level.spawn] if is_wall(terrain[level.spawn[0]][level.spawn[1]]) else []
    return {
        "unreachable_cells": unreachable,
        "invalid_doors": invalid_doors,
        "border_water": border_water,
        "spawn_blocked": spawn_blocked,
    }
