"""Flood fill and reachability repair.

A single flood fill (visited set + frontier list over cardinal neighbours)
backs the cave wall cleanup, the water edge trim and the spawn reachability
pass below.
"""
from __future__ import annotations

from typing import Callable, Iterable, List, Set

from .cells import Coord, Grid, Size, cardinal_neighbours, grid_size
from .tiles import CAVE_FLOOR, CAVE_WALL, is_wall


def flood_fill(size: Size, starts: Iterable[Coord], passable: Callable[[int, int], bool]) -> Set[Coord]:
    """Return every cell reachable from ``starts`` through ``passable`` cells.

    Start cells are always part of the result, whether or not they are
    passable themselves.
    """
    seen: Set[Coord] = set(starts)
    to_visit: List[Coord] = list(seen)
    while to_visit:
        x, y = to_visit.pop()
        for nx, ny in cardinal_neighbours(size, x, y):
            if (nx, ny) not in seen and passable(nx, ny):
                seen.add((nx, ny))
                to_visit.append((nx, ny))
    return seen


def reachable_from_spawn(terrain: Grid[str], water: Grid[bool], spawn: Coord) -> Set[Coord]:
    """Cells reachable from spawn walking over non-wall cells or water."""
    return flood_fill(
        grid_size(terrain),
        [spawn],
        lambda x, y: not is_wall(terrain[x][y]) or water[x][y],
    )


def remove_unreachable_floor(terrain: Grid[str], water: Grid[bool], spawn: Coord) -> int:
    """Seal off everything the spawn cannot reach.

    Unreached cells lose their water flag and unreached cave floor becomes cave
    wall. Returns the number of cave floor cells converted.
    """
    seen = reachable_from_spawn(terrain, water, spawn)
    width, height = grid_size(terrain)
    pruned = 0
    for x in range(width):
        for y in range(height):
            if (x, y) in seen:
                continue
            water[x][y] = False
            if terrain[x][y] == CAVE_FLOOR:
                terrain[x][y] = CAVE_WALL
                pruned += 1
    return pruned
