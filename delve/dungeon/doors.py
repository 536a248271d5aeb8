"""Door logic: placement predicates, candidate promotion and post-composition repair.

A cell can hold a door when it sits in a one-wide corridor: open on both sides
along one axis and closed on both sides along the other. The same shape test
is used against the floor/wall working grid while carving (door candidates)
and against the composited level (door repair).
"""
from __future__ import annotations

import random
from typing import Callable, Iterable, List

from .cells import Coord, Grid, grid_size, in_bounds
from .tiles import DOOR, FLOOR, WALL, is_floor, is_wall

AXIS_X = 0
AXIS_Y = 1


def _axis_deltas(axis: int):
    if axis == AXIS_X:
        return (1, 0), (0, 1)
    return (0, 1), (1, 0)


def straddles_axis(
    grid: Grid[str],
    coord: Coord,
    axis: int,
    is_open: Callable[[str], bool],
    is_closed: Callable[[str], bool],
) -> bool:
    """Open on both sides along ``axis`` and closed on both sides across it.

    Out-of-bounds neighbours fail the test.
    """
    size = grid_size(grid)
    x, y = coord
    (ax, ay), (ox, oy) = _axis_deltas(axis)
    sides = ((x + ax, y + ay), (x - ax, y - ay), (x + ox, y + oy), (x - ox, y - oy))
    if not all(in_bounds(size, sx, sy) for sx, sy in sides):
        return False
    (a1, a2, o1, o2) = [grid[sx][sy] for sx, sy in sides]
    return is_open(a1) and is_open(a2) and is_closed(o1) and is_closed(o2)


def is_cell_in_corridor(grid: Grid[str], coord: Coord) -> bool:
    """Corridor shape test on the floor/wall working grid."""
    return any(
        straddles_axis(grid, coord, axis, lambda t: t == FLOOR, lambda t: t == WALL)
        for axis in (AXIS_X, AXIS_Y)
    )


def is_valid_door_position(grid: Grid[str], coord: Coord) -> bool:
    """Corridor shape test on the composited level (cave floor/wall count too)."""
    return any(straddles_axis(grid, coord, axis, is_floor, is_wall) for axis in (AXIS_X, AXIS_Y))


def place_doors(grid: Grid[str], candidates: Iterable[Coord], rng: random.Random, chance: float = 0.5) -> int:
    """Promote each candidate to a door independently with probability ``chance``."""
    created = 0
    for x, y in candidates:
        # Draw for every candidate, duplicates included, so the RNG stream stays fixed
        if rng.random() < chance and grid[x][y] != DOOR:
            grid[x][y] = DOOR
            created += 1
    return created


def remove_invalid_doors(grid: Grid[str]) -> int:
    """Downgrade doors that composition left in an invalid position to floor.

    All invalid doors are collected before any is changed, so one downgrade
    never influences the verdict on another door.
    """
    width, height = grid_size(grid)
    to_remove: List[Coord] = [
        (x, y)
        for x in range(width)
        for y in range(height)
        if grid[x][y] == DOOR and not is_valid_door_position(grid, (x, y))
    ]
    for x, y in to_remove:
        grid[x][y] = FLOOR
    return len(to_remove)
