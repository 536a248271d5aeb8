"""Noise-driven overlays (water, grass) and final cell classification.

Runs after the level structure is settled:
  * Water pools come from Perlin noise above a high threshold; any pool that
    touches the map edge is erased so water never leaks off the playable area.
  * Grass grows where a second noise field is positive and a coin flip passes.
  * Each cell of the composited level is then classified for the world
    builder, with water flooding floors and doors, eating into some walls and
    covering cave cells (which may still carry grass).
"""
from __future__ import annotations

import random
from typing import List, Tuple

from noise import pnoise2

from .cells import Coord, Grid, LevelCell, Size, edge_coords, grid_size, iter_row_major
from .connectivity import flood_fill
from .tiles import CAVE_FLOOR, DOOR, FLOOR, WALL, WATER

# pnoise2 repeats every 256 lattice units; offsets pick a window in that period
NOISE_PERIOD = 256


class NoiseField:
    """A Perlin noise field whose sampling window is drawn from ``rng``."""

    def __init__(self, rng: random.Random, zoom: float):
        self.zoom = zoom
        self.offset_x = rng.randrange(NOISE_PERIOD)
        self.offset_y = rng.randrange(NOISE_PERIOD)

    def noise(self, x: int, y: int) -> float:
        return pnoise2(x / self.zoom + self.offset_x, y / self.zoom + self.offset_y)

    def noise01(self, x: int, y: int) -> float:
        return (self.noise(x, y) + 1.0) / 2.0


def trim_edge_water(water: Grid[bool]) -> int:
    """Erase every water region touching the map edge; returns cells erased."""
    size = grid_size(water)
    starts = [(x, y) for x, y in edge_coords(size) if water[x][y]]
    if not starts:
        return 0
    reached = flood_fill(size, starts, lambda x, y: water[x][y])
    for x, y in reached:
        water[x][y] = False
    return len(reached)


def keep_spawn_dry(water: Grid[bool], spawn: Coord) -> bool:
    """Clear water under the spawn so the player never starts in a pool."""
    x, y = spawn
    was_wet = water[x][y]
    water[x][y] = False
    return was_wet


def make_water_map(size: Size, rng: random.Random, zoom: float = 7.0, threshold: float = 0.65) -> Grid[bool]:
    field = NoiseField(rng, zoom)
    width, height = size
    water = [[field.noise01(x, y) > threshold for y in range(height)] for x in range(width)]
    trim_edge_water(water)
    return water


def make_grass_map(size: Size, rng: random.Random, zoom: float = 10.0) -> Grid[bool]:
    field = NoiseField(rng, zoom)
    width, height = size
    return [[field.noise(x, y) > 0.0 and rng.random() > 0.5 for y in range(height)] for x in range(width)]


def classify_cells(
    terrain: Grid[str],
    water: Grid[bool],
    grass: Grid[bool],
    rng: random.Random,
    shore_wall_chance: float = 0.75,
) -> Tuple[LevelCell, ...]:
    """Final per-cell classification in row-major order."""
    cells: List[LevelCell] = []
    for x, y in iter_row_major(grid_size(terrain)):
        tile = terrain[x][y]
        if water[x][y]:
            if tile in (FLOOR, DOOR):
                cells.append(LevelCell((x, y), WATER))
            elif tile == WALL:
                kept = rng.random() < shore_wall_chance
                cells.append(LevelCell((x, y), WALL if kept else WATER))
            else:
                cells.append(LevelCell((x, y), WATER, grass[x][y]))
        elif tile == CAVE_FLOOR:
            cells.append(LevelCell((x, y), CAVE_FLOOR, grass[x][y]))
        else:
            cells.append(LevelCell((x, y), tile))
    return tuple(cells)


__all__ = [
    "NoiseField",
    "trim_edge_water",
    "keep_spawn_dry",
    "make_water_map",
    "make_grass_map",
    "classify_cells",
]
