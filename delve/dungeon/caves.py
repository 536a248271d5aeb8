"""Cave generation with a Game of Life style cellular automaton.

Random noise is stepped a fixed number of times with rules that favour large
cavernous regions of live cells. Live cells become floor, the border is walled
off, and wall clumps not connected to the border are dissolved into floor.
"""
from __future__ import annotations

import random
from typing import NamedTuple

from .cells import Grid, Size, edge_coords, grid_size, moore_neighbours, new_grid
from .config import DungeonConfig
from .connectivity import flood_fill
from .tiles import FLOOR, WALL


class GameOfLifeParams(NamedTuple):
    survive_min: int = 4
    survive_max: int = 8
    resurrect_min: int = 5
    resurrect_max: int = 5

    @classmethod
    def from_config(cls, config: DungeonConfig) -> "GameOfLifeParams":
        return cls(config.survive_min, config.survive_max, config.resurrect_min, config.resurrect_max)


class GameOfLife:
    def __init__(self, size: Size, rng: random.Random):
        width, height = size
        self.size = size
        self.alive: Grid[bool] = [[rng.random() < 0.5 for _ in range(height)] for _ in range(width)]
        self.next: Grid[bool] = new_grid(size, False)

    def live_neighbours(self, x: int, y: int) -> int:
        # Out-of-bounds neighbours count as dead
        return sum(1 for nx, ny in moore_neighbours(self.size, x, y) if self.alive[nx][ny])

    def step(self, params: GameOfLifeParams) -> None:
        width, height = self.size
        for x in range(width):
            for y in range(height):
                n = self.live_neighbours(x, y)
                if self.alive[x][y]:
                    self.next[x][y] = params.survive_min <= n <= params.survive_max
                else:
                    self.next[x][y] = params.resurrect_min <= n <= params.resurrect_max
        self.alive, self.next = self.next, self.alive


def generate_initial_cave_map(size: Size, rng: random.Random, params: GameOfLifeParams, steps: int = 10) -> Grid[str]:
    game_of_life = GameOfLife(size, rng)
    for _ in range(steps):
        game_of_life.step(params)
    return [[FLOOR if alive else WALL for alive in column] for column in game_of_life.alive]


def surround_map_with_walls(grid: Grid[str]) -> None:
    for x, y in edge_coords(grid_size(grid)):
        grid[x][y] = WALL


def remove_disconnected_walls(grid: Grid[str]) -> int:
    """Turn wall clumps not joined to the top-left corner through walls into floor."""
    if grid[0][0] != WALL:
        raise ValueError("top-left cell must be wall")
    size = grid_size(grid)
    seen = flood_fill(size, [(0, 0)], lambda x, y: grid[x][y] == WALL)
    removed = 0
    for x in range(size[0]):
        for y in range(size[1]):
            if (x, y) not in seen:
                if grid[x][y] == WALL:
                    removed += 1
                grid[x][y] = FLOOR
    return removed


def generate_cave_map(config: DungeonConfig, rng: random.Random) -> Grid[str]:
    grid = generate_initial_cave_map(config.size, rng, GameOfLifeParams.from_config(config), config.cave_steps)
    surround_map_with_walls(grid)
    remove_disconnected_walls(grid)
    return grid
