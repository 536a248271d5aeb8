import random

import pytest

from delve.dungeon.caves import (
    GameOfLife,
    GameOfLifeParams,
    generate_cave_map,
    remove_disconnected_walls,
    surround_map_with_walls,
)
from delve.dungeon.cells import edge_coords
from delve.dungeon.config import DungeonConfig
from delve.dungeon.connectivity import flood_fill
from delve.dungeon.tiles import FLOOR, FLOOR_OR_WALL, WALL

from dungeon_test_utils import grid_from_rows


def _game(alive_rows):
    game = GameOfLife((len(alive_rows[0]), len(alive_rows)), random.Random(0))
    game.alive = [[alive_rows[y][x] == "o" for y in range(len(alive_rows))] for x in range(len(alive_rows[0]))]
    return game


def test_corners_of_full_block_die():
    game = _game(["ooo", "ooo", "ooo"])
    assert game.live_neighbours(0, 0) == 3
    assert game.live_neighbours(1, 1) == 8
    game.step(GameOfLifeParams())
    assert game.alive == [[False, True, False], [True, True, True], [False, True, False]]


def test_dead_cell_with_five_neighbours_comes_alive():
    game = _game(["ooo", "o.o", "..."])
    assert game.live_neighbours(1, 1) == 5
    game.step(GameOfLifeParams())
    assert game.alive[1][1]


def test_dead_cell_with_four_neighbours_stays_dead():
    game = _game(["ooo", "o..", "..."])
    game.step(GameOfLifeParams())
    assert not game.alive[1][1]


def test_surround_map_with_walls():
    grid = [[FLOOR] * 4 for _ in range(5)]
    surround_map_with_walls(grid)
    for x, y in edge_coords((5, 4)):
        assert grid[x][y] == WALL
    assert grid[2][2] == FLOOR


def test_remove_disconnected_walls_dissolves_inner_clumps():
    grid = grid_from_rows([
        "#####",
        "#...#",
        "#.#.#",
        "#...#",
        "#####",
    ])
    assert remove_disconnected_walls(grid) == 1
    assert grid[2][2] == FLOOR
    assert grid[0][0] == WALL


def test_remove_disconnected_walls_requires_wall_corner():
    grid = grid_from_rows(["..", ".."])
    with pytest.raises(ValueError):
        remove_disconnected_walls(grid)


def test_generated_cave_is_walled_and_wall_connected():
    config = DungeonConfig(width=40, height=30)
    grid = generate_cave_map(config, random.Random(12))
    assert {t for column in grid for t in column} <= FLOOR_OR_WALL
    for x, y in edge_coords(config.size):
        assert grid[x][y] == WALL
    walls = {(x, y) for x in range(40) for y in range(30) if grid[x][y] == WALL}
    assert flood_fill(config.size, [(0, 0)], lambda x, y: grid[x][y] == WALL) == walls
    assert any(grid[x][y] == FLOOR for x in range(40) for y in range(30))


def test_params_follow_config():
    config = DungeonConfig(survive_min=3, survive_max=7, resurrect_min=6, resurrect_max=8)
    assert GameOfLifeParams.from_config(config) == GameOfLifeParams(3, 7, 6, 8)
