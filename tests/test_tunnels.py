import random

from delve.dungeon.cells import new_grid
from delve.dungeon.doors import AXIS_X, AXIS_Y
from delve.dungeon.tiles import FLOOR, WALL
from delve.dungeon.tunnels import has_floor_neighbour, l_shaped_corridor, l_shaped_corridor_with_first_axis


def test_x_first_corridor_skips_start_and_stops_before_end():
    grid = new_grid((10, 10), WALL)
    cells = l_shaped_corridor_with_first_axis((2, 2), (6, 5), grid, AXIS_X)
    assert cells == [(3, 2), (4, 2), (5, 2), (6, 2), (6, 3), (6, 4)]


def test_y_first_corridor():
    grid = new_grid((10, 10), WALL)
    cells = l_shaped_corridor_with_first_axis((2, 2), (6, 5), grid, AXIS_Y)
    assert cells == [(2, 3), (2, 4), (2, 5), (3, 5), (4, 5), (5, 5)]


def test_corridor_aligned_on_first_axis_includes_start():
    grid = new_grid((10, 10), WALL)
    cells = l_shaped_corridor_with_first_axis((2, 2), (2, 5), grid, AXIS_X)
    assert cells == [(2, 2), (2, 3), (2, 4)]


def test_corridor_stops_next_to_floor():
    grid = new_grid((10, 10), WALL)
    grid[5][3] = FLOOR
    cells = l_shaped_corridor_with_first_axis((2, 2), (8, 8), grid, AXIS_X)
    assert cells == [(3, 2), (4, 2), (5, 2)]


def test_random_axis_corridor_is_one_of_the_two_shapes():
    grid = new_grid((10, 10), WALL)
    x_first = l_shaped_corridor_with_first_axis((2, 2), (6, 5), grid, AXIS_X)
    y_first = l_shaped_corridor_with_first_axis((2, 2), (6, 5), grid, AXIS_Y)
    rng = random.Random(11)
    seen = {tuple(l_shaped_corridor((2, 2), (6, 5), grid, rng)) for _ in range(40)}
    assert seen == {tuple(x_first), tuple(y_first)}


def test_has_floor_neighbour_ignores_diagonals_and_bounds():
    grid = new_grid((3, 3), WALL)
    grid[0][0] = FLOOR
    assert not has_floor_neighbour(grid, (1, 1))
    assert has_floor_neighbour(grid, (1, 0))
    assert not has_floor_neighbour(grid, (2, 2))
