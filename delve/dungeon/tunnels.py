import random
from typing import List

from .cells import Coord, Grid, cardinal_neighbours, grid_size
from .doors import AXIS_X, AXIS_Y
from .tiles import FLOOR


def has_floor_neighbour(grid: Grid[str], coord: Coord) -> bool:
    x, y = coord
    return any(grid[nx][ny] == FLOOR for nx, ny in cardinal_neighbours(grid_size(grid), x, y))


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def l_shaped_corridor_with_first_axis(start: Coord, end: Coord, grid: Grid[str], first_axis: int) -> List[Coord]:
    """Cells of an L-shaped corridor from ``start`` to ``end``, in order.

    Travels along ``first_axis`` until level with ``end`` on that axis, then
    along the other axis until ``end``. The start cell is skipped so several
    corridors can leave the same room centre. The corridor is cut short right
    after the first cell that has a floor neighbour, which lets it merge into
    existing rooms and corridors instead of running through them.
    """
    cells: List[Coord] = []
    other_axis = AXIS_Y if first_axis == AXIS_X else AXIS_X
    step = [0, 0]
    step[first_axis] = _sign(end[first_axis] - start[first_axis])
    current = (start[0] + step[0], start[1] + step[1])
    while current[first_axis] != end[first_axis]:
        cells.append(current)
        if has_floor_neighbour(grid, current):
            return cells
        current = (current[0] + step[0], current[1] + step[1])
    step = [0, 0]
    step[other_axis] = _sign(end[other_axis] - start[other_axis])
    while current != end:
        cells.append(current)
        if has_floor_neighbour(grid, current):
            return cells
        current = (current[0] + step[0], current[1] + step[1])
    return cells


def l_shaped_corridor(start: Coord, end: Coord, grid: Grid[str], rng: random.Random) -> List[Coord]:
    """L-shaped corridor whose first leg runs along a randomly chosen axis."""
    first_axis = AXIS_X if rng.random() < 0.5 else AXIS_Y
    return l_shaped_corridor_with_first_axis(start, end, grid, first_axis)
