"""Combine the rooms-and-corridors map with the cave map."""
from __future__ import annotations

from .cells import Coord, Grid, grid_size, moore_neighbours
from .tiles import CAVE_FLOOR, CAVE_WALL, DOOR, FLOOR, WALL


def is_surrounded_by_walls(grid: Grid[str], coord: Coord) -> bool:
    x, y = coord
    return all(grid[nx][ny] == WALL for nx, ny in moore_neighbours(grid_size(grid), x, y))


def combine_rooms_and_corridors_with_cave(rooms_map: Grid[str], cave_map: Grid[str]) -> Grid[str]:
    """Overlay the cave map onto the rooms-and-corridors map.

    Cave floor wins everywhere. Under cave wall the rooms map shows through,
    except a wall with only walls around it, which is cave rock rather than
    part of a room or corridor.
    """
    width, height = grid_size(cave_map)
    combined = []
    for x in range(width):
        column = []
        for y in range(height):
            if cave_map[x][y] == FLOOR:
                column.append(CAVE_FLOOR)
                continue
            tile = rooms_map[x][y]
            if tile in (FLOOR, DOOR):
                column.append(tile)
            elif is_surrounded_by_walls(rooms_map, (x, y)):
                column.append(CAVE_WALL)
            else:
                column.append(WALL)
        combined.append(column)
    return combined
