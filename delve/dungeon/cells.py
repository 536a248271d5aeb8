from typing import Iterator, List, NamedTuple, Tuple, TypeVar

T = TypeVar("T")

Coord = Tuple[int, int]
Size = Tuple[int, int]
# Column-major: grid[x][y]
Grid = List[List[T]]

CARDINAL_DIRECTIONS = ((0, -1), (1, 0), (0, 1), (-1, 0))
MOORE_DIRECTIONS = (
    (-1, -1),
    (0, -1),
    (1, -1),
    (-1, 0),
    (1, 0),
    (-1, 1),
    (0, 1),
    (1, 1),
)


class LevelCell(NamedTuple):
    """Final classification of one grid position handed to the world builder."""

    coord: Coord
    tile: str
    grass: bool = False


def new_grid(size: Size, value) -> Grid:
    width, height = size
    return [[value for _ in range(height)] for _ in range(width)]


def grid_size(grid: Grid) -> Size:
    return (len(grid), len(grid[0]) if grid else 0)


def in_bounds(size: Size, x: int, y: int) -> bool:
    return 0 <= x < size[0] and 0 <= y < size[1]


def cardinal_neighbours(size: Size, x: int, y: int) -> Iterator[Coord]:
    for dx, dy in CARDINAL_DIRECTIONS:
        nx, ny = x + dx, y + dy
        if in_bounds(size, nx, ny):
            yield nx, ny


def moore_neighbours(size: Size, x: int, y: int) -> Iterator[Coord]:
    for dx, dy in MOORE_DIRECTIONS:
        nx, ny = x + dx, y + dy
        if in_bounds(size, nx, ny):
            yield nx, ny


def iter_row_major(size: Size) -> Iterator[Coord]:
    width, height = size
    for y in range(height):
        for x in range(width):
            yield x, y


def edge_coords(size: Size) -> Iterator[Coord]:
    """Yield each coordinate on the outer border exactly once."""
    width, height = size
    for x, y in iter_row_major(size):
        if x == 0 or y == 0 or x == width - 1 or y == height - 1:
            yield x, y


def freeze(grid: Grid) -> Tuple[Tuple, ...]:
    return tuple(tuple(column) for column in grid)
