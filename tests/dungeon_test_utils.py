from collections import deque

# Tile character constants expected from delve.dungeon import but we
# keep them duplicated lightly for test independence.
FLOOR = "."
WALL = "#"
DOOR = "+"
CAVE_FLOOR = ","
CAVE_WALL = "%"
WATER = "~"
WALLS = {WALL, CAVE_WALL}
FLOORS = {FLOOR, CAVE_FLOOR}


def open_cell(terrain, water, x, y):
    return terrain[x][y] not in WALLS or water[x][y]


def bfs_reachable(terrain, water, start):
    """Return set of (x,y) cells reachable from start over open cells (non-wall or water)."""
    w = len(terrain)
    h = len(terrain[0])
    q = deque([start])
    vis = {start}
    while q:
        x, y = q.popleft()
        for dx, dy in ((1, 0), (-1, 0), (0, 1), (0, -1)):
            nx, ny = x + dx, y + dy
            if 0 <= nx < w and 0 <= ny < h and (nx, ny) not in vis:
                if open_cell(terrain, water, nx, ny):
                    vis.add((nx, ny))
                    q.append((nx, ny))
    return vis


def iter_tiles(terrain, tile):
    w = len(terrain)
    h = len(terrain[0])
    for x in range(w):
        for y in range(h):
            if terrain[x][y] == tile:
                yield x, y


def door_is_valid(terrain, x, y):
    """Floor on both sides along one axis and wall on both sides along the other."""
    w = len(terrain)
    h = len(terrain[0])
    if not (0 < x < w - 1 and 0 < y < h - 1):
        return False
    left, right = terrain[x - 1][y], terrain[x + 1][y]
    up, down = terrain[x][y - 1], terrain[x][y + 1]
    horizontal = left in FLOORS and right in FLOORS and up in WALLS and down in WALLS
    vertical = up in FLOORS and down in FLOORS and left in WALLS and right in WALLS
    return horizontal or vertical


def grid_from_rows(rows):
    """Build a column-major grid[x][y] from a list of row strings."""
    return [[rows[y][x] for y in range(len(rows))] for x in range(len(rows[0]))]
