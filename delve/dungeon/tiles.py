# Tile constants centralized for modular imports.
# One vocabulary for every generation stage; each stage uses a subset.
FLOOR = "."
WALL = "#"
DOOR = "+"
CAVE_FLOOR = ","
CAVE_WALL = "%"
WATER = "~"

# Rendering marker for grass layered on top of a cave floor or water cell
GRASS = '"'

FLOOR_OR_WALL = frozenset({FLOOR, WALL})
ROOMS_AND_CORRIDORS = FLOOR_OR_WALL | {DOOR}
LEVEL_TILES = ROOMS_AND_CORRIDORS | {CAVE_FLOOR, CAVE_WALL}
FINAL_TILES = LEVEL_TILES | {WATER}

WALL_TILES = frozenset({WALL, CAVE_WALL})
FLOOR_TILES = frozenset({FLOOR, CAVE_FLOOR})


def is_wall(tile: str) -> bool:
    return tile in WALL_TILES


def is_floor(tile: str) -> bool:
    return tile in FLOOR_TILES


__all__ = [
    "FLOOR",
    "WALL",
    "DOOR",
    "CAVE_FLOOR",
    "CAVE_WALL",
    "WATER",
    "GRASS",
    "FLOOR_OR_WALL",
    "ROOMS_AND_CORRIDORS",
    "LEVEL_TILES",
    "FINAL_TILES",
    "WALL_TILES",
    "FLOOR_TILES",
    "is_wall",
    "is_floor",
]
