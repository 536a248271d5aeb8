import random
from dataclasses import dataclass, field
from typing import List, NamedTuple, Set

from .cells import Coord, Grid, Size, new_grid
from .config import DungeonConfig
from .doors import is_cell_in_corridor, place_doors
from .errors import GenerationError
from .geometry import Rect
from .tiles import FLOOR, WALL
from .tunnels import l_shaped_corridor


@dataclass(frozen=True)
class Room:
    # Edge of the rect is the room's wall, the inside is its floor
    rect: Rect

    @property
    def center(self) -> Coord:
        return self.rect.center

    def overlaps_with_floor(self, grid: Grid[str]) -> bool:
        return any(grid[x][y] == FLOOR for x, y in self.rect.cells())

    def add_floor_to_map(self, grid: Grid[str]) -> None:
        for x, y in self.rect.interior_cells():
            grid[x][y] = FLOOR


@dataclass
class RoomPlacement:
    """Working state of the room placer: floor/wall grid, rooms, edges and door candidates."""

    size: Size
    rooms: List[Room] = field(default_factory=list)
    edge_coords: Set[Coord] = field(default_factory=set)
    door_candidates: List[Coord] = field(default_factory=list)
    grid: Grid[str] = field(init=False)

    def __post_init__(self):
        self.grid = new_grid(self.size, WALL)

    def try_add_room(self, new_room: Room, rng: random.Random) -> bool:
        """Add ``new_room`` unless it overlaps existing floor.

        The room is joined to up to two earlier rooms by L-shaped corridors;
        corridor cells crossing a room edge in a corridor shape become door
        candidates, one per run of consecutive qualifying cells.
        """
        if new_room.overlaps_with_floor(self.grid):
            return False
        self.edge_coords.update(new_room.rect.edge_cells())
        for existing in rng.sample(self.rooms, min(2, len(self.rooms))):
            corridor = l_shaped_corridor(new_room.center, existing.center, self.grid, rng)
            for x, y in corridor:
                self.grid[x][y] = FLOOR
            held = None
            for coord in corridor:
                if coord in self.edge_coords and is_cell_in_corridor(self.grid, coord):
                    held = coord
                elif held is not None:
                    self.door_candidates.append(held)
                    held = None
            if held is not None:
                self.door_candidates.append(held)
        new_room.add_floor_to_map(self.grid)
        self.rooms.append(new_room)
        return True


class RoomsAndCorridors(NamedTuple):
    grid: Grid[str]
    rooms: List[Room]
    door_candidates: List[Coord]
    doors_created: int
    spawn: Coord


def place_rooms_and_corridors(config: DungeonConfig, rng: random.Random) -> RoomsAndCorridors:
    """Scatter rooms, connect them and promote door candidates.

    A world too small for the minimum room gets no rooms: the spawn falls back
    to the world centre, which is made floor so it is never inside a wall.
    """
    size = config.size
    placement = RoomPlacement(size)
    if not Rect.fits(size, config.min_room_size):
        spawn = (size[0] // 2, size[1] // 2)
        placement.grid[spawn[0]][spawn[1]] = FLOOR
        return RoomsAndCorridors(placement.grid, [], [], 0, spawn)
    for _ in range(config.room_attempts):
        rect = Rect.choose(size, config.min_room_size, config.max_room_size, rng)
        placement.try_add_room(Room(rect), rng)
    if not placement.rooms:
        raise GenerationError("no rooms placed")
    # Working grid only ever holds FLOOR/WALL, which are valid rooms-and-corridors tiles as-is
    grid = placement.grid
    doors_created = place_doors(grid, placement.door_candidates, rng, config.door_chance)
    spawn = rng.choice(placement.rooms).center
    return RoomsAndCorridors(grid, placement.rooms, placement.door_candidates, doors_created, spawn)
