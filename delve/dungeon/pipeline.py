"""Pipeline orchestration for level generation.

Runs every phase in a fixed order over a single ``random.Random`` created from
the seed, so a (size, seed) pair always reproduces the same level:

    rooms & corridors -> cave -> compose -> water -> prune unreachable -> dry spawn
    -> repair doors -> grass -> classify

The result is an immutable :class:`Level`; nothing here keeps a reference to
it once returned.
"""
from __future__ import annotations

import random
import time
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Protocol, Tuple

from ..logging_utils import get_logger
from .caves import generate_cave_map
from .cells import Coord, LevelCell, Size, freeze
from .compose import combine_rooms_and_corridors_with_cave
from .config import DungeonConfig
from .connectivity import remove_unreachable_floor
from .doors import remove_invalid_doors
from .features import classify_cells, keep_spawn_dry, make_grass_map, make_water_map
from .geometry import Rect
from .metrics import init_metrics
from .rooms import place_rooms_and_corridors
from .tiles import CAVE_FLOOR, CAVE_WALL, DOOR, FLOOR, GRASS, WALL, WATER

log = get_logger("dungeon")


class WorldBuilder(Protocol):
    """What a world-building collaborator must provide to receive a level."""

    def spawn_player(self, coord: Coord) -> Any: ...
    def spawn_floor(self, coord: Coord) -> Any: ...
    def spawn_wall(self, coord: Coord) -> Any: ...
    def spawn_door(self, coord: Coord) -> Any: ...
    def spawn_cave_floor(self, coord: Coord) -> Any: ...
    def spawn_cave_wall(self, coord: Coord) -> Any: ...
    def spawn_water(self, coord: Coord) -> Any: ...
    def spawn_grass(self, coord: Coord) -> Any: ...


_SPAWNERS = {
    FLOOR: "spawn_floor",
    WALL: "spawn_wall",
    DOOR: "spawn_door",
    CAVE_FLOOR: "spawn_cave_floor",
    CAVE_WALL: "spawn_cave_wall",
    WATER: "spawn_water",
}


@dataclass(frozen=True)
class Level:
    size: Size
    seed: int
    spawn: Coord
    terrain: Tuple[Tuple[str, ...], ...]
    water: Tuple[Tuple[bool, ...], ...]
    grass: Tuple[Tuple[bool, ...], ...]
    cells: Tuple[LevelCell, ...]
    rooms: Tuple[Rect, ...] = ()
    # Read-only views; phase_ms is wrapped as well
    metrics: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}), compare=False)

    @property
    def width(self) -> int:
        return self.size[0]

    @property
    def height(self) -> int:
        return self.size[1]

    def cell_at(self, coord: Coord) -> LevelCell:
        x, y = coord
        return self.cells[y * self.width + x]

    def tile_at(self, coord: Coord) -> str:
        return self.cell_at(coord).tile

    def is_water(self, coord: Coord) -> bool:
        x, y = coord
        return self.water[x][y]

    def populate(self, builder: WorldBuilder) -> Any:
        """Spawn the player, then every cell (and any grass on it) in order."""
        player = builder.spawn_player(self.spawn)
        for cell in self.cells:
            getattr(builder, _SPAWNERS[cell.tile])(cell.coord)
            if cell.grass:
                builder.spawn_grass(cell.coord)
        return player

    def to_ascii(self, show_spawn: bool = True) -> str:
        rows = []
        for y in range(self.height):
            row = []
            for x in range(self.width):
                cell = self.cells[y * self.width + x]
                if show_spawn and cell.coord == self.spawn:
                    row.append("@")
                elif cell.grass:
                    row.append(GRASS)
                else:
                    row.append(cell.tile)
            rows.append("".join(row))
        return "\n".join(rows)


def generate_level(
    width: Optional[int] = None,
    height: Optional[int] = None,
    seed: Optional[int] = None,
    config: Optional[DungeonConfig] = None,
) -> Level:
    """Generate a level for the given world size and seed.

    A ``None`` seed is replaced with one drawn from process entropy; the seed
    actually used is recorded on the returned level.
    """
    config = replace(config) if config is not None else DungeonConfig()
    if width is not None:
        config.width = width
    if height is not None:
        config.height = height
    if seed is not None:
        config.seed = seed
    config.validate()
    if config.seed is None:
        config.seed = random.SystemRandom().randint(0, 2**31 - 1)
    return _run_pipeline(config)


def _run_pipeline(config: DungeonConfig) -> Level:
    metrics: Dict[str, Any] = init_metrics() if config.enable_metrics else {}
    phase_times: Dict[str, int] = {}
    start = time.perf_counter()
    run_log = log.bind(seed=config.seed)

    def _phase(label, fn, *a, **k):
        ps = time.perf_counter()
        r = fn(*a, **k)
        phase_times[label] = int((time.perf_counter() - ps) * 1000)
        run_log.debug(event="dungeon_phase", phase=label, ms=phase_times[label])
        return r

    rng = random.Random(config.seed)
    size = config.size
    placed = _phase("rooms_and_corridors", place_rooms_and_corridors, config, rng)
    if not placed.rooms:
        run_log.warn(event="dungeon_no_rooms", size=f"{size[0]}x{size[1]}", spawn=placed.spawn)
    cave_map = _phase("cave", generate_cave_map, config, rng)
    terrain = _phase("compose", combine_rooms_and_corridors_with_cave, placed.grid, cave_map)
    water = _phase("water", make_water_map, size, rng, config.water_zoom, config.water_threshold)
    pruned = _phase("prune_unreachable", remove_unreachable_floor, terrain, water, placed.spawn)
    _phase("keep_spawn_dry", keep_spawn_dry, water, placed.spawn)
    downgraded = _phase("repair_doors", remove_invalid_doors, terrain)
    grass = _phase("grass", make_grass_map, size, rng, config.grass_zoom)
    cells = _phase("classify", classify_cells, terrain, water, grass, rng, config.shore_wall_chance)

    runtime_ms = int((time.perf_counter() - start) * 1000)
    if config.enable_metrics:
        metrics["rooms_attempted"] = config.room_attempts if placed.rooms else 0
        metrics["rooms_placed"] = len(placed.rooms)
        metrics["door_candidates"] = len(placed.door_candidates)
        metrics["doors_created"] = placed.doors_created
        metrics["doors_downgraded"] = downgraded
        metrics["cells_pruned"] = pruned
        metrics["water_cells"] = sum(1 for c in cells if c.tile == WATER)
        metrics["grass_cells"] = sum(1 for c in cells if c.grass)
        metrics["runtime_ms"] = runtime_ms
        metrics["phase_ms"] = MappingProxyType(phase_times)
    run_log.info(
        event="dungeon_generated",
        size=f"{size[0]}x{size[1]}",
        rooms=len(placed.rooms),
        doors=sum(1 for c in cells if c.tile == DOOR),
        runtime_ms=runtime_ms,
    )
    return Level(
        size=size,
        seed=config.seed,
        spawn=placed.spawn,
        terrain=freeze(terrain),
        water=freeze(water),
        grass=freeze(grass),
        cells=cells,
        rooms=tuple(room.rect for room in placed.rooms),
        metrics=MappingProxyType(metrics),
    )


class Dungeon:
    """Convenience wrapper: ``Dungeon(config)`` or ``Dungeon(seed=..., size=(w, h))``."""

    def __init__(
        self,
        config: DungeonConfig | None = None,
        *,
        seed: int | None = None,
        size: Tuple[int, int] | None = None,
    ):
        config = replace(config) if config is not None else DungeonConfig()
        if seed is not None:
            config.seed = seed
        if size is not None:
            config.width, config.height = size[0], size[1]
        self.level = generate_level(config=config)
        self.seed = self.level.seed
        # Describes the level actually produced, entropy seed included
        self.config = replace(config, seed=self.seed)

    @property
    def size(self) -> Size:
        return self.level.size

    @property
    def spawn(self) -> Coord:
        return self.level.spawn

    @property
    def metrics(self) -> Mapping[str, Any]:
        return self.level.metrics
