"""Public dungeon package interface."""

from .config import DungeonConfig
from .errors import GenerationError
from .pipeline import Dungeon, Level, WorldBuilder, generate_level
from .tiles import CAVE_FLOOR, CAVE_WALL, DOOR, FLOOR, GRASS, WALL, WATER  # noqa: F401

__all__ = [
    "Dungeon",
    "DungeonConfig",
    "GenerationError",
    "Level",
    "WorldBuilder",
    "generate_level",
    "FLOOR",
    "WALL",
    "DOOR",
    "CAVE_FLOOR",
    "CAVE_WALL",
    "WATER",
    "GRASS",
]
