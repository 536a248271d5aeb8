import os
from dataclasses import dataclass
from typing import Optional, Tuple

from dotenv import load_dotenv


@dataclass
class DungeonConfig:
    width: int = 60
    height: int = 45
    seed: Optional[int] = None
    room_attempts: int = 50
    min_room_size: Tuple[int, int] = (5, 5)
    max_room_size: Tuple[int, int] = (11, 9)
    door_chance: float = 0.5
    cave_steps: int = 10
    survive_min: int = 4
    survive_max: int = 8
    resurrect_min: int = 5
    resurrect_max: int = 5
    grass_zoom: float = 10.0
    water_zoom: float = 7.0
    water_threshold: float = 0.65
    shore_wall_chance: float = 0.75
    enable_metrics: bool = True

    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def validate(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"world size must be positive, got {self.width}x{self.height}")
        for axis in (0, 1):
            if self.min_room_size[axis] >= self.max_room_size[axis]:
                raise ValueError(
                    f"min_room_size {self.min_room_size} must be below max_room_size {self.max_room_size}"
                )
        for name in ("door_chance", "water_threshold", "shore_wall_chance"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be within [0, 1], got {value}")
        if self.room_attempts < 0 or self.cave_steps < 0:
            raise ValueError("room_attempts and cave_steps must be non-negative")

    @classmethod
    def from_env(cls, env_file: Optional[str] = None, **overrides) -> "DungeonConfig":
        """Build a config from ``DUNGEON_*`` environment variables (and ``.env``).

        ``env_file`` names a dotenv file to load instead of the discovered one.
        Explicit keyword overrides win over the environment.
        """
        if env_file:
            load_dotenv(env_file)
        else:
            load_dotenv()
        config = cls()
        int_keys = {
            "DUNGEON_WIDTH": "width",
            "DUNGEON_HEIGHT": "height",
            "DUNGEON_SEED": "seed",
            "DUNGEON_ROOM_ATTEMPTS": "room_attempts",
            "DUNGEON_CAVE_STEPS": "cave_steps",
        }
        for env_key, attr in int_keys.items():
            raw = os.environ.get(env_key, "").strip()
            if raw:
                setattr(config, attr, int(raw))
        if "DUNGEON_ENABLE_GENERATION_METRICS" in os.environ:
            val = os.environ.get("DUNGEON_ENABLE_GENERATION_METRICS", "").lower()
            config.enable_metrics = val not in {"0", "false", "no", ""}
        for attr, value in overrides.items():
            setattr(config, attr, value)
        return config


__all__ = ["DungeonConfig"]
