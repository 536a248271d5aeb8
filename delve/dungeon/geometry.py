"""Axis-aligned rectangles used by room placement."""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterator, Tuple

from .cells import Coord, Size


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    w: int
    h: int

    @classmethod
    def fits(cls, bounds: Size, min_size: Size) -> bool:
        """True iff a rectangle of at least ``min_size`` can be chosen inside ``bounds``."""
        return bounds[0] > min_size[0] and bounds[1] > min_size[1]

    @classmethod
    def choose(cls, bounds: Size, min_size: Size, max_size: Size, rng: random.Random) -> "Rect":
        """Pick a random rectangle inside ``bounds``.

        Width and height are drawn from ``[min, max)``; the exclusive upper bound
        is clamped to ``bounds`` so the result always fits. The top-left corner
        is uniform over the valid positions.
        """
        w = rng.randrange(min_size[0], min(max_size[0], bounds[0]))
        h = rng.randrange(min_size[1], min(max_size[1], bounds[1]))
        x = rng.randrange(0, bounds[0] - w)
        y = rng.randrange(0, bounds[1] - h)
        return cls(x, y, w, h)

    def cells(self) -> Iterator[Coord]:
        for iy in range(self.y, self.y + self.h):
            for ix in range(self.x, self.x + self.w):
                yield ix, iy

    def is_edge(self, coord: Coord) -> bool:
        cx, cy = coord
        return cx in (self.x, self.x + self.w - 1) or cy in (self.y, self.y + self.h - 1)

    def edge_cells(self) -> Iterator[Coord]:
        return (c for c in self.cells() if self.is_edge(c))

    def interior_cells(self) -> Iterator[Coord]:
        return (c for c in self.cells() if not self.is_edge(c))

    @property
    def center(self) -> Tuple[int, int]:
        return (self.x + self.w // 2, self.y + self.h // 2)
