# grid.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Tuple

from .config import Config, DIRECTIONS

Cell = Tuple[int, int]
Direction = Tuple[int, int]


# ---------- Direction helpers ----------
def is_direction(d) -> bool:
    """True for the four unit steps, False for anything else (incl. (0, 0))."""
    if not isinstance(d, tuple) or len(d) != 2:
        return False
    if any(isinstance(c, bool) or not isinstance(c, int) for c in d):
        return False
    return d in DIRECTIONS

def is_opposite(a: Direction, b: Direction) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]

def step(cell: Cell, direction: Direction) -> Cell:
    return (cell[0] + direction[0], cell[1] + direction[1])


# ---------- Grid ----------
@dataclass(frozen=True)
class Grid:
    width: int
    height: int

    @classmethod
    def from_config(cls, cfg: Config) -> "Grid":
        return cls(cfg.cols, cfg.rows)

    @property
    def size(self) -> int:
        return self.width * self.height

    def in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def cells(self) -> Iterator[Cell]:
        """Every cell, row by row."""
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)
