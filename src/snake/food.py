# food.py
from __future__ import annotations
from typing import Iterable, Optional
import logging

import numpy as np  # type: ignore

from .errors import BoardFullError
from .grid import Cell, Grid

log = logging.getLogger(__name__)


class FoodSpawner:
    """
    Picks a free cell for the next piece of food.

    Draws uniformly over the whole board and rejects occupied cells. After
    `max_attempts` misses it scans an occupancy mask row by row and returns
    the first free cell, so a crowded board can never stall a tick.
    """

    def __init__(
        self,
        grid: Grid,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
        max_attempts: int = 64,
    ):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.grid = grid
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.max_attempts = max_attempts

    def spawn(self, occupied: Iterable[Cell]) -> Cell:
        taken = set(occupied)
        for _ in range(self.max_attempts):
            x = int(self.rng.integers(self.grid.width))
            y = int(self.rng.integers(self.grid.height))
            if (x, y) not in taken:
                return (x, y)
        log.debug("Random placement missed %d times, scanning for a free cell", self.max_attempts)
        return self._first_free(taken)

    def _first_free(self, taken: set) -> Cell:
        mask = np.zeros((self.grid.height, self.grid.width), dtype=bool)
        for cell in taken:
            if self.grid.in_bounds(cell):
                mask[cell[1], cell[0]] = True
        free = np.flatnonzero(~mask)
        if free.size == 0:
            raise BoardFullError(
                f"No free cell left on a {self.grid.width}x{self.grid.height} board"
            )
        y, x = divmod(int(free[0]), self.grid.width)
        return (x, y)
