# game.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple
import logging

from .config import CFG, Config, INITIAL_DIRECTION
from .errors import BoardFullError
from .food import FoodSpawner
from .grid import Cell, Direction, Grid, is_direction, is_opposite
from .movement import MoveResult, advance, initial_snake
from .progression import Progression
from .storage import BestScoreStore, MemoryBestScoreStore

log = logging.getLogger(__name__)


class Phase(Enum):
    RUNNING = "running"
    PAUSED = "paused"
    TERMINAL = "terminal"


@dataclass(frozen=True)
class Snapshot:
    """Read-only view handed to the renderer once per frame."""
    snake: Tuple[Cell, ...]          # head first
    food: Optional[Cell]
    score: int
    best: int
    state: Phase
    interval_ms: int
    direction: Direction


class SnakeGame:
    """
    The whole simulation: snake, food, score and the run/pause/game-over phase.

    Only `tick`, the input methods and `request_reset` mutate it. Directions
    requested between two ticks are buffered one deep in `pending`; the tick
    commits it.
    """

    def __init__(
        self,
        cfg: Config = CFG,
        store: Optional[BestScoreStore] = None,
        spawner: Optional[FoodSpawner] = None,
    ):
        self.cfg = cfg
        self.grid = Grid.from_config(cfg)
        self.store = store if store is not None else MemoryBestScoreStore()
        self.spawner = spawner or FoodSpawner(
            self.grid, seed=cfg.seed, max_attempts=cfg.food_attempts
        )
        self.progress = Progression(cfg, best=self.store.load_best())
        self.end_reason: Optional[str] = None
        self.round = 0
        self._new_round()

    # ---------- State ----------
    def _new_round(self) -> None:
        self.snake: List[Cell] = initial_snake()
        self.direction: Direction = INITIAL_DIRECTION
        self.pending: Direction = INITIAL_DIRECTION
        self.food: Optional[Cell] = self.spawner.spawn(self.snake)
        self.progress.reset()
        self.phase = Phase.RUNNING
        self.end_reason = None
        self.round += 1

    @property
    def score(self) -> int:
        return self.progress.score

    @property
    def best(self) -> int:
        return self.progress.best

    @property
    def interval_ms(self) -> int:
        return self.progress.interval_ms

    def snapshot(self) -> Snapshot:
        return Snapshot(
            snake=tuple(self.snake),
            food=self.food,
            score=self.progress.score,
            best=self.progress.display_best,
            state=self.phase,
            interval_ms=self.progress.interval_ms,
            direction=self.direction,
        )

    # ---------- Input ----------
    def set_pending_direction(self, d: Direction) -> bool:
        """Keyboard path. Returns False when the request is ignored."""
        if self.phase is Phase.TERMINAL or not is_direction(d):
            log.debug("Ignoring direction %r", d)
            return False
        if is_opposite(d, self.direction):
            log.debug("Ignoring direction %r: reverses %r", d, self.direction)
            return False
        self.pending = d
        return True

    def tap_direction(self, d: Direction) -> bool:
        """D-pad path: like the keyboard, but also wakes a paused game."""
        accepted = self.set_pending_direction(d)
        if is_direction(d) and self.phase is Phase.PAUSED:
            self.resume()
        return accepted

    def pause(self) -> None:
        if self.phase is Phase.RUNNING:
            self.phase = Phase.PAUSED
            log.debug("Paused at score %d", self.score)

    def resume(self) -> None:
        if self.phase is Phase.PAUSED:
            self.phase = Phase.RUNNING
            log.debug("Resumed")

    def toggle_pause(self) -> None:
        if self.phase is Phase.RUNNING:
            self.pause()
        elif self.phase is Phase.PAUSED:
            self.resume()

    def request_reset(self) -> None:
        self._new_round()
        log.info("New game (best %d)", self.best)

    # ---------- Update ----------
    def tick(self) -> Optional[MoveResult]:
        """Advance one grid step. No-op (returns None) unless running."""
        if self.phase is not Phase.RUNNING:
            return None

        # Commit direction once per tick
        self.direction = self.pending

        result = advance(self.snake, self.direction, self.food, self.grid)
        if result.collided:
            self._game_over(result.reason)
            return result

        self.snake = result.snake
        if result.ate:
            self.progress.on_food()
            try:
                self.food = self.spawner.spawn(self.snake)
            except BoardFullError:
                self.food = None
                self._game_over("full")
                return result
            log.debug("Food at %s, interval %d ms", self.food, self.interval_ms)
        return result

    def _game_over(self, reason: Optional[str]) -> None:
        self.phase = Phase.TERMINAL
        self.end_reason = reason
        best = self.progress.on_game_over()
        log.info("Game over (%s): score=%d best=%d", reason, self.score, best)
        try:
            self.store.save_best(best)
        except OSError as e:
            log.error("Could not save best score: %s", e)
