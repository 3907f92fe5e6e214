# progression.py
from dataclasses import dataclass, field
from typing import Optional

from .config import CFG, Config


def next_interval(current: int, step: int, minimum: int) -> int:
    """Speed up by `step` ms, never below `minimum`."""
    return max(minimum, current - step)


@dataclass
class Progression:
    """Score, best score and the tick interval they drive."""
    cfg: Config = field(default_factory=lambda: CFG)
    best: int = 0
    score: int = 0
    interval_ms: Optional[int] = None

    def __post_init__(self):
        if self.best < 0:
            raise ValueError("best score must not be negative")
        if self.interval_ms is None:
            self.interval_ms = self.cfg.initial_interval_ms

    @property
    def display_best(self) -> int:
        return max(self.best, self.score)

    def on_food(self) -> int:
        self.score += 1
        self.interval_ms = next_interval(
            self.interval_ms, self.cfg.speed_step_ms, self.cfg.min_interval_ms
        )
        return self.interval_ms

    def on_game_over(self) -> int:
        self.best = max(self.best, self.score)
        return self.best

    def reset(self) -> None:
        self.score = 0
        self.interval_ms = self.cfg.initial_interval_ms
