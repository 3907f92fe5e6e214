# config.py
from dataclasses import dataclass
from typing import Optional, Tuple

# ----- Window & grid -----
CELL_SIZE = 22
COLS, ROWS = 20, 24
HEADER_H = 40
CONTROLS_H = 150

# ----- Colors -----
BG        = (15, 23, 42)
PANEL     = (30, 41, 59)
GRID_LINE = (31, 41, 55)
FOOD      = (245, 158, 11)
FOOD_HI   = (251, 191, 36)
HEAD      = (34, 197, 94)
BODY      = (16, 185, 129)
EYES      = (6, 78, 59)
TEXT      = (241, 245, 249)
BUTTON    = (248, 250, 252)
BUTTON_GO = (16, 185, 129)
BUTTON_FG = (15, 23, 42)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

# ----- Start position (head first) -----
INITIAL_SNAKE: Tuple[Tuple[int, int], ...] = ((5, 10), (4, 10), (3, 10))
INITIAL_DIRECTION = RIGHT


# ----- Tunables (what you'd tweak for difficulty) -----
@dataclass
class Config:
    cols: int = COLS
    rows: int = ROWS
    initial_interval_ms: int = 160   # lower = faster
    min_interval_ms: int = 70
    speed_step_ms: int = 6           # shaved off the interval per food
    seed: Optional[int] = None
    food_attempts: int = 64          # random draws before the free-cell scan
    fps: int = 60

    def __post_init__(self):
        if self.cols < 1 or self.rows < 1:
            raise ValueError(f"Grid must be at least 1x1, got {self.cols}x{self.rows}")
        if self.min_interval_ms < 1:
            raise ValueError("min_interval_ms must be positive")
        if self.initial_interval_ms < self.min_interval_ms:
            raise ValueError("initial_interval_ms must not be below min_interval_ms")
        if self.speed_step_ms < 0:
            raise ValueError("speed_step_ms must not be negative")
        if self.food_attempts < 1:
            raise ValueError("food_attempts must be at least 1")
        if self.fps < 1:
            raise ValueError("fps must be positive")
        for x, y in INITIAL_SNAKE:
            if not (0 <= x < self.cols and 0 <= y < self.rows):
                raise ValueError(
                    f"Initial snake does not fit on a {self.cols}x{self.rows} grid."
                )


CFG = Config()


def window_size(cfg: Config = CFG) -> Tuple[int, int]:
    """Pixel size of the window: header, board, then the touch controls."""
    return cfg.cols * CELL_SIZE, HEADER_H + cfg.rows * CELL_SIZE + CONTROLS_H
