"""Grid Snake: the classic arcade game on a fixed grid, built on pygame."""

from .config import CFG, Config
from .errors import BoardFullError, SnakeError
from .game import Phase, SnakeGame, Snapshot
from .loop import TickScheduler
from .storage import JsonBestScoreStore, MemoryBestScoreStore

__all__ = [
    "CFG", "Config",
    "BoardFullError", "SnakeError",
    "Phase", "SnakeGame", "Snapshot",
    "TickScheduler",
    "JsonBestScoreStore", "MemoryBestScoreStore",
]
