# storage.py
from __future__ import annotations
from pathlib import Path
from typing import List, Protocol, Union
import json
import logging
import os

log = logging.getLogger(__name__)

BEST_SCORE_KEY = "best score"
DEFAULT_BEST_FILE = os.path.join(os.path.expanduser("~"), ".grid_snake", "best.json")


class BestScoreStore(Protocol):
    def load_best(self) -> int: ...
    def save_best(self, best: int) -> None: ...


def _check(best: int) -> int:
    if isinstance(best, bool) or not isinstance(best, int) or best < 0:
        raise ValueError(f"best score must be a non-negative integer, got {best!r}")
    return best


class MemoryBestScoreStore:
    """Keeps the best score in memory; remembers every save for inspection."""

    def __init__(self, best: int = 0):
        self.best = _check(best)
        self.saves: List[int] = []

    def load_best(self) -> int:
        return self.best

    def save_best(self, best: int) -> None:
        self.best = _check(best)
        self.saves.append(best)


class JsonBestScoreStore:
    """
    Best score in a small JSON file: {"best score": 12}.

    Anything unusable on disk (missing file, bad JSON, wrong type) reads as 0.
    """

    def __init__(self, path: Union[str, Path] = DEFAULT_BEST_FILE):
        self.path = Path(path)

    def load_best(self) -> int:
        if not self.path.exists():
            return 0
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            log.warning("Could not read best score from %s: %s", self.path, e)
            return 0

        value = data.get(BEST_SCORE_KEY, 0) if isinstance(data, dict) else None
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            log.warning("Ignoring invalid best score %r in %s", value, self.path)
            return 0
        return value

    def save_best(self, best: int) -> None:
        _check(best)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump({BEST_SCORE_KEY: best}, f)
        log.info("Saved best score %d → %s", best, self.path)
