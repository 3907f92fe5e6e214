import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from snake.config import Config, RIGHT
from snake.errors import BoardFullError
from snake.game import SnakeGame
from snake.storage import MemoryBestScoreStore


class ScriptedSpawner:
    """Hands out food cells from a list; an exhausted list means a full board."""

    def __init__(self, cells):
        self.cells = list(cells)
        self.calls = []

    def spawn(self, occupied):
        self.calls.append(set(occupied))
        if not self.cells:
            raise BoardFullError("scripted board is full")
        return self.cells.pop(0)


@pytest.fixture
def cfg():
    return Config(seed=7)


@pytest.fixture
def store():
    return MemoryBestScoreStore()


@pytest.fixture
def game(cfg, store):
    g = SnakeGame(cfg, store=store)
    g.food = (0, 0)  # keep food out of the way unless a test places it
    return g


@pytest.fixture
def place():
    """Put a game into a hand-made position."""
    def _place(game, snake, direction=RIGHT, food=(0, 0)):
        game.snake = list(snake)
        game.direction = direction
        game.pending = direction
        game.food = food
        return game
    return _place
