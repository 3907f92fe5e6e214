import numpy as np
import pytest

from snake.errors import BoardFullError
from snake.food import FoodSpawner
from snake.grid import Grid


def test_spawn_avoids_occupied_cells():
    grid = Grid(20, 24)
    spawner = FoodSpawner(grid, seed=3)
    occupied = {(5, 10), (4, 10), (3, 10)}
    for _ in range(200):
        cell = spawner.spawn(occupied)
        assert grid.in_bounds(cell)
        assert cell not in occupied


def test_same_seed_same_food():
    grid = Grid(20, 24)
    a = FoodSpawner(grid, seed=11)
    b = FoodSpawner(grid, rng=np.random.default_rng(11))
    assert [a.spawn(set()) for _ in range(5)] == [b.spawn(set()) for _ in range(5)]


def test_crowded_board_falls_back_to_scan():
    grid = Grid(3, 3)
    occupied = set(grid.cells()) - {(2, 1)}
    spawner = FoodSpawner(grid, seed=0, max_attempts=1)
    for _ in range(20):
        assert spawner.spawn(occupied) == (2, 1)


def test_scan_returns_first_free_cell_row_major():
    grid = Grid(4, 4)
    occupied = set(grid.cells()) - {(3, 1), (0, 2)}
    spawner = FoodSpawner(grid, seed=0, max_attempts=1)
    # random draws may still hit a free cell; either way it must be free
    assert spawner.spawn(occupied) in {(3, 1), (0, 2)}
    assert spawner._first_free(occupied) == (3, 1)


def test_full_board_raises_instead_of_hanging():
    grid = Grid(2, 2)
    spawner = FoodSpawner(grid, seed=0, max_attempts=5)
    with pytest.raises(BoardFullError):
        spawner.spawn(set(grid.cells()))


def test_out_of_bounds_occupied_cells_are_ignored():
    grid = Grid(2, 1)
    spawner = FoodSpawner(grid, seed=0, max_attempts=1)
    assert spawner._first_free({(0, 0), (7, 7), (-1, 0)}) == (1, 0)


def test_max_attempts_must_be_positive():
    with pytest.raises(ValueError):
        FoodSpawner(Grid(2, 2), max_attempts=0)
