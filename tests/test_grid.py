from snake.config import Config, UP, DOWN, LEFT, RIGHT
from snake.grid import Grid, is_direction, is_opposite, step


def test_in_bounds_edges():
    grid = Grid(20, 24)
    assert grid.in_bounds((0, 0))
    assert grid.in_bounds((19, 23))
    assert not grid.in_bounds((20, 0))
    assert not grid.in_bounds((0, 24))
    assert not grid.in_bounds((-1, 5))
    assert not grid.in_bounds((5, -1))


def test_from_config_and_cells():
    grid = Grid.from_config(Config(cols=6, rows=11))
    assert (grid.width, grid.height) == (6, 11)
    assert grid.size == 66
    cells = list(grid.cells())
    assert len(cells) == 66
    assert cells[0] == (0, 0) and cells[1] == (1, 0) and cells[-1] == (5, 10)


def test_is_direction_accepts_only_unit_steps():
    for d in (UP, DOWN, LEFT, RIGHT):
        assert is_direction(d)
    for bad in ((0, 0), (1, 1), (2, 0), (-1, -1), [1, 0], (1,), None, "up", (True, False), (1.0, 0.0)):
        assert not is_direction(bad)


def test_opposite_and_step():
    assert is_opposite(RIGHT, LEFT)
    assert is_opposite(UP, DOWN)
    assert not is_opposite(UP, RIGHT)
    assert step((5, 10), RIGHT) == (6, 10)
    assert step((5, 10), UP) == (5, 9)
