# movement.py
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .config import INITIAL_SNAKE
from .grid import Cell, Direction, Grid, step


@dataclass(frozen=True)
class MoveResult:
    snake: List[Cell]        # head at index 0
    ate: bool
    collided: bool
    reason: Optional[str] = None   # "wall" | "self" when collided


def initial_snake() -> List[Cell]:
    return list(INITIAL_SNAKE)


def advance(snake: Sequence[Cell], direction: Direction, food: Cell, grid: Grid) -> MoveResult:
    """
    Move the snake one cell in `direction`.

    Self collision is checked against the whole current body, tail included,
    so stepping into the cell the tail is about to leave ends the game.
    On collision the returned snake equals the input.
    """
    body = list(snake)
    new_head = step(body[0], direction)

    # Wall collision
    if not grid.in_bounds(new_head):
        return MoveResult(body, ate=False, collided=True, reason="wall")

    # Self collision
    if new_head in body:
        return MoveResult(body, ate=False, collided=True, reason="self")

    # Move / grow
    ate = new_head == food
    grown = [new_head] + body
    return MoveResult(grown if ate else grown[:-1], ate=ate, collided=False)
