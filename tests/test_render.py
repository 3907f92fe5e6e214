import pygame
import pytest

from snake.config import BG, FOOD, HEAD, LEFT, window_size
from snake.controls import build_layout
from snake.render import cell_rect, draw_frame


@pytest.fixture
def screen(cfg):
    pygame.init()
    yield pygame.Surface(window_size(cfg))
    pygame.quit()


def test_draws_snake_and_food(screen, game, cfg):
    layout = build_layout(cfg)
    font = pygame.font.Font(None, 20)
    draw_frame(screen, font, layout, game.snapshot())
    head = cell_rect(layout, *game.snake[0])
    # below the eyes
    assert screen.get_at((head.centerx, head.centery + 5))[:3] == HEAD
    food = cell_rect(layout, *game.food)
    assert screen.get_at((food.centerx, food.y + 3))[:3] == FOOD


def dimmed(color):
    return all(c < b for c, b in zip(color[:3], BG))


def test_overlays_dim_the_board(screen, game, cfg, place):
    layout = build_layout(cfg)
    font = pygame.font.Font(None, 20)
    empty = cell_rect(layout, 1, 1).center

    draw_frame(screen, font, layout, game.snapshot())
    assert screen.get_at(empty)[:3] == BG

    game.pause()
    draw_frame(screen, font, layout, game.snapshot())
    assert dimmed(screen.get_at(empty))

    game.resume()
    place(game, [(0, 10), (1, 10), (2, 10)], direction=LEFT)
    game.tick()
    draw_frame(screen, font, layout, game.snapshot())
    assert dimmed(screen.get_at(empty))
