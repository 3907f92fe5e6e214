# render.py
from typing import Tuple

import pygame  # type: ignore

from .config import (
    CELL_SIZE, HEADER_H,
    BG, PANEL, GRID_LINE, FOOD, FOOD_HI, HEAD, BODY, EYES, TEXT,
    BUTTON, BUTTON_GO, BUTTON_FG,
    UP, DOWN, LEFT, RIGHT,
)
from .controls import Layout
from .game import Phase, Snapshot

DPAD_LABELS = {UP: "^", DOWN: "v", LEFT: "<", RIGHT: ">"}


# ---------- Helpers ----------
def cell_rect(layout: Layout, gx: int, gy: int) -> pygame.Rect:
    return pygame.Rect(
        layout.board.x + gx * CELL_SIZE,
        layout.board.y + gy * CELL_SIZE,
        CELL_SIZE,
        CELL_SIZE,
    )

def draw_cell(screen: pygame.Surface, layout: Layout, gx: int, gy: int, color: Tuple[int, int, int]) -> None:
    """Rounded square, inset 2px so neighbouring segments stay apart."""
    rect = cell_rect(layout, gx, gy).inflate(-4, -4)
    pygame.draw.rect(screen, color, rect, border_radius=6)

def draw_button(screen: pygame.Surface, font: pygame.font.Font, rect: pygame.Rect,
                label: str, color=BUTTON) -> None:
    pygame.draw.rect(screen, color, rect, border_radius=12)
    txt = font.render(label, True, BUTTON_FG)
    screen.blit(txt, txt.get_rect(center=rect.center))


# ---------- Board ----------
def draw_grid(screen: pygame.Surface, layout: Layout) -> None:
    board = layout.board
    pygame.draw.rect(screen, BG, board)
    for x in range(board.left, board.right + 1, CELL_SIZE):
        pygame.draw.line(screen, GRID_LINE, (x, board.top), (x, board.bottom))
    for y in range(board.top, board.bottom + 1, CELL_SIZE):
        pygame.draw.line(screen, GRID_LINE, (board.left, y), (board.right, y))

def draw_food(screen: pygame.Surface, layout: Layout, food) -> None:
    if food is None:
        return
    draw_cell(screen, layout, food[0], food[1], FOOD)
    pygame.draw.circle(screen, FOOD_HI, cell_rect(layout, *food).center, CELL_SIZE // 3)

def draw_snake(screen: pygame.Surface, layout: Layout, snake) -> None:
    # Tail first so the head ends up on top
    for i in range(len(snake) - 1, -1, -1):
        x, y = snake[i]
        draw_cell(screen, layout, x, y, HEAD if i == 0 else BODY)
    if snake:
        cx, cy = cell_rect(layout, *snake[0]).center
        pygame.draw.circle(screen, EYES, (cx - 4, cy - 4), 2)
        pygame.draw.circle(screen, EYES, (cx + 4, cy - 4), 2)


# ---------- HUD / overlays ----------
def draw_header(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot) -> None:
    pygame.draw.rect(screen, PANEL, pygame.Rect(0, 0, screen.get_width(), HEADER_H))
    title = font.render("Snake", True, TEXT)
    screen.blit(title, (10, (HEADER_H - title.get_height()) // 2))
    info = font.render(f"Score: {snap.score}   Best: {snap.best}", True, TEXT)
    screen.blit(info, info.get_rect(midright=(screen.get_width() - 10, HEADER_H // 2)))

def draw_controls(screen: pygame.Surface, font: pygame.font.Font, layout: Layout, snap: Snapshot) -> None:
    draw_button(screen, font, layout.pause, "Pause" if snap.state is Phase.RUNNING else "Resume")
    draw_button(screen, font, layout.restart, "Restart", BUTTON_GO)
    for d, rect in layout.dpad.items():
        draw_button(screen, font, rect, DPAD_LABELS[d], PANEL)
    hint = font.render("Arrows/WASD - Space: pause", True, GRID_LINE)
    screen.blit(hint, (12, screen.get_height() - hint.get_height() - 4))

def draw_overlay(screen: pygame.Surface, font: pygame.font.Font, layout: Layout, snap: Snapshot) -> None:
    if snap.state is Phase.RUNNING:
        return
    board = layout.board
    # Dim with translucent overlay
    overlay = pygame.Surface(board.size, pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 128))  # RGBA
    screen.blit(overlay, board.topleft)

    if snap.state is Phase.TERMINAL:
        lines = ["GAME OVER", f"Score: {snap.score}", "Press R to play again"]
    else:
        lines = ["PAUSED", "Space or a D-pad arrow to resume"]
    for i, line in enumerate(lines):
        txt = font.render(line, True, TEXT)
        screen.blit(txt, txt.get_rect(center=(board.centerx, board.centery - 16 + i * 28)))


def draw_frame(screen: pygame.Surface, font: pygame.font.Font, layout: Layout, snap: Snapshot) -> None:
    """Draw one full frame from a snapshot; never touches the game."""
    screen.fill(BG)
    draw_header(screen, font, snap)
    draw_grid(screen, layout)
    draw_food(screen, layout, snap.food)
    draw_snake(screen, layout, snap.snake)
    draw_overlay(screen, font, layout, snap)
    draw_controls(screen, font, layout, snap)
