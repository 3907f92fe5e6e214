# controls.py
from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Tuple

import pygame  # type: ignore

from .config import (
    CELL_SIZE, HEADER_H,
    UP, DOWN, LEFT, RIGHT,
    Config, CFG, window_size,
)
from .game import SnakeGame
from .grid import Direction


# ----- Keyboard bindings -----
KEY_DIRECTIONS: Dict[int, Direction] = {
    pygame.K_UP: UP,    pygame.K_w: UP,
    pygame.K_DOWN: DOWN,  pygame.K_s: DOWN,
    pygame.K_LEFT: LEFT,  pygame.K_a: LEFT,
    pygame.K_RIGHT: RIGHT, pygame.K_d: RIGHT,
}
PAUSE_KEYS = (pygame.K_SPACE, pygame.K_RETURN, pygame.K_KP_ENTER)
RESET_KEYS = (pygame.K_r,)
QUIT_KEYS = (pygame.K_ESCAPE,)


# ---------- On-screen buttons ----------
@dataclass
class Layout:
    """Screen rectangles for the board and every clickable button."""
    size: Tuple[int, int]            # window size in pixels
    board: pygame.Rect
    pause: pygame.Rect
    restart: pygame.Rect
    dpad: Dict[Direction, pygame.Rect] = field(default_factory=dict)

    def button_at(self, pos: Tuple[int, int]) -> Optional[object]:
        """Returns a direction, "pause", "restart" or None."""
        for d, rect in self.dpad.items():
            if rect.collidepoint(pos):
                return d
        if self.pause.collidepoint(pos):
            return "pause"
        if self.restart.collidepoint(pos):
            return "restart"
        return None


def build_layout(cfg: Config = CFG) -> Layout:
    board = pygame.Rect(0, HEADER_H, cfg.cols * CELL_SIZE, cfg.rows * CELL_SIZE)
    top = board.bottom + 12
    pause = pygame.Rect(12, top, 110, 36)
    restart = pygame.Rect(12, top + 48, 110, 36)

    # 3x3 D-pad, centered in the space right of the buttons
    size, gap = 40, 6
    cx = (pause.right + board.width) // 2
    cy = top + size + gap + size // 2
    dpad = {
        UP:    pygame.Rect(cx - size // 2, cy - size - gap - size // 2, size, size),
        LEFT:  pygame.Rect(cx - size - gap - size // 2, cy - size // 2, size, size),
        RIGHT: pygame.Rect(cx + size // 2 + gap, cy - size // 2, size, size),
        DOWN:  pygame.Rect(cx - size // 2, cy + size // 2 + gap, size, size),
    }
    return Layout(size=window_size(cfg), board=board, pause=pause, restart=restart, dpad=dpad)


# ---------- Event handling ----------
def handle_event(game: SnakeGame, event, layout: Layout) -> bool:
    """Apply one pygame event to the game. Returns False to quit."""
    if event.type == pygame.QUIT:
        return False

    if event.type == pygame.KEYDOWN:
        if event.key in QUIT_KEYS:
            return False
        if event.key in KEY_DIRECTIONS:
            # Keyboard never wakes a paused game
            game.set_pending_direction(KEY_DIRECTIONS[event.key])
        elif event.key in PAUSE_KEYS:
            game.toggle_pause()
        elif event.key in RESET_KEYS:
            game.request_reset()

    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        # SDL mirrors every tap as a mouse click; FINGERDOWN handles those
        if getattr(event, "touch", False):
            return True
        _press(game, layout.button_at(event.pos))

    elif event.type == pygame.FINGERDOWN:
        # Finger positions are normalized to the window size
        w, h = layout.size
        _press(game, layout.button_at((int(event.x * w), int(event.y * h))))

    return True


def handle_events(game: SnakeGame, events: Iterable, layout: Layout) -> bool:
    """Process a batch of events; False as soon as one asks to quit."""
    for event in events:
        if not handle_event(game, event, layout):
            return False
    return True


def _press(game: SnakeGame, button) -> None:
    if button is None:
        return
    if button == "pause":
        game.toggle_pause()
    elif button == "restart":
        game.request_reset()
    else:
        game.tap_direction(button)
