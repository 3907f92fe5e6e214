# loop.py
from __future__ import annotations
from typing import Optional
import logging

from .game import Phase, SnakeGame

log = logging.getLogger(__name__)


class TickScheduler:
    """
    Drives `SnakeGame.tick` from the display refresh.

    Call `on_frame(now_ms)` once per frame with a monotonic ms timestamp
    (e.g. `pygame.time.get_ticks()`). A tick fires when at least one interval
    has passed since the last one; at most one tick runs per frame, so a slow
    frame slows the snake down instead of jumping it forward.

    The scheduler only acts between `start()` and `stop()`; use it as a
    context manager so the registration is always released.
    """

    def __init__(self, game: SnakeGame):
        self.game = game
        self.active = False
        self._last_tick: Optional[int] = None
        self._round: Optional[int] = None

    def start(self) -> "TickScheduler":
        self.active = True
        self._last_tick = None
        return self

    def stop(self) -> None:
        if self.active:
            log.debug("Tick scheduler released")
        self.active = False
        self._last_tick = None

    def __enter__(self) -> "TickScheduler":
        return self.start()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()

    def on_frame(self, now_ms: int) -> bool:
        """Returns True when this frame ran a tick."""
        if not self.active or self.game.phase is not Phase.RUNNING:
            self._last_tick = None
            return False

        if self._last_tick is None or self._round != self.game.round:
            self._round = self.game.round
            self._last_tick = now_ms
            return False
        if now_ms - self._last_tick < self.game.interval_ms:
            return False

        self._last_tick = now_ms
        self.game.tick()
        return True
