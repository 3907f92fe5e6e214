# main.py
from __future__ import annotations
import argparse
import logging

import pygame  # type: ignore

from .config import Config, window_size
from .controls import build_layout, handle_events
from .game import SnakeGame
from .loop import TickScheduler
from .render import draw_frame
from .storage import DEFAULT_BEST_FILE, JsonBestScoreStore

log = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="grid-snake", description="Classic grid Snake.")
    parser.add_argument("--seed", type=int, default=None, help="seed for food placement")
    parser.add_argument(
        "--best-file",
        type=str,
        default=DEFAULT_BEST_FILE,
        help="JSON file holding the best score",
    )
    parser.add_argument("--fps", type=int, default=60, help="frame rate cap")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)


def run(cfg: Config, store: JsonBestScoreStore) -> None:
    pygame.init()
    try:
        font = pygame.font.SysFont(None, 24)
        screen = pygame.display.set_mode(window_size(cfg))
        pygame.display.set_caption("Snake")
        clock = pygame.time.Clock()

        game = SnakeGame(cfg, store=store)
        layout = build_layout(cfg)

        with TickScheduler(game) as scheduler:
            running = True
            while running:
                # 1) input
                running = handle_events(game, pygame.event.get(), layout)
                if not running:
                    break

                # 2) update (at most one tick per frame)
                scheduler.on_frame(pygame.time.get_ticks())

                # 3) render
                draw_frame(screen, font, layout, game.snapshot())
                pygame.display.flip()
                clock.tick(cfg.fps)
    finally:
        pygame.quit()


def main(argv=None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    cfg = Config(seed=args.seed, fps=args.fps)
    log.info("Starting %dx%d board, best score file %s", cfg.cols, cfg.rows, args.best_file)
    run(cfg, JsonBestScoreStore(args.best_file))


if __name__ == "__main__":
    main()
