#!/usr/bin/env python3
"""
Breakout - Main Entry Point
===========================

Opens the window, builds the game context and runs the state stack until
the last state is popped.

Usage:
    # Start at the menu (default)
    python main.py

    # Jump straight into play on level 5 with a fixed seed
    python main.py --start play --level 5 --seed 42

    # Smaller window, debug logging, session line appended on exit
    python main.py --window 864x486 --log-level DEBUG --save-file saves/sessions.txt

Press:
    - Up/Down, Enter: Menu navigation (Q quits)
    - Left/Right: Move the paddle
    - Space: Launch the ball
    - P: Pause, Enter resumes
    - 1-4 / 5-8: Paddle color / size
    - X: Quit
"""

# Suppress pygame's pkg_resources deprecation warning (pygame issue #4557)
import warnings
warnings.filterwarnings("ignore", category=UserWarning, module="pygame.pkgdata")

import pygame
import numpy as np
import argparse
import sys
import os
import time
from datetime import datetime
from typing import Optional, Set, Tuple

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from config import Config
from src.game import GameContext, StateStack, get_state, list_states
from src.game.assets import PygameAssetLoader
from src.game.renderer import present
from src.game.sprites import build_hearts_atlas, build_sprite_atlas
from src.utils import LogLevel, append_save, get_log_path, get_logger, setup_logging

logger = get_logger(__name__)


class GameApp:
    """
    Host driver: owns the window, the virtual canvas and the clock.

    Each tick: collect events, report the held keys to the context, then
    update and render the top state and present the canvas.
    """

    def __init__(self, config: Config, args: argparse.Namespace):
        self.config = config
        self.args = args

        pygame.init()
        pygame.mixer.init()
        self.window = pygame.display.set_mode((config.WINDOW_WIDTH, config.WINDOW_HEIGHT))
        pygame.display.set_caption(config.TITLE)
        self.canvas = pygame.Surface((config.VIRTUAL_WIDTH, config.VIRTUAL_HEIGHT))
        self.clock = pygame.time.Clock()

        loader = PygameAssetLoader(config.RESOURCE_DIR)
        self.ctx = GameContext(
            config=config,
            loader=loader,
            atlas=build_sprite_atlas(loader.load_image(config.SPRITE_SHEET)),
            hearts=build_hearts_atlas(loader.load_image(config.HEARTS_SHEET)),
            rng=np.random.default_rng(config.SEED),
        )
        self.stack = StateStack(self.ctx)
        self.held: Set[int] = set()
        self.frames = 0

    def _poll_events(self) -> bool:
        """Track held keys; returns False when the window was closed."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            elif event.type == pygame.KEYDOWN:
                self.held.add(event.key)
            elif event.type == pygame.KEYUP:
                self.held.discard(event.key)
        return True

    def run(self) -> None:
        """Run until the stack empties or the window is closed."""
        state_class = get_state(self.args.start)
        if self.args.start == 'play':
            state = state_class(level=self.config.START_LEVEL)
        else:
            state = state_class()
        self.stack.push(state)

        while self.stack.running:
            dt = self.clock.tick(self.config.FPS) / 1000.0

            if not self._poll_events():
                logger.info("Window closed")
                break

            self.ctx.begin_frame(self.held)
            self.stack.update(dt)
            if not self.stack.running:
                break
            self.stack.render(self.canvas)
            present(self.canvas, self.window)
            self.frames += 1

        # Give every remaining state its exit hook
        while self.stack.running:
            self.stack.pop()


def parse_window(value: str) -> Tuple[int, int]:
    """Parse a WIDTHxHEIGHT window size."""
    try:
        width, height = (int(part) for part in value.lower().split('x'))
    except ValueError:
        raise argparse.ArgumentTypeError(f"window size must look like 1280x720, got {value!r}")
    return width, height


def parse_args(argv: Optional[list] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Breakout - ball and paddle arcade game",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        '--start', type=str, default='menu', choices=list_states(),
        help='State to start in (default: menu)'
    )
    parser.add_argument(
        '--fps', type=int, default=None,
        help='Frame rate cap'
    )
    parser.add_argument(
        '--window', type=parse_window, default=None, metavar='WxH',
        help='Window size in pixels, e.g. 1280x720'
    )
    parser.add_argument(
        '--level', type=int, default=None,
        help='Starting level'
    )
    parser.add_argument(
        '--seed', type=int, default=None,
        help='Random seed for level layouts and ball launches'
    )
    parser.add_argument(
        '--resources', type=str, default=None,
        help='Directory holding fonts, graphics and sounds'
    )
    parser.add_argument(
        '--log-level', type=str, default=None,
        choices=[level.name for level in LogLevel],
        help='Console log level'
    )
    parser.add_argument(
        '--log-file', action='store_true',
        help='Also write logs to LOG_DIR'
    )
    parser.add_argument(
        '--save-file', type=str, default=None,
        help='Append a session line to this file on exit'
    )
    return parser.parse_args(argv)


def apply_args(config: Config, args: argparse.Namespace) -> Config:
    """Apply CLI overrides to the config."""
    if args.fps is not None:
        config.FPS = args.fps
    if args.window is not None:
        config.WINDOW_WIDTH, config.WINDOW_HEIGHT = args.window
    if args.level is not None:
        config.START_LEVEL = args.level
    if args.seed is not None:
        config.SEED = args.seed
    if args.resources is not None:
        config.RESOURCE_DIR = args.resources
    if args.log_level is not None:
        config.LOG_LEVEL = args.log_level
    if args.log_file:
        config.LOG_TO_FILE = True
    if args.save_file is not None:
        config.SAVE_FILE = args.save_file
    # Re-validate after overrides
    config.__post_init__()
    return config


def main():
    """Main entry point."""
    args = parse_args()
    config = apply_args(Config(), args)

    setup_logging(
        log_dir=config.LOG_DIR,
        level=LogLevel[config.LOG_LEVEL],
        file_output=config.LOG_TO_FILE,
        force=True,
    )
    if get_log_path() is not None:
        logger.info(f"Writing log file to {get_log_path()}")

    app = None
    started = time.time()
    try:
        app = GameApp(config, args)
        app.run()
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception:
        logger.exception("Fatal error")
        raise
    finally:
        pygame.quit()
        if config.SAVE_FILE and app is not None:
            line = (f"{datetime.now().isoformat(timespec='seconds')} "
                    f"frames={app.frames} seconds={time.time() - started:.1f}\n")
            append_save(config.SAVE_FILE, line.encode('utf-8'))


if __name__ == "__main__":
    main()
