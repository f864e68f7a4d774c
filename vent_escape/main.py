#!/usr/bin/env python3
"""
Vent Escape - Main Entry Point

Crawl through a ventilation shaft in the dark. Your oxygen is running out
and something is crawling after you.

Usage:
    vent-escape [--seed N] [--fps N] [--log-level LEVEL] [--fullscreen]
    vent-escape --headless FRAMES

Controls:
    WASD / Arrow keys: Crawl
    Shift: Sprint (burns oxygen faster)
    Enter/Space: Start
    R/Enter: Restart after game over
    Escape: Quit
"""
import argparse
import logging
import sys

import pygame

from vent_escape.config import Settings, get_settings
from vent_escape.gameplay.game import Game, GamePhase

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Vent Escape")
    parser.add_argument("--seed", type=int, default=None, help="Seed for level generation")
    parser.add_argument("--fps", type=int, default=None, help="Frames per second")
    parser.add_argument("--log-level", default=None, help="Log level (DEBUG, INFO, ...)")
    parser.add_argument("--fullscreen", action="store_true", help="Run fullscreen")
    parser.add_argument("--headless", type=int, metavar="FRAMES", default=None,
                        help="Run FRAMES frames without a display and report the outcome")
    return parser.parse_args(argv)


def resolve_settings(args: argparse.Namespace) -> Settings:
    """Command line flags override environment settings."""
    overrides = {}
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.fps is not None:
        overrides["fps"] = args.fps
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    if args.fullscreen:
        overrides["fullscreen"] = True

    settings = get_settings()
    if not overrides:
        return settings
    return Settings.model_validate({**settings.model_dump(), **overrides})


def run_headless(settings: Settings, frames: int) -> int:
    """Run the simulation with no input and log how the run ended."""
    game = Game(seed=settings.seed)
    game.start()
    game.simulate(frames)

    if game.phase == GamePhase.GAME_OVER:
        logger.info(f"Headless run ended: {game.game_over_message} ({game.state.distance_meters}m)")
    else:
        logger.info(f"Headless run still going after {game.frame} frames, oxygen {game.oxygen:.1f}")
    return 0


def run_windowed(settings: Settings) -> int:
    """Open a window and run the frame loop until the player quits."""
    # Imported here so the headless path never needs a display
    from vent_escape.ui.renderer import Renderer, SCREEN_WIDTH, SCREEN_HEIGHT
    from vent_escape.ui.input_handler import InputHandler

    pygame.init()
    try:
        flags = pygame.FULLSCREEN | pygame.SCALED if settings.fullscreen else 0
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT), flags)
    except pygame.error as e:
        logger.error(f"Could not open a display: {e}")
        pygame.quit()
        return 1
    pygame.display.set_caption(settings.window_title)

    game = Game(seed=settings.seed)
    renderer = Renderer(game, screen, show_fps=settings.show_fps)
    input_handler = InputHandler(game)
    clock = pygame.time.Clock()

    logger.info("Starting game loop...")
    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                else:
                    renderer.handle_events(input_handler.handle_key(event.key))

        # One step per frame, only while a run is live
        if game.phase == GamePhase.RUNNING:
            events = game.update(input_handler.snapshot())
            renderer.handle_events(events)

        renderer.render(clock.get_fps())
        pygame.display.flip()
        clock.tick(settings.fps)

    pygame.quit()
    logger.info("Bye.")
    return 0


def main(argv=None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    settings = resolve_settings(args)

    # Configure logging
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.headless is not None:
        return run_headless(settings, args.headless)
    return run_windowed(settings)


if __name__ == "__main__":
    sys.exit(main())
