#!/usr/bin/env python3
"""
Snake game

Usage:
    python main.py
    python main.py --seed 42 --log-level DEBUG

Arrow keys steer (and start the game), space pauses, R or the
"New Game" button restarts, Esc quits.
"""

import argparse
import logging
import sys

import pygame

from apple_eater.app import SnakeApp

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Play Snake on a 20x20 grid")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for food placement (default: random)")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging verbosity (default: INFO)")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    try:
        with SnakeApp(seed=args.seed) as app:
            app.run()
    except pygame.error as e:
        logger.error(f"Could not start the game: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
