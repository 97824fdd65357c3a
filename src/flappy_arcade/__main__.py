"""
Entry point: ``python -m flappy_arcade`` or ``flappy-arcade``.

Environment overrides:
    FLAPPY_LOG_LEVEL  logging level name (default INFO)
    FLAPPY_SEED       integer seed for pipe placement
    FLAPPY_ASSETS     directory holding flappybird.gif, toppipe.png, bottompipe.png
"""

import logging
import os
import sys

import pygame

from .constants import ENV_ASSETS, ENV_LOG_LEVEL, ENV_SEED
from .controller import GameController
from .errors import FlappyError
from .game import FlappyGame
from .spawner import PipeSpawner

logger = logging.getLogger("flappy_arcade")


def setup_logging(level_name: str = "INFO") -> None:
    """Configure logging."""
    level = logging.getLevelName(level_name.upper())
    known = isinstance(level, int)
    logging.basicConfig(
        level=level if known else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )
    if not known:
        logger.warning("Unknown log level %r, using INFO.", level_name)


def main() -> int:
    setup_logging(os.environ.get(ENV_LOG_LEVEL, "INFO"))

    raw_seed = os.environ.get(ENV_SEED)
    asset_dir = os.environ.get(ENV_ASSETS)

    try:
        seed = int(raw_seed) if raw_seed else None
    except ValueError:
        logger.error("Startup failed: %s must be an integer, got %r", ENV_SEED, raw_seed)
        return 1

    try:
        game = FlappyGame(GameController(spawner=PipeSpawner(seed=seed)), asset_dir=asset_dir)
    except (FlappyError, pygame.error) as e:
        logger.error("Startup failed: %s", e)
        pygame.quit()
        return 1

    game.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
