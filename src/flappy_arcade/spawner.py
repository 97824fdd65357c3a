"""
spawner.py: Periodic generation of top/bottom pipe pairs.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Any, Optional, Tuple

from .constants import OPENING_SPACE, PIPE_HEIGHT, PIPE_WIDTH, PIPE_X, PIPE_Y
from .data_models import Pipe, PipeVariant, World

logger = logging.getLogger(__name__)


@dataclass
class PipeSpawner:
    """
    Appends one pipe pair per call with a randomized gap position.

    ``rng`` is anything with a ``random()`` method returning a float in [0, 1);
    pass a seeded or fixed source to make placements reproducible.
    """
    rng: Any = None
    seed: Optional[int] = None
    spawn_x: float = PIPE_X
    base_y: float = PIPE_Y
    pipe_width: float = PIPE_WIDTH
    pipe_height: float = PIPE_HEIGHT
    opening_space: float = OPENING_SPACE
    spawned: int = field(default=0, init=False)

    def __post_init__(self):
        if self.rng is None:
            self.rng = random.Random(self.seed)

    def gap_top_y(self, r: float) -> float:
        """Y of the top pipe for a random draw ``r`` in [0, 1)."""
        return self.base_y - self.pipe_height / 4 - r * (self.pipe_height / 2)

    def spawn_pair(self, world: World) -> Optional[Tuple[Pipe, Pipe]]:
        """Adds a pipe pair at the right edge. Does nothing once the game is over."""
        if world.is_over:
            return None

        top_y = self.gap_top_y(self.rng.random())
        top = Pipe(x=self.spawn_x, y=top_y, variant=PipeVariant.TOP,
                   width=self.pipe_width, height=self.pipe_height)
        bottom = Pipe(x=self.spawn_x, y=top_y + self.pipe_height + self.opening_space,
                      variant=PipeVariant.BOTTOM,
                      width=self.pipe_width, height=self.pipe_height)
        world.pipes.append(top)
        world.pipes.append(bottom)

        self.spawned += 1
        logger.debug("Spawned pipe pair #%d with gap top at y=%.1f", self.spawned, top_y)
        return top, bottom
