"""
controller.py: Owns the world and routes the three event sources into it.

Frames, spawn ticks and jumps all run to completion on one thread, so
the world needs no locking.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from .data_models import GameState, World
from .physics_engine import WorldEngine
from .spawner import PipeSpawner
from .surface import RenderSurface

logger = logging.getLogger(__name__)


@dataclass
class GameController:
    engine: WorldEngine = field(default_factory=WorldEngine)
    spawner: PipeSpawner = field(default_factory=PipeSpawner)
    world: World = field(default_factory=World)

    @property
    def state(self) -> GameState:
        return self.world.state

    def on_frame(self, surface: Optional[RenderSurface] = None):
        self.engine.step(self.world, surface)

    def on_spawn_tick(self):
        self.spawner.spawn_pair(self.world)

    def jump(self):
        """
        Sets the jump velocity, mid-air included. After a game over the
        same input also restarts the run.
        """
        self.world.bird.velocity = self.engine.flap()
        if self.world.is_over:
            self.reset()

    def reset(self):
        world = self.world
        logger.info("Restarting after %s", world.to_state())
        world.bird.y = world.bird.initial_y
        world.pipes = []
        world.score = 0.0
        world.state = GameState.RUNNING
