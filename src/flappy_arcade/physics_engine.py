"""
physics_engine.py: The per-frame world simulation.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from .constants import GAME_OVER_POS, GAME_OVER_TEXT, PIPE_VELOCITY_X, SCORE_POS
from .data_models import GameState, World
from .physics_core import PhysicsCore, overlaps
from .surface import RenderSurface, TextStyle

logger = logging.getLogger(__name__)

BIRD_SPRITE = "bird"


def format_score(score: float) -> str:
    """Whole scores print without a decimal part: 2, 2.5, 3."""
    return f"{score:g}"


@dataclass
class WorldEngine(PhysicsCore):
    """
    Advances a World by exactly one frame and draws the result.
    Inherits gravity, jump and collision logic from PhysicsCore.
    """
    pipe_velocity_x: float = PIPE_VELOCITY_X
    text_style: TextStyle = field(default_factory=TextStyle)

    def end_game(self, world: World, reason: str):
        if world.is_over:
            return
        world.state = GameState.OVER
        logger.info("Game over (%s). Final score: %s", reason, format_score(world.score))

    def step(self, world: World, surface: Optional[RenderSurface] = None):
        """
        One simulation frame. Does nothing while the game is over, so the
        last drawn frame stays on screen until a jump resets the world.
        """
        if world.is_over:
            return

        if surface is not None:
            surface.clear()

        bird = world.bird

        # 1. Gravity and movement
        bird.y, bird.velocity = self.apply_gravity_and_movement(bird.y, bird.velocity)

        # 2. Floor
        if self.hits_floor(bird):
            self.end_game(world, "hit the floor")

        # 3. Pipes: move, cull, score, collide
        kept = []
        for pipe in world.pipes:
            pipe.x += self.pipe_velocity_x

            if pipe.x + pipe.width < 0:
                logger.debug("Removed %s pipe at x=%.1f", pipe.variant.name.lower(), pipe.x)
            else:
                kept.append(pipe)
                if surface is not None:
                    surface.draw_image(pipe.variant.value, pipe.x, pipe.y, pipe.width, pipe.height)

            # Half a point per pipe, so a full pair is worth one
            if not pipe.passed and bird.x > pipe.x + pipe.width:
                world.score += 0.5
                pipe.passed = True

            if overlaps(bird, pipe):
                self.end_game(world, "hit a pipe")
        world.pipes = kept

        # 4. Bird and HUD
        if surface is not None:
            surface.draw_image(BIRD_SPRITE, bird.x, bird.y, bird.width, bird.height)
            surface.draw_text(format_score(world.score), *SCORE_POS, self.text_style)
            if world.is_over:
                surface.draw_text(GAME_OVER_TEXT, *GAME_OVER_POS, self.text_style)
