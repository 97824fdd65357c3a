"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from .constants import (
    BIRD_X, BIRD_Y, BIRD_WIDTH, BIRD_HEIGHT, PIPE_WIDTH, PIPE_HEIGHT
)


class GameState(Enum):
    RUNNING = "running"
    OVER = "over"


class PipeVariant(Enum):
    """Which half of a pipe pair; the value is also the sprite handle."""
    TOP = "top_pipe"
    BOTTOM = "bottom_pipe"


@dataclass
class Bird:
    """The player-controlled bird. Only y and velocity change during play."""
    x: float = BIRD_X
    y: float = BIRD_Y
    width: float = BIRD_WIDTH
    height: float = BIRD_HEIGHT
    velocity: float = 0.0
    initial_y: float = BIRD_Y


@dataclass
class Pipe:
    x: float
    y: float
    variant: PipeVariant
    width: float = PIPE_WIDTH
    height: float = PIPE_HEIGHT
    passed: bool = False             # Already credited toward the score?


@dataclass
class World:
    """The whole simulation state, mutated only through the controller."""
    bird: Bird = field(default_factory=Bird)
    pipes: List[Pipe] = field(default_factory=list)   # Spawn order == left to right
    score: float = 0.0
    state: GameState = GameState.RUNNING

    @property
    def is_over(self) -> bool:
        return self.state is GameState.OVER

    def to_state(self):
        """Prepares a minimal state dictionary for logging and inspection."""
        return {
            "score": self.score,
            "state": self.state.value,
            "y": round(self.bird.y, 2),
            "v": round(self.bird.velocity, 2),
            "pipes": len(self.pipes),
        }
