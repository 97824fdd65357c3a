"""
physics_core.py: The deterministic kinematic functions and collision logic.
"""

from dataclasses import dataclass
from typing import Optional

from .constants import BOARD_HEIGHT, GRAVITY, JUMP_VELOCITY, MAX_FALL_VELOCITY
from .data_models import Bird


def overlaps(a, b) -> bool:
    """
    Axis-aligned box test for anything with x, y, width and height.
    Edges that merely touch do not count as a collision.
    """
    return (a.x < b.x + b.width and
            a.x + a.width > b.x and
            a.y < b.y + b.height and
            a.y + a.height > b.y)


@dataclass
class PhysicsCore:
    """
    Per-frame physics shared by the world engine and the controller.
    """
    gravity: float = GRAVITY
    jump_velocity: float = JUMP_VELOCITY
    max_fall_velocity: Optional[float] = MAX_FALL_VELOCITY
    board_height: float = BOARD_HEIGHT

    def apply_gravity_and_movement(self, y: float, velocity: float) -> tuple[float, float]:
        """
        Calculates new position and velocity after one frame.
        The top boundary clamps y but leaves velocity untouched.
        """
        velocity += self.gravity
        if self.max_fall_velocity is not None:
            velocity = min(velocity, self.max_fall_velocity)
        y = max(y + velocity, 0)
        return y, velocity

    def flap(self) -> float:
        """Returns the velocity right after a jump."""
        return self.jump_velocity

    def hits_floor(self, bird: Bird) -> bool:
        return bird.y + bird.height > self.board_height
