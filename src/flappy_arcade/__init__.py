"""
Single-screen Flappy Bird: a falling bird, a stream of pipe pairs, one button.
"""

from .controller import GameController
from .data_models import Bird, GameState, Pipe, PipeVariant, World
from .errors import AssetLoadError, FlappyError
from .physics_core import PhysicsCore, overlaps
from .physics_engine import WorldEngine
from .spawner import PipeSpawner

__all__ = [
    "AssetLoadError", "Bird", "FlappyError", "GameController", "GameState",
    "Pipe", "PipeSpawner", "PipeVariant", "PhysicsCore", "World", "WorldEngine",
    "overlaps",
]
