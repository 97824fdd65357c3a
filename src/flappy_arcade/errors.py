"""
errors.py: Exceptions raised at the application boundary.

The simulation itself never raises; losing a run is the OVER game state.
"""


class FlappyError(Exception):
    """Base class for all flappy_arcade errors."""


class AssetLoadError(FlappyError):
    """A sprite could not be loaded. Fatal at startup."""

    def __init__(self, path, reason):
        super().__init__(f"Could not load sprite {path}: {reason}")
        self.path = path
        self.reason = reason
