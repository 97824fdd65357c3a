import os
import sys
from pathlib import Path

import pytest

# Ensure the src/ layout is importable without an install
SRC = Path(__file__).resolve().parent.parent / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

# Headless pygame
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from flappy_arcade.controller import GameController  # noqa: E402
from flappy_arcade.spawner import PipeSpawner  # noqa: E402


class RecordingSurface:
    """Collects draw commands instead of drawing them."""

    def __init__(self):
        self.calls = []

    def clear(self):
        self.calls.append(("clear",))

    def draw_image(self, handle, x, y, width, height):
        self.calls.append(("image", handle, x, y, width, height))

    def draw_text(self, text, x, y, style):
        self.calls.append(("text", text, x, y))

    def texts(self):
        return [c[1] for c in self.calls if c[0] == "text"]

    def images(self):
        return [c[1] for c in self.calls if c[0] == "image"]


class FixedRandom:
    """Returns the same draw every time."""

    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def controller():
    return GameController(spawner=PipeSpawner(rng=FixedRandom(0.5)))
