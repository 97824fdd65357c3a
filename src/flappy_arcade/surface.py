"""
surface.py: The draw-command contract between the simulation and a renderer.
"""

from dataclasses import dataclass
from typing import Protocol, Tuple

from .constants import SCORE_COLOR, SCORE_FONT_SIZE


@dataclass(frozen=True)
class TextStyle:
    size: int = SCORE_FONT_SIZE
    color: Tuple[int, int, int] = SCORE_COLOR


class RenderSurface(Protocol):
    """Anything the world engine can draw a frame onto."""

    def clear(self) -> None:
        ...

    def draw_image(self, handle: str, x: float, y: float, width: float, height: float) -> None:
        ...

    def draw_text(self, text: str, x: float, y: float, style: TextStyle) -> None:
        ...
