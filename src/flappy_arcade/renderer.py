"""
renderer.py: pygame implementation of the draw-command surface and sprite loading.
"""

import logging
import os
from typing import Dict, Optional, Tuple

import pygame

from .constants import (
    BACKGROUND_COLOR, BIRD_COLOR, BIRD_HEIGHT, BIRD_IMAGE, BIRD_WIDTH,
    BOTTOM_PIPE_IMAGE, PIPE_COLOR, PIPE_HEIGHT, PIPE_WIDTH, TOP_PIPE_IMAGE
)
from .data_models import PipeVariant
from .errors import AssetLoadError
from .physics_engine import BIRD_SPRITE
from .surface import TextStyle

logger = logging.getLogger(__name__)

SPRITE_FILES = {
    BIRD_SPRITE: BIRD_IMAGE,
    PipeVariant.TOP.value: TOP_PIPE_IMAGE,
    PipeVariant.BOTTOM.value: BOTTOM_PIPE_IMAGE,
}

PIPE_CAP_HEIGHT = 24


def _placeholder_sprites() -> Dict[str, pygame.Surface]:
    """Flat-colour sprites so the game runs without any image files."""
    bird = pygame.Surface((BIRD_WIDTH, BIRD_HEIGHT))
    bird.fill(BIRD_COLOR)

    cap_color = tuple(max(c - 50, 0) for c in PIPE_COLOR)
    top = pygame.Surface((PIPE_WIDTH, PIPE_HEIGHT))
    top.fill(PIPE_COLOR)
    pygame.draw.rect(top, cap_color, (0, PIPE_HEIGHT - PIPE_CAP_HEIGHT, PIPE_WIDTH, PIPE_CAP_HEIGHT))

    bottom = pygame.Surface((PIPE_WIDTH, PIPE_HEIGHT))
    bottom.fill(PIPE_COLOR)
    pygame.draw.rect(bottom, cap_color, (0, 0, PIPE_WIDTH, PIPE_CAP_HEIGHT))

    return {
        BIRD_SPRITE: bird,
        PipeVariant.TOP.value: top,
        PipeVariant.BOTTOM.value: bottom,
    }


def load_sprites(asset_dir: Optional[str] = None) -> Dict[str, pygame.Surface]:
    """
    Loads the bird and pipe images from ``asset_dir``.
    Any missing or unreadable file raises AssetLoadError; nothing is retried.
    """
    if asset_dir is None:
        logger.info("No asset directory configured, using placeholder sprites.")
        return _placeholder_sprites()

    sprites = {}
    for handle, filename in SPRITE_FILES.items():
        path = os.path.join(asset_dir, filename)
        if not os.path.isfile(path):
            raise AssetLoadError(path, "file not found")
        try:
            image = pygame.image.load(path)
        except pygame.error as e:
            raise AssetLoadError(path, str(e)) from e
        if pygame.display.get_surface() is not None:
            image = image.convert_alpha()
        sprites[handle] = image
        logger.debug("Loaded sprite %s from %s", handle, path)
    return sprites


class PygameSurface:
    """Draws world frames onto a pygame surface."""

    def __init__(self, screen: pygame.Surface, sprites: Dict[str, pygame.Surface],
                 background: Tuple[int, int, int] = BACKGROUND_COLOR):
        self.screen = screen
        self.sprites = sprites
        self.background = background
        self._fonts: Dict[int, pygame.font.Font] = {}
        self._scaled: Dict[Tuple[str, int, int], pygame.Surface] = {}

    def clear(self):
        self.screen.fill(self.background)

    def draw_image(self, handle: str, x: float, y: float, width: float, height: float):
        self.screen.blit(self._sprite(handle, int(width), int(height)), (x, y))

    def draw_text(self, text: str, x: float, y: float, style: TextStyle):
        # y is the text baseline
        font = self._font(style.size)
        rendered = font.render(text, True, style.color)
        self.screen.blit(rendered, (x, y - font.get_ascent()))

    def _sprite(self, handle: str, width: int, height: int) -> pygame.Surface:
        key = (handle, width, height)
        if key not in self._scaled:
            image = self.sprites[handle]
            if image.get_size() != (width, height):
                image = pygame.transform.scale(image, (width, height))
            self._scaled[key] = image
        return self._scaled[key]

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]
