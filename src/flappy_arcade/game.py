"""
game.py: pygame window, frame loop, spawn timer and input bindings.
"""

import logging
from typing import Optional

import pygame

from .constants import BOARD_HEIGHT, BOARD_WIDTH, FPS, PIPE_SPAWN_INTERVAL_MS, WINDOW_TITLE
from .controller import GameController
from .renderer import PygameSurface, load_sprites

logger = logging.getLogger(__name__)

SPAWN_PIPES_EVENT = pygame.USEREVENT + 1
JUMP_KEYS = (pygame.K_SPACE, pygame.K_UP, pygame.K_x)


def is_jump_event(event: pygame.event.Event) -> bool:
    """Keys, left click and touch all mean the same thing: jump."""
    if event.type == pygame.KEYDOWN:
        return event.key in JUMP_KEYS
    if event.type == pygame.FINGERDOWN:
        return True
    if event.type == pygame.MOUSEBUTTONDOWN:
        # SDL mirrors every touch as a mouse click; FINGERDOWN already handled it
        return event.button == 1 and not getattr(event, "touch", False)
    return False


class FlappyGame:
    def __init__(self, controller: Optional[GameController] = None,
                 asset_dir: Optional[str] = None, fps: int = FPS):
        pygame.init()
        self.screen = pygame.display.set_mode((BOARD_WIDTH, BOARD_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)

        self.controller = controller or GameController()
        self.surface = PygameSurface(self.screen, load_sprites(asset_dir))

        self.clock = pygame.time.Clock()
        self.fps = fps
        self.running = False

    def handle_event(self, event: pygame.event.Event):
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.running = False
        elif event.type == SPAWN_PIPES_EVENT:
            self.controller.on_spawn_tick()
        elif is_jump_event(event):
            self.controller.jump()

    def frame(self):
        """Drains pending input, then advances and presents one frame."""
        for event in pygame.event.get():
            self.handle_event(event)
        if not self.running:
            return
        self.controller.on_frame(self.surface)
        pygame.display.flip()

    def run(self):
        """The main loop. Every iteration requests the next frame, over or not."""
        pygame.time.set_timer(SPAWN_PIPES_EVENT, PIPE_SPAWN_INTERVAL_MS)
        self.running = True
        logger.info("Game started at %d FPS, pipes every %d ms.", self.fps, PIPE_SPAWN_INTERVAL_MS)
        try:
            while self.running:
                self.clock.tick(self.fps)
                self.frame()
        finally:
            pygame.time.set_timer(SPAWN_PIPES_EVENT, 0)
            pygame.quit()
            logger.info("Game closed.")
