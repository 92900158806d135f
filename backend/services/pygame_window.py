"""
Pygame host loop for an interactive session.

The window is the fixed-rate scheduler around the engine: it collects key
presses for the KeyController, calls session.tick() once per frame and
shows the TileRenderer canvas. It stops as soon as the session reports game
over so a finished session is never ticked again.
"""

import logging
from typing import Optional

import pygame

from domain.constants import FPS
from players.key_controller import KeyController
from services.tile_renderer import TileRenderer

logger = logging.getLogger(__name__)


class PygameWindow:
    """Runs a GameSession in a pygame window"""

    def __init__(
        self,
        session,
        controller: KeyController,
        renderer: TileRenderer,
        fps: int = FPS,
        title: str = "Snake"
    ):
        self.session = session
        self.controller = controller
        self.renderer = renderer
        self.fps = fps
        self.title = title

        self.screen: Optional[pygame.Surface] = None
        self.clock: Optional[pygame.time.Clock] = None
        self.closed_by_user = False

    def open(self):
        pygame.init()
        size = (self.renderer.canvas_size, self.renderer.canvas_size)
        self.screen = pygame.display.set_mode(size)
        pygame.display.set_caption(self.title)
        self.clock = pygame.time.Clock()

    def close(self):
        pygame.quit()
        self.screen = None
        self.clock = None

    def poll_events(self) -> bool:
        """Forward key presses to the controller. Returns False once the window is closed."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.closed_by_user = True
                return False
            if event.type == pygame.KEYDOWN:
                self.controller.handle_key(pygame.key.name(event.key))
        return True

    def draw(self):
        # surfarray wants (width, height, 3)
        frame = self.renderer.to_array().swapaxes(0, 1)
        surface = pygame.surfarray.make_surface(frame)
        self.screen.blit(surface, (0, 0))
        pygame.display.flip()

    def run(self, max_ticks: Optional[int] = None) -> int:
        """
        Tick the session until it ends, the window closes or max_ticks is reached.

        Returns:
            The number of ticks executed
        """
        ticks = 0
        self.open()
        try:
            self.draw()
            while not self.session.game_over:
                if max_ticks is not None and ticks >= max_ticks:
                    break
                if not self.poll_events():
                    logger.info("Window closed after %d ticks", ticks)
                    break

                self.session.tick()
                ticks += 1

                self.draw()
                self.clock.tick(self.fps)
        finally:
            self.close()

        return ticks
