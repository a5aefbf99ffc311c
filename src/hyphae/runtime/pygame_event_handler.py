from __future__ import annotations

import pygame

from hyphae.renderers.hyphae.provider import HyphaeStateProvider
from hyphae.renderers.hyphae.renderer import HyphaeRenderer
from hyphae.utilities.logging import get_logger

logger = get_logger(__name__)

LEFT_BUTTON = 1


class PygameEventHandler:
    """Translate pygame input into growth requests.

    ``S`` steps every idle entity, ``R`` starts the run timer, ``X`` stops it,
    ``D`` toggles the dev overlay and a left click spawns a new growth point.
    """

    def __init__(self, provider: HyphaeStateProvider, renderer: HyphaeRenderer) -> None:
        self.provider = provider
        self.renderer = renderer

    def handle_events(self) -> bool:
        running = True
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                running = self._handle_key(event.key)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == LEFT_BUTTON:
                self._handle_click(event.pos)
            elif event.type == pygame.VIDEORESIZE:
                logger.info("Window resized to %sx%s", event.w, event.h)
        return running

    def _handle_key(self, key: int) -> bool:
        if key == pygame.K_ESCAPE:
            return False
        if key == pygame.K_s:
            self.provider.on_step_requested()
        elif key == pygame.K_r:
            self.provider.start_run()
        elif key == pygame.K_x:
            self.provider.stop_run()
        elif key == pygame.K_d:
            self.provider.toggle_dev_mode()
        return True

    def _handle_click(self, position: tuple[int, int]) -> None:
        if any(region.collidepoint(position) for region in self.renderer.ui_regions()):
            logger.debug("Ignoring click on overlay at %s", position)
            return
        self.provider.on_spawn_requested(*position)
