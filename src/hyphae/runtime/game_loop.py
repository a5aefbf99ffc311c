from __future__ import annotations

import pygame

from hyphae.growth.system import GrowthSystem
from hyphae.renderers.hyphae.renderer import HyphaeRenderer
from hyphae.runtime.display_context import DisplayContext
from hyphae.runtime.pygame_event_handler import PygameEventHandler
from hyphae.runtime.signals import LoopSignals
from hyphae.utilities.logging import get_logger

logger = get_logger(__name__)

SEED_AXIOM = "[M]"
SEED_POSITIONS = ((400, 400), (55, 600))


class GameLoop:
    def __init__(
        self,
        *,
        system: GrowthSystem,
        renderer: HyphaeRenderer,
        event_handler: PygameEventHandler,
        signals: LoopSignals,
        display: DisplayContext,
        max_fps: int,
    ) -> None:
        self.system = system
        self.renderer = renderer
        self.event_handler = event_handler
        self.signals = signals
        self.display = display
        self.max_fps = max_fps
        self.running = False

    def seed(self) -> None:
        for x, y in SEED_POSITIONS:
            self.system.create_entity(SEED_AXIOM, x, y)

    def start(self) -> None:
        logger.info("Starting GameLoop")
        self.display.initialize()
        self.display.ensure_initialized()
        assert self.display.screen is not None and self.display.clock is not None

        self.signals.window.on_next(self.display.screen)
        self.signals.clock.on_next(self.display.clock)
        self.renderer.initialize(self.display.screen, self.display.clock)

        self.running = True
        logger.info("Entering main loop.")
        try:
            self._run_main_loop()
        finally:
            logger.info("Shutting down GameLoop.")
            self.renderer.reset()
            pygame.quit()

    def _run_main_loop(self) -> None:
        assert self.display.clock is not None
        while self.running:
            self.running = self.event_handler.handle_events()
            if not self.running:
                break
            self.signals.game_tick.on_next(True)

            screen = pygame.display.get_surface()
            self.renderer.process(screen, self.display.clock)
            pygame.display.flip()

            self.display.clock.tick(self.max_fps)
            self.signals.clock.on_next(self.display.clock)
