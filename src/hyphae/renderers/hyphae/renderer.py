from __future__ import annotations

import pygame

from hyphae.errors import StructuralError
from hyphae.renderers.hyphae.backend import PygameTurtleBackend
from hyphae.renderers.hyphae.overlay import FrameRateTracker
from hyphae.renderers.hyphae.provider import HyphaeStateProvider
from hyphae.renderers.hyphae.state import HyphaeSnapshot
from hyphae.renderers.stateful import StatefulBaseRenderer
from hyphae.turtle.interpreter import TurtleSettings, render
from hyphae.utilities.logging import get_logger

logger = get_logger(__name__)

BACKGROUND_COLOR = (51, 51, 51)
CURSOR_COLOR = (255, 100, 100)
CURSOR_RADIUS = 10
STATUS_COLOR = (230, 230, 230)
STATUS_ORIGIN = (8, 8)


class HyphaeRenderer(StatefulBaseRenderer[HyphaeSnapshot]):
    def __init__(
        self,
        provider: HyphaeStateProvider,
        settings: TurtleSettings | None = None,
    ) -> None:
        super().__init__(builder=provider)
        self.provider = provider
        self.settings = settings or TurtleSettings()
        self.frame_rate = FrameRateTracker()
        self._font: pygame.font.Font | None = None
        self._status_rect: pygame.Rect | None = None

    def ui_regions(self) -> list[pygame.Rect]:
        """Screen areas where clicks belong to the overlay, not the canvas."""

        if self._status_rect is None or not self.state.dev_mode:
            return []
        return [self._status_rect]

    def real_process(self, window: pygame.Surface, clock: pygame.time.Clock) -> None:
        snapshot = self.state
        window.fill(BACKGROUND_COLOR)

        layer = pygame.Surface(window.get_size(), pygame.SRCALPHA)
        for index, entity in enumerate(snapshot.entities):
            backend = PygameTurtleBackend(layer)
            try:
                render(entity, backend, self.settings)
            except StructuralError:
                logger.exception("Skipping entity #%d with a malformed sentence", index)
        window.blit(layer, (0, 0))

        if snapshot.dev_mode:
            self._draw_status(window, snapshot)
        else:
            self._status_rect = None
            self.frame_rate.reset()
        self._draw_cursor(window)

    def _draw_status(self, window: pygame.Surface, snapshot: HyphaeSnapshot) -> None:
        fps = self.frame_rate.record(snapshot.frame_ms)
        if self._font is None:
            self._font = pygame.font.Font(None, 22)
        text = (
            f"FPS: {fps} | Objects: {snapshot.stats.entities} "
            f"| Animating: {snapshot.stats.animating}"
        )
        if snapshot.timer.running:
            text += " | running"
        label = self._font.render(text, True, STATUS_COLOR)
        self._status_rect = window.blit(label, STATUS_ORIGIN)

    def _draw_cursor(self, window: pygame.Surface) -> None:
        if not pygame.mouse.get_focused():
            return
        position = pygame.mouse.get_pos()
        if window.get_rect().collidepoint(position):
            pygame.draw.circle(window, CURSOR_COLOR, position, CURSOR_RADIUS, 2)
