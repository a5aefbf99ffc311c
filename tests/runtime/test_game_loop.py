"""Tests for the frame loop that drives rendering and growth."""

from __future__ import annotations

from hyphae.runtime.container import build_runtime_container
from hyphae.runtime.display_context import DisplayContext
from hyphae.runtime.game_loop import SEED_AXIOM, SEED_POSITIONS, GameLoop


class _ScriptedEventHandler:
    """Keeps the loop alive for a fixed number of frames, running ``on_frame`` each time."""

    def __init__(self, frames: int, on_frame=None) -> None:
        self.frames = frames
        self.on_frame = on_frame
        self.handled = 0

    def handle_events(self) -> bool:
        if self.handled == self.frames:
            return False
        if self.on_frame is not None:
            self.on_frame(self.handled)
        self.handled += 1
        return True


class TestGameLoop:
    def test_seed_creates_default_growth_points(self) -> None:
        loop = build_runtime_container(seed=1)[GameLoop]

        loop.seed()

        assert [(e.x, e.y) for e in loop.system.entities] == list(SEED_POSITIONS)
        assert all(e.sentence == SEED_AXIOM for e in loop.system.entities)

    def test_loop_runs_until_handler_stops(self) -> None:
        """Each frame publishes a tick, so requests made during the loop are applied."""
        handler = _ScriptedEventHandler(frames=3)
        container = build_runtime_container(
            seed=1, overrides={DisplayContext: DisplayContext(size=(200, 200))}
        )
        loop = container[GameLoop]
        loop.event_handler = handler
        loop.seed()

        def request_step(frame: int) -> None:
            if frame == 0:
                loop.renderer.provider.on_step_requested()

        handler.on_frame = request_step

        loop.start()

        assert handler.handled == 3
        assert loop.running is False
        assert all(entity.is_animating() for entity in loop.system.entities)
        assert all(entity.progress > 0 for entity in loop.system.entities)
        assert loop.renderer.initialized is False
