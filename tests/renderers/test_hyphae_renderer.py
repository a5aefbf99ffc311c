"""Tests for the pygame renderer that draws every growth entity each frame."""

from __future__ import annotations

import pygame
import pytest

from helpers.clock import StubClock
from helpers.rng import ScriptedRandom
from hyphae.growth.system import GrowthSystem
from hyphae.renderers.hyphae.overlay import FrameRateTracker
from hyphae.renderers.hyphae.provider import HyphaeStateProvider
from hyphae.renderers.hyphae.renderer import BACKGROUND_COLOR, HyphaeRenderer
from hyphae.runtime.signals import LoopSignals


@pytest.fixture()
def window() -> pygame.Surface:
    return pygame.Surface((200, 200))


def _renderer(dev_mode: bool = False) -> HyphaeRenderer:
    provider = HyphaeStateProvider(
        system=GrowthSystem(rng=ScriptedRandom()),
        signals=LoopSignals(),
        dev_mode=dev_mode,
    )
    return HyphaeRenderer(provider)


class TestFrameRateTracker:
    def test_average_refreshes_on_interval(self) -> None:
        tracker = FrameRateTracker(window=4, refresh_every=2)

        assert tracker.record(20) == 0
        assert tracker.record(20) == 50
        assert tracker.record(10) == 50
        assert tracker.record(10) == round(4 * 1000 / 60)

    def test_zero_duration_frames_report_zero(self) -> None:
        tracker = FrameRateTracker(window=2, refresh_every=1)

        assert tracker.record(0) == 0

    def test_reset_clears_history(self) -> None:
        tracker = FrameRateTracker(window=4, refresh_every=1)
        tracker.record(10)

        tracker.reset()

        assert tracker.average_fps == 0
        assert tracker.record(20) == 50


class TestHyphaeRenderer:
    def test_process_requires_initialize(self, window: pygame.Surface) -> None:
        renderer = _renderer()

        with pytest.raises(ValueError):
            renderer.process(window, StubClock())

    def test_draws_entities_over_background(self, window: pygame.Surface) -> None:
        renderer = _renderer()
        renderer.provider.system.create_entity("[M]", 100, 150)
        renderer.initialize(window, StubClock())

        renderer.process(window, StubClock())

        assert window.get_at((0, 0))[:3] == BACKGROUND_COLOR
        assert window.get_at((100, 145))[:3] != BACKGROUND_COLOR

    def test_malformed_entity_is_skipped(
        self, window: pygame.Surface, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """One broken sentence must not stop the rest of the frame from drawing."""
        renderer = _renderer()
        system = renderer.provider.system
        broken = system.create_entity("[M]", 20, 150)
        system.create_entity("[M]", 150, 150)
        monkeypatch.setattr(
            type(broken),
            "sentence",
            property(lambda entity: "[M" if entity is broken else entity.state.sentence),
        )
        renderer.initialize(window, StubClock())

        renderer.process(window, StubClock())

        assert window.get_at((20, 145))[:3] == BACKGROUND_COLOR
        assert window.get_at((150, 145))[:3] != BACKGROUND_COLOR

    def test_ui_regions_follow_dev_mode(self, window: pygame.Surface) -> None:
        renderer = _renderer(dev_mode=True)
        renderer.initialize(window, StubClock())

        renderer.process(window, StubClock())
        regions = renderer.ui_regions()

        assert len(regions) == 1
        assert regions[0].topleft == (8, 8)

        renderer.provider.toggle_dev_mode()
        renderer.process(window, StubClock())

        assert renderer.ui_regions() == []

    def test_reset_unsubscribes(self, window: pygame.Surface) -> None:
        renderer = _renderer()
        renderer.initialize(window, StubClock())

        renderer.reset()

        assert renderer.initialized is False
        with pytest.raises(ValueError):
            renderer.process(window, StubClock())
