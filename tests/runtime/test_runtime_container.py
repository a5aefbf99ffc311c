"""Tests for the Lagom runtime wiring."""

from __future__ import annotations

import random

import pytest

from hyphae.growth.system import GrowthSystem
from hyphae.renderers.hyphae.provider import HyphaeStateProvider
from hyphae.renderers.hyphae.renderer import HyphaeRenderer
from hyphae.runtime.container import build_runtime_container
from hyphae.runtime.display_context import DisplayContext
from hyphae.runtime.game_loop import GameLoop
from hyphae.runtime.pygame_event_handler import PygameEventHandler
from hyphae.runtime.signals import LoopSignals
from hyphae.turtle.interpreter import TurtleSettings


class TestRuntimeContainer:
    """Validate that runtime services resolve once and share their collaborators."""

    def test_core_services_are_singletons(self) -> None:
        container = build_runtime_container(seed=1)

        assert container[GrowthSystem] is container[GrowthSystem]
        assert container[LoopSignals] is container[LoopSignals]
        assert container[HyphaeRenderer].provider is container[HyphaeStateProvider]
        assert container[HyphaeStateProvider].system is container[GrowthSystem]
        assert container[PygameEventHandler].renderer is container[HyphaeRenderer]

    def test_game_loop_shares_collaborators(self) -> None:
        container = build_runtime_container(seed=1)

        loop = container[GameLoop]

        assert loop.system is container[GrowthSystem]
        assert loop.signals is container[LoopSignals]
        assert loop.display is container[DisplayContext]

    def test_seed_makes_growth_repeatable(self) -> None:
        """Two runtimes built from the same seed grow identical sentences."""
        sentences = []
        for _ in range(2):
            system = build_runtime_container(seed=42)[GrowthSystem]
            entity = system.create_with_random_axiom(0, 0)
            entity.step()
            sentences.append(entity.sentence)

        assert sentences[0] == sentences[1]

    def test_environment_configures_services(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("HYPHAE_ANIMATION_SPEED", "0.05")
        monkeypatch.setenv("HYPHAE_REWRITE_MIN_ANGLE", "-5")
        monkeypatch.setenv("HYPHAE_REWRITE_MAX_ANGLE", "5")
        monkeypatch.setenv("HYPHAE_SPAWN_MAX_COUNT", "3")
        monkeypatch.setenv("HYPHAE_SEGMENT_LENGTH", "4")
        monkeypatch.setenv("HYPHAE_WINDOW_WIDTH", "320")
        monkeypatch.setenv("HYPHAE_DEV_MODE", "true")

        container = build_runtime_container()

        system = container[GrowthSystem]
        assert system.animation_speed == 0.05
        assert (system.rule_set.min_angle, system.rule_set.max_angle) == (-5, 5)
        assert system.spawn_settings.max_count == 3
        assert container[TurtleSettings].segment_length == 4.0
        assert container[DisplayContext].size == (320, 768)
        assert container[HyphaeStateProvider].initial_snapshot().dev_mode is True

    def test_overrides_replace_bindings(self) -> None:
        rng = random.Random(3)
        system = GrowthSystem(rng=rng)

        container = build_runtime_container(overrides={GrowthSystem: system})

        assert container[GrowthSystem] is system
        assert container[GameLoop].system is system

    def test_zero_animation_speed_fails_before_any_entity(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """A frozen animation is rejected while wiring, not on the first seed or click."""
        monkeypatch.setenv("HYPHAE_ANIMATION_SPEED", "0")
        container = build_runtime_container(seed=1)

        with pytest.raises(ValueError, match="HYPHAE_ANIMATION_SPEED"):
            container[GrowthSystem]
