from __future__ import annotations

import random
from typing import Any, Mapping

from lagom import Container, Singleton

from hyphae.grammar.rules import HYPHAE_RULES
from hyphae.growth.system import GrowthSystem, SpawnSettings
from hyphae.renderers.hyphae.provider import HyphaeStateProvider
from hyphae.renderers.hyphae.renderer import HyphaeRenderer
from hyphae.runtime.display_context import DisplayContext
from hyphae.runtime.game_loop import GameLoop
from hyphae.runtime.pygame_event_handler import PygameEventHandler
from hyphae.runtime.signals import LoopSignals
from hyphae.turtle.interpreter import TurtleSettings
from hyphae.utilities.env import Configuration
from hyphae.utilities.logging import get_logger

RuntimeContainer = Container

logger = get_logger(__name__)


def build_runtime_container(
    *,
    seed: int | None = None,
    dev_mode: bool | None = None,
    overrides: Mapping[type[Any], object] | None = None,
) -> RuntimeContainer:
    container = Container()
    logger.debug("Created Lagom container for runtime configuration.")
    configure_runtime_container(
        container=container,
        seed=Configuration.seed() if seed is None else seed,
        dev_mode=Configuration.dev_mode() if dev_mode is None else dev_mode,
        overrides=overrides,
    )
    return container


def _build_growth_system(rng: random.Random) -> GrowthSystem:
    min_count, max_count = Configuration.spawn_count_range()
    min_angle, max_angle = Configuration.spawn_angle_range()
    return GrowthSystem(
        rule_set=HYPHAE_RULES.with_angle_range(*Configuration.rewrite_angle_range()),
        rng=rng,
        animation_speed=Configuration.animation_speed(),
        spawn_settings=SpawnSettings(
            min_count=min_count,
            max_count=max_count,
            min_angle=min_angle,
            max_angle=max_angle,
        ),
    )


def configure_runtime_container(
    *,
    container: RuntimeContainer,
    seed: int | None,
    dev_mode: bool,
    overrides: Mapping[type[Any], object] | None = None,
) -> None:
    logger.debug(
        "Configuring Lagom runtime container with overrides=%s.",
        set(overrides.keys()) if overrides else set(),
    )
    _bind(container, overrides, random.Random, Singleton(lambda _: random.Random(seed)))
    _bind(container, overrides, LoopSignals, Singleton(LoopSignals))
    _bind(
        container,
        overrides,
        GrowthSystem,
        Singleton(lambda resolver: _build_growth_system(resolver[random.Random])),
    )
    _bind(
        container,
        overrides,
        TurtleSettings,
        Singleton(
            lambda _: TurtleSettings(
                segment_length=Configuration.segment_length(),
                turn_unit_degrees=Configuration.turn_unit_degrees(),
            )
        ),
    )
    _bind(
        container,
        overrides,
        HyphaeStateProvider,
        Singleton(
            lambda resolver: HyphaeStateProvider(
                system=resolver[GrowthSystem],
                signals=resolver[LoopSignals],
                step_interval_ms=Configuration.step_interval_ms(),
                dev_mode=dev_mode,
            )
        ),
    )
    _bind(
        container,
        overrides,
        HyphaeRenderer,
        Singleton(
            lambda resolver: HyphaeRenderer(
                provider=resolver[HyphaeStateProvider],
                settings=resolver[TurtleSettings],
            )
        ),
    )
    _bind(
        container,
        overrides,
        PygameEventHandler,
        Singleton(
            lambda resolver: PygameEventHandler(
                provider=resolver[HyphaeStateProvider],
                renderer=resolver[HyphaeRenderer],
            )
        ),
    )
    _bind(
        container,
        overrides,
        DisplayContext,
        Singleton(lambda _: DisplayContext(size=Configuration.window_size())),
    )
    _bind(
        container,
        overrides,
        GameLoop,
        Singleton(
            lambda resolver: GameLoop(
                system=resolver[GrowthSystem],
                renderer=resolver[HyphaeRenderer],
                event_handler=resolver[PygameEventHandler],
                signals=resolver[LoopSignals],
                display=resolver[DisplayContext],
                max_fps=Configuration.max_fps(),
            )
        ),
    )


def _bind(
    container: RuntimeContainer,
    overrides: Mapping[type[Any], object] | None,
    key: type[Any],
    value: object,
) -> None:
    if overrides and key in overrides:
        container[key] = overrides[key]
        logger.debug("Applied Lagom override for %s.", key)
        return
    if key in container.defined_types:
        logger.debug("Lagom already defined %s; skipping registration.", key)
        return
    container[key] = value
    logger.debug("Registered Lagom provider for %s.", key)
