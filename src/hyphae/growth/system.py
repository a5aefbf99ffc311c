from __future__ import annotations

import random
from dataclasses import dataclass

import reactivex
from reactivex.subject import Subject

from hyphae.errors import ConfigError, StructuralError
from hyphae.grammar.rules import HYPHAE_RULES, RuleSet
from hyphae.grammar.turns import generate_random_axiom
from hyphae.growth.entity import GrowthCompleted, GrowthEntity
from hyphae.growth.state import HyphaeState
from hyphae.utilities.env.growth import (DEFAULT_ANIMATION_SPEED,
                                         DEFAULT_SPAWN_ANGLE_RANGE,
                                         DEFAULT_SPAWN_COUNT_RANGE)
from hyphae.utilities.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class SpawnSettings:
    """Ranges used when a random axiom is generated for a new growth point."""

    min_count: int = DEFAULT_SPAWN_COUNT_RANGE[0]
    max_count: int = DEFAULT_SPAWN_COUNT_RANGE[1]
    min_angle: int = DEFAULT_SPAWN_ANGLE_RANGE[0]
    max_angle: int = DEFAULT_SPAWN_ANGLE_RANGE[1]


@dataclass(frozen=True)
class GrowthStats:
    entities: int
    animating: int
    mean_sentence_length: int


class GrowthSystem:
    """Owns every growth entity plus the shared rule set and random source."""

    def __init__(
        self,
        *,
        rule_set: RuleSet = HYPHAE_RULES,
        rng: random.Random | None = None,
        animation_speed: float = DEFAULT_ANIMATION_SPEED,
        spawn_settings: SpawnSettings | None = None,
    ) -> None:
        if animation_speed <= 0:
            raise ConfigError(
                f"animation_speed must be positive, got {animation_speed}"
            )
        self.rule_set = rule_set
        self.rng = rng or random.Random()
        self.animation_speed = animation_speed
        self.spawn_settings = spawn_settings or SpawnSettings()
        self._entities: list[GrowthEntity] = []
        self._growth_completed: Subject[GrowthCompleted] = Subject()

    @property
    def entities(self) -> tuple[GrowthEntity, ...]:
        return tuple(self._entities)

    @property
    def growth_completed(self) -> reactivex.Observable[GrowthCompleted]:
        return self._growth_completed

    def __len__(self) -> int:
        return len(self._entities)

    def create_entity(
        self,
        axiom: str,
        x: float,
        y: float,
        rules: RuleSet | None = None,
    ) -> GrowthEntity:
        state = HyphaeState.from_axiom(axiom, animation_speed=self.animation_speed)
        entity = GrowthEntity(
            x=x,
            y=y,
            rule_set=rules or self.rule_set,
            state=state,
            rng=self.rng,
        )
        entity.completions.subscribe(self._on_growth_completed)
        self._entities.append(entity)
        logger.info(
            "Created entity #%d at (%s, %s) with axiom of length %d",
            len(self._entities) - 1,
            x,
            y,
            len(axiom),
        )
        return entity

    def create_with_random_axiom(
        self,
        x: float,
        y: float,
        rules: RuleSet | None = None,
        settings: SpawnSettings | None = None,
    ) -> GrowthEntity:
        settings = settings or self.spawn_settings
        axiom = generate_random_axiom(
            settings.min_count,
            settings.max_count,
            settings.min_angle,
            settings.max_angle,
            rng=self.rng,
        )
        return self.create_entity(axiom, x, y, rules)

    def step_all(self) -> int:
        """Step every idle entity; returns how many actually rewrote.

        An entity whose rules produce a malformed sentence keeps its previous
        shape and is logged; the remaining entities are still stepped.
        """

        stepped = 0
        for index, entity in enumerate(self._entities):
            try:
                if entity.step():
                    stepped += 1
            except StructuralError:
                logger.exception("Entity #%d produced a malformed sentence", index)
        return stepped

    def tick_animations(self, delta_progress: float | None = None) -> None:
        for entity in self._entities:
            entity.advance(delta_progress)

    def stats(self) -> GrowthStats:
        count = len(self._entities)
        total_length = sum(len(entity.sentence) for entity in self._entities)
        return GrowthStats(
            entities=count,
            animating=sum(1 for entity in self._entities if entity.is_animating()),
            mean_sentence_length=round(total_length / count) if count else 0,
        )

    def _on_growth_completed(self, event: GrowthCompleted) -> None:
        index = self._entities.index(event.entity)
        logger.info(
            "Entity #%d finished growing: length=%d depth=%d",
            index,
            len(event.sentence),
            event.depth,
        )
        logger.debug("Entity #%d sentence: %s", index, event.sentence)
        self._growth_completed.on_next(event)
