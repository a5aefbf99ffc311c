from __future__ import annotations

import random
from dataclasses import dataclass, replace
from enum import StrEnum

from hyphae.errors import ConfigError
from hyphae.grammar.depth import max_depth
from hyphae.grammar.engine import rewrite
from hyphae.grammar.rules import RuleSet
from hyphae.utilities.env.growth import DEFAULT_ANIMATION_SPEED


class GrowthPhase(StrEnum):
    IDLE = "idle"
    ANIMATING = "animating"


@dataclass(frozen=True)
class HyphaeState:
    """Immutable snapshot of one growing structure.

    ``previous_*`` describe the shape before the last rewrite so the renderer
    can interpolate between the two depths while ``progress`` runs to 1.
    """

    sentence: str
    depth: int
    previous_sentence: str = ""
    previous_depth: int = 0
    phase: GrowthPhase = GrowthPhase.IDLE
    progress: float = 0.0
    animation_speed: float = DEFAULT_ANIMATION_SPEED

    @classmethod
    def from_axiom(
        cls, axiom: str, *, animation_speed: float = DEFAULT_ANIMATION_SPEED
    ) -> HyphaeState:
        if animation_speed <= 0:
            raise ConfigError(
                f"animation_speed must be positive, got {animation_speed}"
            )
        depth = max_depth(axiom)
        return cls(
            sentence=axiom,
            depth=depth,
            previous_depth=depth,
            animation_speed=animation_speed,
        )

    @property
    def is_animating(self) -> bool:
        return self.phase is GrowthPhase.ANIMATING

    def render_progress(self) -> float:
        return self.progress if self.is_animating else 1.0

    def stepped(self, rule_set: RuleSet, rng: random.Random) -> HyphaeState:
        if self.is_animating:
            return self
        sentence = rewrite(self.sentence, rule_set, rng)
        return replace(
            self,
            sentence=sentence,
            depth=max_depth(sentence),
            previous_sentence=self.sentence,
            previous_depth=self.depth,
            phase=GrowthPhase.ANIMATING,
            progress=0.0,
        )

    def advanced(self, delta_progress: float | None = None) -> HyphaeState:
        if not self.is_animating:
            return self
        delta = self.animation_speed if delta_progress is None else delta_progress
        progress = self.progress + delta
        if progress >= 1.0:
            return replace(self, progress=1.0, phase=GrowthPhase.IDLE)
        return replace(self, progress=progress)
