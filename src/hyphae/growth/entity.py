from __future__ import annotations

import random
from dataclasses import dataclass

import reactivex
from reactivex.subject import Subject

from hyphae.grammar.rules import RuleSet
from hyphae.growth.state import GrowthPhase, HyphaeState
from hyphae.utilities.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class GrowthCompleted:
    entity: GrowthEntity
    sentence: str
    depth: int


class GrowthEntity:
    """A growth point anchored at ``(x, y)`` that rewrites and animates itself.

    The committed :class:`HyphaeState` is only replaced once a transition has
    been fully computed, so a failed rewrite leaves the entity untouched.
    """

    def __init__(
        self,
        *,
        x: float,
        y: float,
        rule_set: RuleSet,
        state: HyphaeState,
        rng: random.Random,
    ) -> None:
        self.x = x
        self.y = y
        self.rule_set = rule_set
        self._state = state
        self._rng = rng
        self._completions: Subject[GrowthCompleted] = Subject()

    @property
    def state(self) -> HyphaeState:
        return self._state

    @property
    def sentence(self) -> str:
        return self._state.sentence

    @property
    def previous_sentence(self) -> str:
        return self._state.previous_sentence

    @property
    def depth(self) -> int:
        return self._state.depth

    @property
    def previous_depth(self) -> int:
        return self._state.previous_depth

    @property
    def phase(self) -> GrowthPhase:
        return self._state.phase

    @property
    def progress(self) -> float:
        return self._state.progress

    @property
    def completions(self) -> reactivex.Observable[GrowthCompleted]:
        return self._completions

    def is_animating(self) -> bool:
        return self._state.is_animating

    def render_progress(self) -> float:
        return self._state.render_progress()

    def step(self) -> bool:
        """Rewrite the sentence once; returns ``False`` if already animating."""

        if self._state.is_animating:
            logger.debug("Ignoring step at (%s, %s) while animating", self.x, self.y)
            return False
        self._state = self._state.stepped(self.rule_set, self._rng)
        return True

    def advance(self, delta_progress: float | None = None) -> None:
        """Move the animation forward; ``None`` uses the entity's own speed."""

        if not self._state.is_animating:
            return
        self._state = self._state.advanced(delta_progress)
        if not self._state.is_animating:
            self._completions.on_next(
                GrowthCompleted(
                    entity=self,
                    sentence=self._state.sentence,
                    depth=self._state.depth,
                )
            )

    def __repr__(self) -> str:
        return (
            f"GrowthEntity(x={self.x}, y={self.y}, phase={self.phase.value}, "
            f"depth={self.depth}, length={len(self.sentence)})"
        )
