from __future__ import annotations

import random
import re
from dataclasses import dataclass

from hyphae.errors import ConfigError

PLACEHOLDERS = "abcdefg"
PLACEHOLDER_PATTERN = re.compile(f"[{PLACEHOLDERS}]")
DEFAULT_ANGLE_COUNT = 8
DEFAULT_ANGLE_RANGE = (-40, 40)


@dataclass(frozen=True)
class Rule:
    """Replace ``pattern`` with ``template``; ``a``..``g`` in the template become turns."""

    pattern: str
    template: str

    def placeholder_indices(self) -> set[int]:
        return {
            PLACEHOLDERS.index(match.group())
            for match in PLACEHOLDER_PATTERN.finditer(self.template)
        }


@dataclass(frozen=True)
class RuleSet:
    """An ordered, immutable collection of rules plus their angle parameters.

    Rules are tried in order and the first match wins. Each successful match
    draws ``angle_count`` fresh integers from ``[min_angle, max_angle]``.
    """

    rules: tuple[Rule, ...]
    angle_count: int = DEFAULT_ANGLE_COUNT
    min_angle: int = DEFAULT_ANGLE_RANGE[0]
    max_angle: int = DEFAULT_ANGLE_RANGE[1]

    def __post_init__(self) -> None:
        # Accept any iterable of rules but store a tuple so sharing stays safe.
        object.__setattr__(self, "rules", tuple(self.rules))
        if self.min_angle > self.max_angle:
            raise ConfigError(
                f"min_angle ({self.min_angle}) must not exceed max_angle ({self.max_angle})"
            )
        if self.angle_count < 0:
            raise ConfigError(f"angle_count must be >= 0, got {self.angle_count}")
        for position, rule in enumerate(self.rules):
            if not rule.pattern:
                raise ConfigError(f"rule {position} has an empty pattern")
            used = rule.placeholder_indices()
            if used and max(used) >= self.angle_count:
                raise ConfigError(
                    f"rule {position} uses placeholder "
                    f"{PLACEHOLDERS[max(used)]!r} but only {self.angle_count} angles are drawn"
                )

    def draw_angles(self, rng: random.Random) -> list[int]:
        return [
            rng.randint(self.min_angle, self.max_angle)
            for _ in range(self.angle_count)
        ]

    def with_angle_range(self, min_angle: int, max_angle: int) -> RuleSet:
        return RuleSet(
            rules=self.rules,
            angle_count=self.angle_count,
            min_angle=min_angle,
            max_angle=max_angle,
        )


# A segment that closes a branch sprouts two three-segment side branches.
HYPHAE_RULES = RuleSet(rules=(Rule(pattern="M]", template="M[aMbMcM][eMfMgM]]"),))
