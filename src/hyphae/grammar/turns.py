from __future__ import annotations

import random

from hyphae.errors import ConfigError

TURN_RIGHT = "+"
TURN_LEFT = "-"


def turn_string(degrees: int) -> str:
    """Encode ``degrees`` as a run of ``+`` (non-negative) or ``-`` characters."""

    return (TURN_RIGHT if degrees >= 0 else TURN_LEFT) * abs(degrees)


def generate_random_axiom(
    min_count: int = 1,
    max_count: int = 5,
    min_angle: int = -40,
    max_angle: int = 40,
    *,
    rng: random.Random | None = None,
) -> str:
    """Return ``min_count..max_count`` branches of the form ``[<turns>M]``.

    The branch count and each branch's angle are drawn uniformly from the
    inclusive ranges.
    """

    if min_count < 0:
        raise ConfigError(f"min_count must be >= 0, got {min_count}")
    if min_count > max_count:
        raise ConfigError(
            f"min_count ({min_count}) must not exceed max_count ({max_count})"
        )
    if min_angle > max_angle:
        raise ConfigError(
            f"min_angle ({min_angle}) must not exceed max_angle ({max_angle})"
        )

    rng = rng or random.Random()
    count = rng.randint(min_count, max_count)
    return "".join(
        f"[{turn_string(rng.randint(min_angle, max_angle))}M]" for _ in range(count)
    )
