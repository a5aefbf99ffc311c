from hyphae.utilities.env.parsing import _env_float, _env_int

DEFAULT_ANIMATION_SPEED = 0.002
DEFAULT_REWRITE_ANGLE_RANGE = (-40, 40)
DEFAULT_SPAWN_COUNT_RANGE = (1, 25)
DEFAULT_SPAWN_ANGLE_RANGE = (-180, 180)
DEFAULT_STEP_INTERVAL_MS = 50


class GrowthConfiguration:
    @classmethod
    def animation_speed(cls) -> float:
        return _env_float(
            "HYPHAE_ANIMATION_SPEED",
            default=DEFAULT_ANIMATION_SPEED,
            exclusive_minimum=0.0,
            maximum=1.0,
        )

    @classmethod
    def rewrite_angle_range(cls) -> tuple[int, int]:
        minimum = _env_int(
            "HYPHAE_REWRITE_MIN_ANGLE", default=DEFAULT_REWRITE_ANGLE_RANGE[0]
        )
        maximum = _env_int(
            "HYPHAE_REWRITE_MAX_ANGLE", default=DEFAULT_REWRITE_ANGLE_RANGE[1]
        )
        if minimum > maximum:
            raise ValueError(
                "HYPHAE_REWRITE_MIN_ANGLE must not exceed HYPHAE_REWRITE_MAX_ANGLE"
            )
        return minimum, maximum

    @classmethod
    def spawn_count_range(cls) -> tuple[int, int]:
        minimum = _env_int(
            "HYPHAE_SPAWN_MIN_COUNT", default=DEFAULT_SPAWN_COUNT_RANGE[0], minimum=0
        )
        maximum = _env_int(
            "HYPHAE_SPAWN_MAX_COUNT", default=DEFAULT_SPAWN_COUNT_RANGE[1], minimum=0
        )
        if minimum > maximum:
            raise ValueError(
                "HYPHAE_SPAWN_MIN_COUNT must not exceed HYPHAE_SPAWN_MAX_COUNT"
            )
        return minimum, maximum

    @classmethod
    def spawn_angle_range(cls) -> tuple[int, int]:
        minimum = _env_int(
            "HYPHAE_SPAWN_MIN_ANGLE", default=DEFAULT_SPAWN_ANGLE_RANGE[0]
        )
        maximum = _env_int(
            "HYPHAE_SPAWN_MAX_ANGLE", default=DEFAULT_SPAWN_ANGLE_RANGE[1]
        )
        if minimum > maximum:
            raise ValueError(
                "HYPHAE_SPAWN_MIN_ANGLE must not exceed HYPHAE_SPAWN_MAX_ANGLE"
            )
        return minimum, maximum

    @classmethod
    def step_interval_ms(cls) -> int:
        return _env_int(
            "HYPHAE_STEP_INTERVAL_MS", default=DEFAULT_STEP_INTERVAL_MS, minimum=1
        )
