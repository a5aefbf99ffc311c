from hyphae.utilities.env.parsing import _env_float, _env_int

DEFAULT_SEGMENT_LENGTH = 10.0
DEFAULT_TURN_UNIT_DEGREES = 1.0
DEFAULT_MAX_FPS = 60
DEFAULT_WINDOW_SIZE = (1024, 768)


class RenderingConfiguration:
    @classmethod
    def segment_length(cls) -> float:
        return _env_float(
            "HYPHAE_SEGMENT_LENGTH", default=DEFAULT_SEGMENT_LENGTH, minimum=0.0
        )

    @classmethod
    def turn_unit_degrees(cls) -> float:
        return _env_float(
            "HYPHAE_TURN_UNIT_DEGREES",
            default=DEFAULT_TURN_UNIT_DEGREES,
            minimum=-360.0,
            maximum=360.0,
        )

    @classmethod
    def max_fps(cls) -> int:
        return _env_int("HYPHAE_MAX_FPS", default=DEFAULT_MAX_FPS, minimum=1)

    @classmethod
    def window_size(cls) -> tuple[int, int]:
        return (
            _env_int("HYPHAE_WINDOW_WIDTH", default=DEFAULT_WINDOW_SIZE[0], minimum=1),
            _env_int("HYPHAE_WINDOW_HEIGHT", default=DEFAULT_WINDOW_SIZE[1], minimum=1),
        )
