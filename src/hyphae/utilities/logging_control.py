"""Rate limiting for log lines written from inside the frame loop.

The frame loop runs at up to 60 Hz, so anything it logs per frame is sampled
per key: the first line in each interval is written at its own level and the
rest are demoted to ``suppressed_level`` (or dropped when that is ``None``).

``HYPHAE_LOG_INTERVAL`` sets the interval in seconds for every key (``0``
writes every line). ``HYPHAE_LOG_INTERVALS`` overrides single keys, e.g.
``hyphae.performance=1.5,hyphae.timer=0``.
"""

from __future__ import annotations

import logging
import os
import time
from functools import cache
from typing import Callable, Mapping, Sequence

from hyphae.utilities.env.parsing import _env_float

INTERVAL_ENV_VAR = "HYPHAE_LOG_INTERVAL"
KEY_INTERVALS_ENV_VAR = "HYPHAE_LOG_INTERVALS"
DEFAULT_INTERVAL_SECONDS = 5.0


class LoggingController:
    def __init__(
        self,
        *,
        interval_seconds: float = DEFAULT_INTERVAL_SECONDS,
        key_intervals: Mapping[str, float] | None = None,
        suppressed_level: int | None = logging.DEBUG,
        monotonic: Callable[[], float] = time.monotonic,
    ) -> None:
        self.interval_seconds = interval_seconds
        self.key_intervals = dict(key_intervals or {})
        self.suppressed_level = suppressed_level
        self._monotonic = monotonic
        self._due: dict[str, float] = {}

    def interval_for(self, key: str) -> float:
        return self.key_intervals.get(key, self.interval_seconds)

    def log(
        self,
        *,
        key: str,
        logger: logging.Logger,
        level: int,
        msg: str,
        args: Sequence[object] = (),
    ) -> bool:
        """Write ``msg`` at ``level`` if ``key`` is due; returns whether it was."""

        now = self._monotonic()
        if now >= self._due.get(key, 0.0):
            self._due[key] = now + self.interval_for(key)
            logger.log(level, msg, *args)
            return True
        if self.suppressed_level is not None:
            logger.log(self.suppressed_level, msg, *args)
        return False


def parse_key_intervals(raw: str) -> dict[str, float]:
    """Parse ``key=seconds`` pairs separated by commas."""

    intervals: dict[str, float] = {}
    for entry in raw.split(","):
        if not entry.strip():
            continue
        key, sep, seconds = entry.partition("=")
        try:
            if not sep or not key.strip():
                raise ValueError(entry)
            interval = float(seconds)
        except ValueError as exc:
            raise ValueError(
                f"{KEY_INTERVALS_ENV_VAR} entries must look like 'key=seconds', got {entry.strip()!r}"
            ) from exc
        if interval < 0:
            raise ValueError(f"{KEY_INTERVALS_ENV_VAR} interval for {key.strip()!r} is negative")
        intervals[key.strip()] = interval
    return intervals


@cache
def get_logging_controller() -> LoggingController:
    """Return the process-wide controller built from the environment."""

    return LoggingController(
        interval_seconds=_env_float(
            INTERVAL_ENV_VAR, default=DEFAULT_INTERVAL_SECONDS, minimum=0.0
        ),
        key_intervals=parse_key_intervals(os.getenv(KEY_INTERVALS_ENV_VAR, "")),
    )
