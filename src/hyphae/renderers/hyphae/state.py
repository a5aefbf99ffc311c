from __future__ import annotations

from dataclasses import dataclass, replace

from hyphae.growth.entity import GrowthEntity
from hyphae.growth.system import GrowthStats


@dataclass(frozen=True)
class RunTimer:
    """Frame-clock driven replacement for a periodic "step all" timer."""

    running: bool = False
    time_since_last_step_ms: float = 0.0

    def started(self) -> RunTimer:
        return self if self.running else RunTimer(running=True)

    def stopped(self) -> RunTimer:
        return RunTimer()

    def advance(self, dt_ms: float, interval_ms: float) -> tuple[RunTimer, int]:
        """Return the new timer and how many steps fell due during ``dt_ms``."""

        if not self.running:
            return self, 0
        accumulated = self.time_since_last_step_ms + dt_ms
        due = int(accumulated // interval_ms)
        return (
            replace(self, time_since_last_step_ms=accumulated - due * interval_ms),
            due,
        )


@dataclass(frozen=True)
class HyphaeSnapshot:
    entities: tuple[GrowthEntity, ...]
    stats: GrowthStats
    timer: RunTimer
    frame_ms: float = 0.0
    dev_mode: bool = False
