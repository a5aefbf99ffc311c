from __future__ import annotations

import logging
from dataclasses import dataclass

import reactivex
from reactivex import operators as ops
from reactivex.subject import Subject

from hyphae.growth.system import GrowthSystem, SpawnSettings
from hyphae.renderers.hyphae.state import HyphaeSnapshot, RunTimer
from hyphae.runtime.providers import ObservableProvider
from hyphae.runtime.signals import LoopSignals
from hyphae.utilities.env.growth import DEFAULT_STEP_INTERVAL_MS
from hyphae.utilities.logging import get_logger
from hyphae.utilities.logging_control import get_logging_controller

logger = get_logger(__name__)

PERFORMANCE_LOG_KEY = "hyphae.performance"


@dataclass(frozen=True)
class StepRequested:
    pass


@dataclass(frozen=True)
class SpawnRequested:
    x: float
    y: float
    settings: SpawnSettings | None = None


@dataclass(frozen=True)
class RunToggled:
    running: bool


@dataclass(frozen=True)
class FrameTicked:
    dt_ms: float


@dataclass(frozen=True)
class DevModeToggled:
    pass


Command = (
    StepRequested | SpawnRequested | RunToggled | DevModeToggled | FrameTicked
)


class HyphaeStateProvider(ObservableProvider[HyphaeSnapshot]):
    """Feeds user requests and frame ticks into a :class:`GrowthSystem`.

    Requests are queued on subjects and applied in arrival order by a single
    ``scan``, so every mutation happens on the thread that drives the loop.
    """

    def __init__(
        self,
        system: GrowthSystem,
        signals: LoopSignals,
        step_interval_ms: float = DEFAULT_STEP_INTERVAL_MS,
        dev_mode: bool = False,
    ) -> None:
        self.system = system
        self._signals = signals
        self._step_interval_ms = step_interval_ms
        self._dev_mode = dev_mode
        self._commands: Subject[Command] = Subject()

    def on_step_requested(self) -> None:
        self._commands.on_next(StepRequested())

    def on_spawn_requested(
        self, x: float, y: float, settings: SpawnSettings | None = None
    ) -> None:
        self._commands.on_next(SpawnRequested(x=x, y=y, settings=settings))

    def start_run(self) -> None:
        self._commands.on_next(RunToggled(running=True))

    def stop_run(self) -> None:
        self._commands.on_next(RunToggled(running=False))

    def toggle_dev_mode(self) -> None:
        self._commands.on_next(DevModeToggled())

    def apply(self, snapshot: HyphaeSnapshot, command: Command) -> HyphaeSnapshot:
        timer = snapshot.timer
        frame_ms = snapshot.frame_ms
        dev_mode = snapshot.dev_mode
        match command:
            case StepRequested():
                stepped = self.system.step_all()
                logger.debug("Step requested; %d entities rewrote", stepped)
            case SpawnRequested(x=x, y=y, settings=settings):
                self.system.create_with_random_axiom(x, y, settings=settings)
            case RunToggled(running=True):
                timer = timer.started()
            case RunToggled(running=False):
                timer = timer.stopped()
            case DevModeToggled():
                dev_mode = not dev_mode
                logger.info("Dev mode %s", "on" if dev_mode else "off")
            case FrameTicked(dt_ms=dt_ms):
                timer, due = timer.advance(dt_ms, self._step_interval_ms)
                for _ in range(due):
                    self.system.step_all()
                self.system.tick_animations()
                frame_ms = dt_ms
        return HyphaeSnapshot(
            entities=self.system.entities,
            stats=self.system.stats(),
            timer=timer,
            frame_ms=frame_ms,
            dev_mode=dev_mode,
        )

    def initial_snapshot(self) -> HyphaeSnapshot:
        return HyphaeSnapshot(
            entities=self.system.entities,
            stats=self.system.stats(),
            timer=RunTimer(),
            dev_mode=self._dev_mode,
        )

    def observable(self) -> reactivex.Observable[HyphaeSnapshot]:
        clocks = self._signals.clock.pipe(
            ops.filter(lambda clock: clock is not None),
            ops.share(),
        )
        frames = self._signals.game_tick.pipe(
            ops.filter(lambda tick: tick is not None),
            ops.with_latest_from(clocks),
            ops.map(lambda latest: FrameTicked(dt_ms=float(latest[1].get_time()))),
        )

        initial_snapshot = self.initial_snapshot()
        return reactivex.merge(self._commands, frames).pipe(
            ops.scan(self.apply, seed=initial_snapshot),
            ops.do_action(on_next=self._log_performance),
            ops.start_with(initial_snapshot),
            ops.share(),
        )

    def _log_performance(self, snapshot: HyphaeSnapshot) -> None:
        if not snapshot.dev_mode:
            return
        stats = snapshot.stats
        get_logging_controller().log(
            key=PERFORMANCE_LOG_KEY,
            logger=logger,
            level=logging.INFO,
            msg="Frame %.1fms | entities=%d animating=%d mean_length=%d",
            args=(
                snapshot.frame_ms,
                stats.entities,
                stats.animating,
                stats.mean_sentence_length,
            ),
        )
