from functools import cached_property
from typing import Any

import reactivex
from reactivex.subject.behaviorsubject import BehaviorSubject


class LoopSignals:
    """Streams published by the game loop once per frame."""

    @cached_property
    def game_tick(self) -> reactivex.Subject[Any]:
        return BehaviorSubject[Any](None)

    @cached_property
    def window(self) -> reactivex.Subject[Any]:
        return BehaviorSubject[Any](None)

    @cached_property
    def clock(self) -> reactivex.Subject[Any]:
        return BehaviorSubject[Any](None)
