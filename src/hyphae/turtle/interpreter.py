"""Turn a symbol string into turtle drawing operations.

Each symbol is handled by a pure function from ``(cursor, context)`` to a new
cursor plus the operations it emits. The cursor tracks how many ``M`` have
been walked along the current path, with one frame per open branch so that
closing a branch rewinds the count exactly like :func:`hyphae.grammar.max_depth`.

Segments whose path position is below ``floor(draw_depth)`` are drawn in full.
The single frontier segment straddling ``draw_depth`` is drawn at its
fractional length without moving the turtle. It still counts as walked, so the
path position passes ``draw_depth`` and later ``M`` on that path are not drawn
until a branch pop rewinds the position.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Callable, Protocol, Sequence

from hyphae.errors import StructuralError
from hyphae.turtle.backend import StrokeStyle, TurtleBackend
from hyphae.utilities.env.rendering import (DEFAULT_SEGMENT_LENGTH,
                                            DEFAULT_TURN_UNIT_DEGREES)

ROOT_STROKE = StrokeStyle(color=(255, 255, 200, 160))
BODY_STROKE = StrokeStyle(color=(255, 255, 200, 255))


class Symbol(StrEnum):
    GROW = "M"
    PUSH = "["
    POP = "]"
    TURN_RIGHT = "+"
    TURN_LEFT = "-"


@dataclass(frozen=True)
class Translate:
    dx: float
    dy: float

    def apply(self, backend: TurtleBackend) -> None:
        backend.translate(self.dx, self.dy)


@dataclass(frozen=True)
class MoveForward:
    length: float

    def apply(self, backend: TurtleBackend) -> None:
        backend.move_forward(self.length)


@dataclass(frozen=True)
class Rotate:
    radians: float

    def apply(self, backend: TurtleBackend) -> None:
        backend.rotate(self.radians)


@dataclass(frozen=True)
class SaveTransform:
    def apply(self, backend: TurtleBackend) -> None:
        backend.save_transform()


@dataclass(frozen=True)
class RestoreTransform:
    def apply(self, backend: TurtleBackend) -> None:
        backend.restore_transform()


@dataclass(frozen=True)
class SetStrokeStyle:
    style: StrokeStyle

    def apply(self, backend: TurtleBackend) -> None:
        backend.set_stroke_style(self.style)


DrawOp = Translate | MoveForward | Rotate | SaveTransform | RestoreTransform | SetStrokeStyle


@dataclass(frozen=True)
class TurtleSettings:
    segment_length: float = DEFAULT_SEGMENT_LENGTH
    turn_unit_degrees: float = DEFAULT_TURN_UNIT_DEGREES
    root_style: StrokeStyle = ROOT_STROKE
    body_style: StrokeStyle = BODY_STROKE

    @property
    def turn_radians(self) -> float:
        return math.radians(self.turn_unit_degrees)


@dataclass(frozen=True)
class TurtleCursor:
    position: int = 0
    frames: tuple[int, ...] = field(default=(0,))

    def grown(self) -> TurtleCursor:
        return TurtleCursor(
            position=self.position + 1,
            frames=(*self.frames[:-1], self.frames[-1] + 1),
        )

    def pushed(self) -> TurtleCursor:
        return TurtleCursor(position=self.position, frames=(*self.frames, 0))

    def popped(self) -> TurtleCursor:
        return TurtleCursor(
            position=self.position - self.frames[-1], frames=self.frames[:-1]
        )


@dataclass(frozen=True)
class TurtleContext:
    draw_depth: float
    settings: TurtleSettings
    index: int = 0


Step = tuple[TurtleCursor, tuple[DrawOp, ...]]


def _grow(cursor: TurtleCursor, context: TurtleContext) -> Step:
    settings = context.settings
    style = settings.root_style if cursor.position < 1 else settings.body_style
    if cursor.position < math.floor(context.draw_depth):
        return cursor.grown(), (
            SetStrokeStyle(style),
            MoveForward(settings.segment_length),
        )
    if cursor.position < context.draw_depth:
        # Equivalent to 1 - |(position + 1) - draw_depth| for the frontier segment.
        scale = context.draw_depth - cursor.position
        return cursor.grown(), (
            SetStrokeStyle(style),
            SaveTransform(),
            MoveForward(settings.segment_length * scale),
            RestoreTransform(),
        )
    return cursor, ()


def _push(cursor: TurtleCursor, context: TurtleContext) -> Step:
    return cursor.pushed(), (SaveTransform(),)


def _pop(cursor: TurtleCursor, context: TurtleContext) -> Step:
    if len(cursor.frames) == 1:
        raise StructuralError(
            f"unmatched ']' at index {context.index}", index=context.index
        )
    return cursor.popped(), (RestoreTransform(),)


def _turn_right(cursor: TurtleCursor, context: TurtleContext) -> Step:
    return cursor, (Rotate(context.settings.turn_radians),)


def _turn_left(cursor: TurtleCursor, context: TurtleContext) -> Step:
    return cursor, (Rotate(-context.settings.turn_radians),)


HANDLERS: dict[str, Callable[[TurtleCursor, TurtleContext], Step]] = {
    Symbol.GROW: _grow,
    Symbol.PUSH: _push,
    Symbol.POP: _pop,
    Symbol.TURN_RIGHT: _turn_right,
    Symbol.TURN_LEFT: _turn_left,
}


def draw_depth(previous_depth: int, depth: int, progress: float) -> float:
    return previous_depth + (depth - previous_depth) * progress


def interpret(
    sentence: str,
    depth: float,
    settings: TurtleSettings | None = None,
) -> list[DrawOp]:
    """Return the operations that draw ``sentence`` grown up to ``depth``.

    Raises:
        StructuralError: on an unmatched ``]`` or an unclosed ``[``.
    """

    settings = settings or TurtleSettings()
    cursor = TurtleCursor()
    ops: list[DrawOp] = []
    for index, symbol in enumerate(sentence):
        handler = HANDLERS.get(symbol)
        if handler is None:
            continue
        cursor, emitted = handler(
            cursor, TurtleContext(draw_depth=depth, settings=settings, index=index)
        )
        ops.extend(emitted)
    if len(cursor.frames) != 1:
        raise StructuralError(
            f"{len(cursor.frames) - 1} unclosed '[' at end of sentence",
            index=len(sentence),
        )
    return ops


class Renderable(Protocol):
    x: float
    y: float

    @property
    def sentence(self) -> str: ...

    @property
    def depth(self) -> int: ...

    @property
    def previous_depth(self) -> int: ...

    def render_progress(self) -> float: ...


def render(
    entity: Renderable,
    backend: TurtleBackend,
    settings: TurtleSettings | None = None,
) -> Sequence[DrawOp]:
    """Draw ``entity`` at its current animation progress onto ``backend``.

    The full operation list is built before the backend is touched, so a
    malformed sentence raises without drawing anything.
    """

    depth = draw_depth(entity.previous_depth, entity.depth, entity.render_progress())
    ops: list[DrawOp] = [
        SaveTransform(),
        Translate(entity.x, entity.y),
        *interpret(entity.sentence, depth, settings),
        RestoreTransform(),
    ]
    for op in ops:
        op.apply(backend)
    return ops
