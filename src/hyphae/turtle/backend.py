from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

Color = tuple[int, int, int, int]


@dataclass(frozen=True)
class StrokeStyle:
    color: Color
    width: int = 1


class TurtleBackend(Protocol):
    """Drawing surface driven by the turtle interpreter.

    Segments are drawn along the local ``-y`` axis; ``rotate`` turns the local
    frame clockwise for positive angles in screen coordinates.
    """

    def translate(self, dx: float, dy: float) -> None: ...

    def move_forward(self, length: float) -> None: ...

    def rotate(self, radians: float) -> None: ...

    def save_transform(self) -> None: ...

    def restore_transform(self) -> None: ...

    def set_stroke_style(self, style: StrokeStyle) -> None: ...
