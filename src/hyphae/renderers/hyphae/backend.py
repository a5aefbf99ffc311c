from __future__ import annotations

import math
from functools import cache

import numpy as np
import pygame

from hyphae.turtle.backend import StrokeStyle

DEFAULT_STROKE = StrokeStyle(color=(255, 255, 255, 255))


@cache
def _rotation(radians: float) -> np.ndarray:
    # Cached matrices are shared; callers must not mutate them.
    cos, sin = math.cos(radians), math.sin(radians)
    return np.array([[cos, -sin, 0.0], [sin, cos, 0.0], [0.0, 0.0, 1.0]])


def _translation(dx: float, dy: float) -> np.ndarray:
    return np.array([[1.0, 0.0, dx], [0.0, 1.0, dy], [0.0, 0.0, 1.0]])


class PygameTurtleBackend:
    """Turtle backend drawing onto a pygame surface through an affine transform.

    Draw onto a ``SRCALPHA`` surface so stroke alpha survives until the layer
    is blitted.
    """

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface
        self.transform = np.identity(3)
        self.style = DEFAULT_STROKE
        self._saved: list[np.ndarray] = []

    @property
    def position(self) -> tuple[float, float]:
        return float(self.transform[0, 2]), float(self.transform[1, 2])

    @property
    def saved_depth(self) -> int:
        return len(self._saved)

    def translate(self, dx: float, dy: float) -> None:
        self.transform = self.transform @ _translation(dx, dy)

    def move_forward(self, length: float) -> None:
        start = self.position
        self.transform = self.transform @ _translation(0.0, -length)
        pygame.draw.line(
            self.surface, self.style.color, start, self.position, self.style.width
        )

    def rotate(self, radians: float) -> None:
        self.transform = self.transform @ _rotation(radians)

    def save_transform(self) -> None:
        self._saved.append(self.transform.copy())

    def restore_transform(self) -> None:
        self.transform = self._saved.pop()

    def set_stroke_style(self, style: StrokeStyle) -> None:
        self.style = style
