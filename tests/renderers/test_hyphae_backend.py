"""Tests for the pygame turtle backend."""

from __future__ import annotations

import math

import pygame
import pytest

from hyphae.renderers.hyphae.backend import PygameTurtleBackend
from hyphae.turtle.backend import StrokeStyle

WHITE = StrokeStyle(color=(255, 255, 255, 255))


@pytest.fixture()
def surface() -> pygame.Surface:
    return pygame.Surface((100, 100), pygame.SRCALPHA)


class TestPygameTurtleBackend:
    def test_move_forward_draws_upward(self, surface: pygame.Surface) -> None:
        backend = PygameTurtleBackend(surface)
        backend.set_stroke_style(WHITE)
        backend.translate(50, 50)

        backend.move_forward(10)

        assert backend.position == pytest.approx((50, 40))
        assert surface.get_at((50, 45)) == pygame.Color(255, 255, 255, 255)
        assert surface.get_at((50, 60)).a == 0

    def test_positive_rotation_turns_clockwise(self, surface: pygame.Surface) -> None:
        """A quarter turn to the right points the turtle along +x on screen."""
        backend = PygameTurtleBackend(surface)
        backend.translate(50, 50)

        backend.rotate(math.pi / 2)
        backend.move_forward(10)

        assert backend.position == pytest.approx((60, 50))

    def test_restore_returns_to_saved_transform(self, surface: pygame.Surface) -> None:
        backend = PygameTurtleBackend(surface)
        backend.translate(20, 30)
        backend.save_transform()
        backend.rotate(0.5)
        backend.move_forward(15)

        assert backend.saved_depth == 1
        backend.restore_transform()

        assert backend.saved_depth == 0
        assert backend.position == pytest.approx((20, 30))

    def test_stroke_alpha_is_kept_on_layer(self, surface: pygame.Surface) -> None:
        backend = PygameTurtleBackend(surface)
        backend.set_stroke_style(StrokeStyle(color=(255, 255, 200, 160)))
        backend.translate(10, 50)

        backend.move_forward(20)

        assert surface.get_at((10, 40)) == pygame.Color(255, 255, 200, 160)
