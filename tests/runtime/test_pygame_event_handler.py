"""Tests for translating pygame input into growth requests."""

from __future__ import annotations

import pygame
import pytest

from hyphae.runtime.pygame_event_handler import PygameEventHandler


class _RecordingProvider:
    def __init__(self) -> None:
        self.requests: list[tuple[object, ...]] = []

    def on_step_requested(self) -> None:
        self.requests.append(("step",))

    def on_spawn_requested(self, x: float, y: float, settings=None) -> None:
        self.requests.append(("spawn", x, y))

    def start_run(self) -> None:
        self.requests.append(("start",))

    def stop_run(self) -> None:
        self.requests.append(("stop",))

    def toggle_dev_mode(self) -> None:
        self.requests.append(("dev",))


class _StubRenderer:
    def __init__(self, regions: list[pygame.Rect] | None = None) -> None:
        self.regions = regions or []

    def ui_regions(self) -> list[pygame.Rect]:
        return self.regions


def _handle(
    monkeypatch: pytest.MonkeyPatch,
    events: list[pygame.event.Event],
    regions: list[pygame.Rect] | None = None,
) -> tuple[bool, _RecordingProvider]:
    provider = _RecordingProvider()
    handler = PygameEventHandler(provider=provider, renderer=_StubRenderer(regions))
    monkeypatch.setattr(pygame.event, "get", lambda: events)
    return handler.handle_events(), provider


def _key(key: int) -> pygame.event.Event:
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def _click(pos: tuple[int, int], button: int = 1) -> pygame.event.Event:
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=pos, button=button)


class TestPygameEventHandler:
    """Keyboard and mouse bindings map onto provider requests in arrival order."""

    @pytest.mark.parametrize(
        ("key", "expected"),
        [
            (pygame.K_s, ("step",)),
            (pygame.K_r, ("start",)),
            (pygame.K_x, ("stop",)),
            (pygame.K_d, ("dev",)),
        ],
    )
    def test_key_bindings(
        self, monkeypatch: pytest.MonkeyPatch, key: int, expected: tuple[str]
    ) -> None:
        running, provider = _handle(monkeypatch, [_key(key)])

        assert running is True
        assert provider.requests == [expected]

    def test_unbound_keys_are_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        running, provider = _handle(monkeypatch, [_key(pygame.K_q)])

        assert running is True
        assert provider.requests == []

    @pytest.mark.parametrize(
        "event",
        [pygame.event.Event(pygame.QUIT), _key(pygame.K_ESCAPE)],
    )
    def test_quit_events_stop_the_loop(
        self, monkeypatch: pytest.MonkeyPatch, event: pygame.event.Event
    ) -> None:
        running, _ = _handle(monkeypatch, [event])

        assert running is False

    def test_left_click_spawns_at_pointer(self, monkeypatch: pytest.MonkeyPatch) -> None:
        _, provider = _handle(monkeypatch, [_click((120, 80))])

        assert provider.requests == [("spawn", 120, 80)]

    def test_other_buttons_do_not_spawn(self, monkeypatch: pytest.MonkeyPatch) -> None:
        _, provider = _handle(monkeypatch, [_click((120, 80), button=3)])

        assert provider.requests == []

    def test_clicks_on_overlay_are_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """The status overlay swallows clicks so reading it never spawns growth."""
        overlay = pygame.Rect(8, 8, 200, 20)

        _, provider = _handle(
            monkeypatch, [_click((10, 10)), _click((10, 100))], regions=[overlay]
        )

        assert provider.requests == [("spawn", 10, 100)]

    def test_resize_keeps_running(self, monkeypatch: pytest.MonkeyPatch) -> None:
        event = pygame.event.Event(pygame.VIDEORESIZE, w=640, h=480, size=(640, 480))

        running, provider = _handle(monkeypatch, [event, _key(pygame.K_s)])

        assert running is True
        assert provider.requests == [("step",)]
