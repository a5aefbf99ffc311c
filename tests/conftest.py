import pygame
import pytest
from hypothesis import HealthCheck, settings

from helpers.clock import StubClock
from hyphae.utilities.logging_control import get_logging_controller

settings.register_profile(
    "default",
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
settings.load_profile("default")


@pytest.fixture(autouse=True)
def dummy_sdl_video_driver(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    yield


@pytest.fixture(autouse=True)
def isolated_log_dir(monkeypatch: pytest.MonkeyPatch, tmp_path_factory) -> None:
    """Keep file handlers for loggers created during tests out of the home directory."""

    monkeypatch.setenv("HYPHAE_LOG_DIR", str(tmp_path_factory.getbasetemp() / "logs"))
    yield


@pytest.fixture(autouse=True)
def reset_logging_controller() -> None:
    get_logging_controller.cache_clear()
    yield
    get_logging_controller.cache_clear()


@pytest.fixture(autouse=True)
def init_pygame() -> None:
    pygame.init()
    yield


@pytest.fixture()
def stub_clock() -> StubClock:
    return StubClock()
