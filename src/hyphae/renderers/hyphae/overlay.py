from __future__ import annotations

from collections import deque

FPS_WINDOW_FRAMES = 60
FPS_REFRESH_FRAMES = 10


class FrameRateTracker:
    """Rolling frame-rate average, refreshed every few frames to limit jitter."""

    def __init__(
        self,
        window: int = FPS_WINDOW_FRAMES,
        refresh_every: int = FPS_REFRESH_FRAMES,
    ) -> None:
        self._durations: deque[float] = deque(maxlen=window)
        self._refresh_every = refresh_every
        self._frames = 0
        self.average_fps = 0

    def record(self, frame_ms: float) -> int:
        self._durations.append(frame_ms)
        self._frames += 1
        if self._frames % self._refresh_every == 0:
            total = sum(self._durations)
            self.average_fps = round(len(self._durations) * 1000 / total) if total else 0
        return self.average_fps

    def reset(self) -> None:
        self._durations.clear()
        self._frames = 0
        self.average_fps = 0
