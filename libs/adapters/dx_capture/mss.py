from __future__ import annotations

import time
from typing import Any, cast

try:
    import mss  # type: ignore
except ImportError:  # pragma: no cover
    mss = None

from domain.errors import CaptureUnavailableError
from ports.vision import CapturePort, Frame


class MSSCapture(CapturePort):
    """Full-monitor grabs through mss; frames are monitor-relative."""

    def __init__(self, monitor: int = 1, target_fps: float = 0.0) -> None:
        self._monitor_idx = int(monitor)
        self._target_fps = float(target_fps)
        self._sct: Any = None
        self._mon: dict[str, int] | None = None
        self._last_grab: float | None = None

    def open(self) -> None:
        if mss is None:
            raise CaptureUnavailableError("mss is not installed")
        try:
            sct = mss.mss()
        except Exception as e:  # mss raises ScreenShotError without a display
            raise CaptureUnavailableError(f"cannot open screen capture: {e}") from e
        monitors = sct.monitors
        # clamp to a real monitor (monitors[0] is "all")
        idx = self._monitor_idx
        if idx < 1 or idx >= len(monitors):
            idx = 1
        self._sct = sct
        self._mon = cast(dict[str, int], dict(monitors[idx]))

    def grab(self) -> Frame:
        if self._sct is None or self._mon is None:
            self.open()
        self._throttle()
        try:
            shot: Any = self._sct.grab(self._mon)
        except Exception as e:
            raise CaptureUnavailableError(f"grab failed: {e}") from e
        self._last_grab = time.perf_counter()
        return Frame(width=shot.width, height=shot.height, bgra=bytes(shot.bgra))

    def close(self) -> None:
        if self._sct is not None:
            self._sct.close()
        self._sct = None
        self._mon = None

    def _throttle(self) -> None:
        # Optional cap on grab rate; 0 leaves pacing to the caller.
        if self._target_fps <= 0 or self._last_grab is None:
            return
        wait = (1.0 / self._target_fps) - (time.perf_counter() - self._last_grab)
        if wait > 0:
            time.sleep(wait)
