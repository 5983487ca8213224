from __future__ import annotations

from collections.abc import Iterable, Mapping

from adapters.time.fakes import FakeClockPort
from domain.errors import CaptureUnavailableError
from ports.vision import CapturePort, Frame


def make_frame(
    width: int,
    height: int,
    fill: int = 0x000000,
    pixels: Mapping[tuple[int, int], int] | None = None,
) -> Frame:
    """Synthetic BGRA frame; ``pixels`` maps (x, y) -> 0xRRGGBB."""

    def px(rgb: int) -> bytes:
        return bytes(((rgb) & 0xFF, (rgb >> 8) & 0xFF, (rgb >> 16) & 0xFF, 0xFF))

    buf = bytearray(px(fill) * (width * height))
    for (x, y), rgb in (pixels or {}).items():
        i = (y * width + x) * 4
        buf[i : i + 4] = px(rgb)
    return Frame(width=width, height=height, bgra=bytes(buf))


class FakeCapturePort(CapturePort):
    """Replays scripted frames; the last one repeats once the script runs out.

    With a fake clock attached, every grab advances it by ``grab_cost_s`` so
    timeout-bounded polling terminates without real time passing.
    """

    def __init__(
        self,
        frames: Iterable[Frame],
        clock: FakeClockPort | None = None,
        grab_cost_s: float = 0.05,
        fail: bool = False,
    ) -> None:
        self._frames = list(frames)
        if not self._frames and not fail:
            raise ValueError("FakeCapturePort needs at least one frame")
        self._clock = clock
        self._cost = float(grab_cost_s)
        self.fail = fail
        self.grabs = 0
        self.opened = False
        self.closed = False

    def open(self) -> None:
        self.opened = True

    def grab(self) -> Frame:
        if self.fail:
            raise CaptureUnavailableError("fake capture configured to fail")
        frame = self._frames[min(self.grabs, len(self._frames) - 1)]
        self.grabs += 1
        if self._clock is not None:
            self._clock.advance(self._cost)
        return frame

    def push(self, *frames: Frame) -> None:
        self._frames.extend(frames)

    def close(self) -> None:
        self.closed = True
