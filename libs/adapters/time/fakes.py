from __future__ import annotations

from ports.time import ClockPort, SleeperPort


class FakeClockPort(ClockPort):
    """Manual clock: time only moves when someone calls advance()."""

    def __init__(self, start: float = 0.0) -> None:
        self._now = float(start)

    def now(self) -> float:
        return self._now

    def advance(self, seconds: float) -> None:
        self._now += seconds


class FakeSleeperPort(SleeperPort):
    """Records sleeps and moves the fake clock forward instead of blocking."""

    def __init__(self, clock: FakeClockPort | None = None) -> None:
        self.clock = clock
        self.calls: list[float] = []

    def sleep(self, seconds: float) -> None:
        self.calls.append(seconds)
        if self.clock is not None:
            self.clock.advance(seconds)

    @property
    def calls_ms(self) -> list[float]:
        return [s * 1000.0 for s in self.calls]
