from __future__ import annotations

from abc import ABC, abstractmethod


class ClockPort(ABC):
    """Monotonic seconds; only differences between readings are meaningful."""

    @abstractmethod
    def now(self) -> float: ...


class SleeperPort(ABC):
    @abstractmethod
    def sleep(self, seconds: float) -> None: ...

    def sleep_ms(self, millis: float) -> None:
        self.sleep(max(0.0, millis) / 1000.0)
