from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Literal, Protocol

# Keep this in ports so it's shared (no domain dependency)
EventKind = Literal["cast", "bite", "miss", "splash", "catch"]


class TelemetryRecord(Protocol):
    kind: EventKind
    state: str
    ts: float


class TelemetryPort(ABC):
    @abstractmethod
    def publish(self, record: TelemetryRecord) -> None: ...
