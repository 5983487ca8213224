# libs/domain/polling.py
from __future__ import annotations

from collections.abc import Callable
from typing import Final, TypeVar

from ports.time import ClockPort

from .types import Color, Point, Region
from .vision.scanner import ColorScanner

T = TypeVar("T")


def await_condition(probe: Callable[[], T | None], timeout_ms: float, clock: ClockPort) -> T | None:
    """Call ``probe`` back to back until it returns non-None or the deadline passes.

    The deadline is taken once, before the first probe, and checked before
    every probe: a timeout <= 0 makes no attempt at all. A probe that is
    already running is never interrupted, and exceptions it raises propagate.
    """
    deadline = clock.now() + timeout_ms / 1000.0
    while clock.now() < deadline:
        result = probe()
        if result is not None:
            return result
    return None


class Poller:
    """Timeout-bounded wrappers around the two scanner primitives."""

    def __init__(self, scanner: ColorScanner, clock: ClockPort) -> None:
        self.scanner: Final = scanner
        self.clock: Final = clock

    def await_color_found(self, color: Color, region: Region, timeout_ms: float) -> Point | None:
        return await_condition(lambda: self.scanner.find_first(region, color), timeout_ms, self.clock)

    def await_color_count(
        self,
        color: Color,
        threshold: int,
        tolerance: float,
        region: Region,
        timeout_ms: float,
    ) -> int | None:
        def probe() -> int | None:
            n = self.scanner.count(region, color, tolerance)
            return n if n >= threshold else None

        return await_condition(probe, timeout_ms, self.clock)
