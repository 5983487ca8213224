from __future__ import annotations

import logging
import random
from collections.abc import Callable
from pathlib import Path
from typing import Final

from adapters.telemetry import LoggingTelemetryPort
from adapters.time import SystemClockPort, SystemSleeperPort
from domain.fishing import FishingService
from domain.polling import Poller
from domain.vision import ColorScanner
from ports.input import InputPort
from ports.telemetry import TelemetryPort
from ports.time import ClockPort, SleeperPort
from ports.vision import CapturePort

from apps.fisher.settings import FisherSettings

LOG: Final = logging.getLogger("fisher")


def build_capture(settings: FisherSettings) -> CapturePort:
    if settings.capture.adapter == "mss":
        from adapters.dx_capture.mss import MSSCapture

        return MSSCapture(monitor=settings.capture.monitor, target_fps=settings.capture.target_fps)
    raise ValueError(f"Unknown capture adapter: {settings.capture.adapter}")


def build_input() -> InputPort:
    # pynput needs a display at import time; keep it out of module scope.
    from adapters.os_input.pynput import PynputInputPort

    return PynputInputPort()


def build_service(
    settings: FisherSettings,
    capture: CapturePort,
    input: InputPort,
    clock: ClockPort,
    sleeper: SleeperPort,
    telem: TelemetryPort,
    rng: random.Random | None = None,
) -> FishingService:
    poller = Poller(ColorScanner(capture), clock)
    return FishingService(
        poller=poller,
        input=input,
        clock=clock,
        sleep=sleeper,
        telem=telem,
        config=settings.to_config(),
        rng=rng,
    )


class FisherApp:
    """Wires ports to the fishing service; real adapters unless injected."""

    def __init__(
        self,
        settings: FisherSettings,
        *,
        capture: CapturePort | None = None,
        input: InputPort | None = None,
        clock: ClockPort | None = None,
        sleeper: SleeperPort | None = None,
        telemetry: TelemetryPort | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.settings = settings
        self.capture = capture or build_capture(settings)
        self.input = input or build_input()
        self.clock = clock or SystemClockPort()
        self.sleeper = sleeper or SystemSleeperPort()
        self.telemetry = telemetry or LoggingTelemetryPort()
        self.service = build_service(
            settings, self.capture, self.input, self.clock, self.sleeper, self.telemetry, rng
        )

    def snapshot(self, path: str | Path | None = None) -> Path | None:
        """Write the fishing area of one fresh frame as PNG; None when disabled."""
        target = path or self.settings.snapshot_path
        if not target:
            return None
        from adapters.dx_capture.snapshot import write_region_png

        return write_region_png(self.capture.grab(), self.service.config.fishing_area, target)

    def start(self) -> None:
        self.capture.open()
        self.snapshot()
        LOG.info("waiting %.1fs before first cast...", self.settings.startup_delay_ms / 1000.0)
        self.sleeper.sleep_ms(self.settings.startup_delay_ms)
        LOG.info("start")

    def run(self, should_continue: Callable[[], bool] = lambda: True) -> None:
        self.service.run(should_continue)

    def close(self) -> None:
        ctx = self.service.ctx
        LOG.info("casts=%d catches=%d misses=%d", ctx.casts, ctx.catches, ctx.misses)
        self.capture.close()
