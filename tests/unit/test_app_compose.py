from __future__ import annotations

import random
from pathlib import Path

from adapters.dx_capture import FakeCapturePort, make_frame
from adapters.os_input import FakeInputPort
from adapters.telemetry import FakeTelemetryPort
from adapters.time import FakeClockPort, FakeSleeperPort
from domain.fishing import FishingService
from domain.types import Color, Region

from apps.fisher.compose import FisherApp, build_service
from apps.fisher.settings import FisherSettings


def _settings(**kw) -> FisherSettings:
    base = dict(
        fishing_area={"x": 2, "y": 3, "width": 8, "height": 6},
        splash_threshold=5,
        snapshot_path=None,
        startup_delay_ms=3000,
    )
    base.update(kw)
    return FisherSettings(**base)


def _fakes() -> dict:
    clock = FakeClockPort()
    return dict(
        capture=FakeCapturePort([make_frame(16, 12)], clock=clock),
        input=FakeInputPort(),
        clock=clock,
        sleeper=FakeSleeperPort(clock),
        telemetry=FakeTelemetryPort(),
    )


def test_build_service_injects_config():
    f = _fakes()
    svc = build_service(
        _settings(), f["capture"], f["input"], f["clock"], f["sleeper"], f["telemetry"], random.Random(0)
    )
    assert isinstance(svc, FishingService)
    assert svc.config.fishing_area == Region(2, 3, 8, 6)
    assert svc.config.splash_threshold == 5
    assert svc.config.marker_color == Color(0x110C07)


def test_start_opens_capture_and_waits_startup_delay():
    f = _fakes()
    app = FisherApp(_settings(), **f)
    app.start()
    assert f["capture"].opened
    assert f["sleeper"].calls_ms == [3000.0]
    app.close()
    assert f["capture"].closed


def test_snapshot_writes_png(tmp_path: Path):
    f = _fakes()
    out = tmp_path / "area.png"
    app = FisherApp(_settings(snapshot_path=str(out)), **f)
    app.start()
    assert out.exists()
    assert out.read_bytes().startswith(b"\x89PNG\r\n\x1a\n")


def test_snapshot_disabled_returns_none():
    app = FisherApp(_settings(), **_fakes())
    assert app.snapshot() is None
