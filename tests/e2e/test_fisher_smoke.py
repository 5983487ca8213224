# tests/e2e/test_fisher_smoke.py
from __future__ import annotations

import random

from adapters.dx_capture import FakeCapturePort, make_frame
from adapters.os_input import FakeInputPort
from adapters.telemetry import FakeTelemetryPort
from adapters.time import FakeClockPort, FakeSleeperPort
from domain.fishing import FishingState

from apps.fisher.compose import FisherApp
from apps.fisher.settings import FisherSettings

# a 1/8-scale screen with the stock geometry shrunk to match
SETTINGS = FisherSettings(
    fishing_area={"x": 60, "y": 70, "width": 130, "height": 45},
    splash_offset_x=8,
    splash_offset_y=5,
    splash_size=12,
    snapshot_path=None,
)


def _screen(marker: bool, splash: bool):
    pixels = {}
    if marker:
        pixels[(100, 90)] = 0x110C07
    if splash:
        # anti-aliased splash: near but not equal to the configured color
        pixels.update({(95, 88): 0x66999F, (96, 88): 0x62969C, (97, 89): 0x64989E})
    return make_frame(240, 135, fill=0x203040, pixels=pixels)


def test_two_casts_one_catch_one_miss():
    clock = FakeClockPort()
    capture = FakeCapturePort([_screen(True, True)], clock=clock, grab_cost_s=0.5)
    inp = FakeInputPort()
    telem = FakeTelemetryPort()
    app = FisherApp(
        SETTINGS,
        capture=capture,
        input=inp,
        clock=clock,
        sleeper=FakeSleeperPort(clock),
        telemetry=telem,
        rng=random.Random(7),
    )
    app.start()

    for _ in range(4):
        app.service.tick()
    assert app.service.state is FishingState.IDLE

    # the marker disappears: next cast waits out the 20s bite window
    capture.push(_screen(False, False))
    app.service.tick()
    app.service.tick()
    app.close()

    assert telem.kinds() == ["cast", "bite", "splash", "catch", "cast", "miss"]
    assert [a for a, _ in inp.script()] == ["tap", "move", "down", "click", "up", "move", "tap"]
    assert inp.script()[1] == ("move", (100, 90))
    assert app.service.ctx.catches == 1
    assert app.service.ctx.misses == 1
    assert capture.closed
