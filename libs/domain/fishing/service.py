# libs/domain/fishing/service.py
from __future__ import annotations

import logging
import random
from collections.abc import Callable
from typing import Any, Final

from ports.input import InputPort
from ports.telemetry import EventKind, TelemetryPort
from ports.time import ClockPort, SleeperPort
from shared.contracts.v1.telemetry import FishingEvent

from ..polling import Poller
from .model import FishingConfig, FishingContext, FishingState

LOG: Final = logging.getLogger("fisher.service")


class FishingService:
    """Cast / bite / splash / catch state machine. No OS calls; ports only.

    Each ``tick()`` runs the work of the current state once and moves to the
    next state. Waiting inside a state happens in the poller (bounded by the
    configured timeouts) or on the sleeper port.
    """

    def __init__(
        self,
        poller: Poller,
        input: InputPort,
        clock: ClockPort,
        sleep: SleeperPort,
        telem: TelemetryPort,
        config: FishingConfig | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.poller: Final = poller
        self.input: Final = input
        self.clock: Final = clock
        self.sleep: Final = sleep
        self.telem: Final = telem
        self.config: Final = config or FishingConfig()
        self.rng: Final = rng or random.Random()
        self.ctx = FishingContext()
        self._handlers: dict[FishingState, Callable[[], FishingState]] = {
            FishingState.IDLE: self._cast,
            FishingState.AWAITING_BITE: self._await_bite,
            FishingState.AWAITING_SPLASH: self._await_splash,
            FishingState.CATCHING: self._catch,
        }

    @property
    def state(self) -> FishingState:
        return self.ctx.state

    def tick(self) -> FishingState:
        """Run the current state's step; return the state entered."""
        before = self.ctx.state
        after = self._handlers[before]()
        self.ctx.state = after
        LOG.debug("%s -> %s", before, after)
        return after

    def run(self, should_continue: Callable[[], bool] = lambda: True) -> None:
        while should_continue():
            self.tick()

    # --- states ---------------------------------------------------------------

    def _cast(self) -> FishingState:
        self.input.tap_key(self.config.cast_key)
        self.ctx.casts += 1
        self.ctx.marker = None
        self.ctx.splash_region = None
        self._publish("cast")
        return FishingState.AWAITING_BITE

    def _await_bite(self) -> FishingState:
        cfg = self.config
        marker = self.poller.await_color_found(cfg.marker_color, cfg.fishing_area, cfg.bite_timeout_ms)
        if marker is None:
            self.ctx.misses += 1
            self._publish("miss", note="feather not found, no fish caught")
            return FishingState.IDLE
        self.ctx.marker = marker
        self.ctx.splash_region = cfg.splash_region(marker)
        self._publish("bite", x=marker.x, y=marker.y)
        return FishingState.AWAITING_SPLASH

    def _await_splash(self) -> FishingState:
        cfg = self.config
        assert self.ctx.splash_region is not None
        count = self.poller.await_color_count(
            cfg.splash_color,
            cfg.splash_threshold,
            cfg.splash_tolerance,
            self.ctx.splash_region,
            cfg.splash_timeout_ms,
        )
        if count is None:
            # Unlike a missed bite, a missed splash is not reported.
            return FishingState.IDLE
        self._publish("splash", count=count)
        return FishingState.CATCHING

    def _catch(self) -> FishingState:
        cfg = self.config
        marker = self.ctx.marker
        assert marker is not None
        self.input.move_cursor(marker.x, marker.y)
        self.input.key_down(cfg.modifier_key)
        try:
            self.sleep.sleep_ms(self._jitter_ms())
            self.input.click(cfg.catch_button)
            self.sleep.sleep_ms(cfg.release_delay_ms)
        finally:
            self.input.key_up(cfg.modifier_key)
        self.ctx.catches += 1
        self._publish("catch", x=marker.x, y=marker.y)
        self.sleep.sleep_ms(cfg.cooldown_ms)
        self.input.move_cursor(cfg.cursor_home.x, cfg.cursor_home.y)
        return FishingState.IDLE

    # --- helpers --------------------------------------------------------------

    def _jitter_ms(self) -> float:
        lo, hi = self.config.jitter_min_ms, self.config.jitter_max_ms
        return lo + self.rng.random() * (hi - lo)

    def _publish(self, kind: EventKind, **fields: Any) -> None:
        self.telem.publish(
            FishingEvent(
                kind=kind,
                state=str(self.ctx.state),
                ts=self.clock.now(),
                cycle=self.ctx.casts,
                **fields,
            )
        )
