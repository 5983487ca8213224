from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from domain.types import Color, Point, Region


class FishingState(Enum):
    IDLE = "IDLE"
    AWAITING_BITE = "AWAITING_BITE"
    AWAITING_SPLASH = "AWAITING_SPLASH"
    CATCHING = "CATCHING"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class FishingConfig:
    fishing_area: Region = Region(500, 580, 1100, 370)
    marker_color: Color = Color(0x110C07)
    splash_color: Color = Color(0x64989E)
    splash_threshold: int = 3
    splash_tolerance: float = 0.1
    # splash window relative to the marker: top-left at marker - offset
    splash_offset_x: int = 60
    splash_offset_y: int = 35
    splash_size: int = 100
    bite_timeout_ms: int = 20_000
    splash_timeout_ms: int = 20_000
    cooldown_ms: int = 5_000
    jitter_min_ms: int = 150
    jitter_max_ms: int = 300
    release_delay_ms: int = 200
    cast_key: str = "0"
    modifier_key: str = "shift"
    catch_button: str = "right"
    cursor_home: Point = Point(0, 0)

    def __post_init__(self) -> None:
        if not 0.0 <= self.splash_tolerance < 1.0:
            raise ValueError(f"splash_tolerance must be in [0, 1), got {self.splash_tolerance}")
        if self.splash_threshold <= 0 or self.splash_size <= 0:
            raise ValueError("splash_threshold and splash_size must be positive")
        if not 0 <= self.jitter_min_ms <= self.jitter_max_ms:
            raise ValueError("need 0 <= jitter_min_ms <= jitter_max_ms")

    def splash_region(self, marker: Point) -> Region:
        return Region.anchored_at(
            marker,
            dx=self.splash_offset_x,
            dy=self.splash_offset_y,
            width=self.splash_size,
            height=self.splash_size,
        )


@dataclass
class FishingContext:
    state: FishingState = FishingState.IDLE
    marker: Point | None = None
    splash_region: Region | None = None
    casts: int = 0
    catches: int = 0
    misses: int = 0
