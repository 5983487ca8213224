from __future__ import annotations

from typing import Literal

from domain.fishing import FishingConfig
from domain.types import Color, Point, Region
from ports.input import KEY_NAMES, is_valid_key
from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CaptureSettings(BaseModel):
    adapter: Literal["mss"] = "mss"
    monitor: int = 1
    target_fps: float = 0.0  # 0 = no throttle; the scan itself paces polling


class RegionSettings(BaseModel):
    x: int
    y: int
    width: int = Field(gt=0)
    height: int = Field(gt=0)

    def to_region(self) -> Region:
        return Region(self.x, self.y, self.width, self.height)


class FisherSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="FISH_", extra="ignore", frozen=True)

    capture: CaptureSettings = CaptureSettings()

    fishing_area: RegionSettings = RegionSettings(x=500, y=580, width=1100, height=370)
    marker_color: int = 0x110C07
    splash_color: int = 0x64989E
    splash_threshold: int = Field(default=3, gt=0)
    splash_tolerance: float = Field(default=0.1, ge=0.0, lt=1.0)
    splash_offset_x: int = 60
    splash_offset_y: int = 35
    splash_size: int = Field(default=100, gt=0)

    bite_timeout_ms: int = Field(default=20_000, ge=0)
    splash_timeout_ms: int = Field(default=20_000, ge=0)
    startup_delay_ms: int = Field(default=3_000, ge=0)
    cooldown_ms: int = Field(default=5_000, ge=0)
    jitter_min_ms: int = Field(default=150, ge=0)
    jitter_max_ms: int = Field(default=300, ge=0)
    release_delay_ms: int = Field(default=200, ge=0)

    cast_key: str = "0"
    modifier_key: str = "shift"
    catch_button: Literal["left", "right", "middle"] = "right"
    cursor_home: tuple[int, int] = (0, 0)

    # written once at startup for calibration; None disables it
    snapshot_path: str | None = "fishingArea.png"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    @field_validator("marker_color", "splash_color", mode="before")
    @classmethod
    def _parse_color(cls, v: object) -> int:
        if isinstance(v, bool) or not isinstance(v, int | str):
            raise ValueError("color must be an int or a '#rrggbb' / '0xrrggbb' string")
        return Color.parse(v).rgb

    @field_validator("cast_key", "modifier_key")
    @classmethod
    def _check_key(cls, v: str) -> str:
        if not is_valid_key(v):
            raise ValueError(f"expected a single character or one of {sorted(KEY_NAMES)}, got {v!r}")
        return v if len(v) == 1 else v.lower()

    @model_validator(mode="after")
    def _check_jitter(self) -> FisherSettings:
        if self.jitter_min_ms > self.jitter_max_ms:
            raise ValueError("jitter_min_ms must not exceed jitter_max_ms")
        return self

    def to_config(self) -> FishingConfig:
        return FishingConfig(
            fishing_area=self.fishing_area.to_region(),
            marker_color=Color(self.marker_color),
            splash_color=Color(self.splash_color),
            splash_threshold=self.splash_threshold,
            splash_tolerance=self.splash_tolerance,
            splash_offset_x=self.splash_offset_x,
            splash_offset_y=self.splash_offset_y,
            splash_size=self.splash_size,
            bite_timeout_ms=self.bite_timeout_ms,
            splash_timeout_ms=self.splash_timeout_ms,
            cooldown_ms=self.cooldown_ms,
            jitter_min_ms=self.jitter_min_ms,
            jitter_max_ms=self.jitter_max_ms,
            release_delay_ms=self.release_delay_ms,
            cast_key=self.cast_key,
            modifier_key=self.modifier_key,
            catch_button=self.catch_button,
            cursor_home=Point(*self.cursor_home),
        )
