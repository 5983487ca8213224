from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class FishingEvent(BaseModel):
    api: Literal["v1"] = "v1"
    kind: Literal["cast", "bite", "miss", "splash", "catch"]
    state: Literal["IDLE", "AWAITING_BITE", "AWAITING_SPLASH", "CATCHING"]
    ts: float
    cycle: int = 0
    x: int | None = None
    y: int | None = None
    count: int | None = None
    note: str | None = None
