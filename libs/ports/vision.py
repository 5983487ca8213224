# libs/ports/vision.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class Frame:
    width: int
    height: int
    # raw BGRA bytes (row-major), 4 bytes per pixel, as mss hands them out.
    bgra: bytes

    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def pixel(self, x: int, y: int) -> int:
        """24-bit RGB value at (x, y); alpha is dropped."""
        i = (self.width * y + x) * 4
        b, g, r = self.bgra[i], self.bgra[i + 1], self.bgra[i + 2]
        return (r << 16) | (g << 8) | b


@runtime_checkable
class CapturePort(Protocol):
    def open(self) -> None: ...
    def grab(self) -> Frame: ...  # full monitor
    def close(self) -> None: ...
