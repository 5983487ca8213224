from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class Region:
    """Rectangle in global screen coordinates."""

    x: int
    y: int
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"region must have positive size, got {self.width}x{self.height}")

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def to_global(self, local: Point) -> Point:
        return Point(local.x + self.x, local.y + self.y)

    def to_local(self, point: Point) -> Point:
        return Point(point.x - self.x, point.y - self.y)

    @classmethod
    def anchored_at(cls, point: Point, *, dx: int, dy: int, width: int, height: int) -> Region:
        return cls(point.x - dx, point.y - dy, width, height)


@dataclass(frozen=True)
class Color:
    """24-bit RGB value; alpha never takes part in comparisons."""

    rgb: int

    def __post_init__(self) -> None:
        if not 0 <= self.rgb <= 0xFFFFFF:
            raise ValueError(f"color out of 24-bit range: {self.rgb:#x}")

    @property
    def r(self) -> int:
        return (self.rgb >> 16) & 0xFF

    @property
    def g(self) -> int:
        return (self.rgb >> 8) & 0xFF

    @property
    def b(self) -> int:
        return self.rgb & 0xFF

    @classmethod
    def parse(cls, value: int | str | Color) -> Color:
        """Accept an int, "#rrggbb", "0xrrggbb" or an existing Color."""
        if isinstance(value, Color):
            return value
        if isinstance(value, int):
            return cls(value)
        text = value.strip().lower()
        if text.startswith("#"):
            text = text[1:]
        elif text.startswith("0x"):
            text = text[2:]
        return cls(int(text, 16))

    def __str__(self) -> str:
        return f"#{self.rgb:06x}"
