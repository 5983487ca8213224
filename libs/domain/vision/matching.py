from __future__ import annotations

from domain.types import Color


def match_channel(value: int, other: int, tolerance: float) -> bool:
    """True if ``other`` lies within ``value`` +/- ``value * tolerance`` (inclusive)."""
    return value * (1 - tolerance) <= other <= value * (1 + tolerance)


def match_color(color: Color | int, other: Color | int, tolerance: float) -> bool:
    """Channel-wise fuzzy match; ``color`` is the reference the band is built around."""
    a = color.rgb if isinstance(color, Color) else color
    b = other.rgb if isinstance(other, Color) else other
    return (
        match_channel((a >> 16) & 0xFF, (b >> 16) & 0xFF, tolerance)
        and match_channel((a >> 8) & 0xFF, (b >> 8) & 0xFF, tolerance)
        and match_channel(a & 0xFF, b & 0xFF, tolerance)
    )
