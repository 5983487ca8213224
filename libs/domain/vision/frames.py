from __future__ import annotations

from collections.abc import Iterator

from domain.errors import RegionOutOfBoundsError
from domain.types import Region
from ports.vision import Frame


def contains(frame: Frame, region: Region) -> bool:
    return region.x >= 0 and region.y >= 0 and region.right <= frame.width and region.bottom <= frame.height


def extract(frame: Frame, region: Region) -> Frame:
    """Crop ``frame`` to ``region``; never clamps."""
    if not contains(frame, region):
        raise RegionOutOfBoundsError(
            f"region {region} outside frame {frame.width}x{frame.height}"
        )
    stride = frame.width * 4
    row_len = region.width * 4
    rows = []
    for y in range(region.y, region.bottom):
        start = y * stride + region.x * 4
        rows.append(frame.bgra[start : start + row_len])
    return Frame(width=region.width, height=region.height, bgra=b"".join(rows))


def iter_pixels(frame: Frame) -> Iterator[tuple[int, int, int]]:
    """Yield (x, y, rgb) row-major: y outer, x inner."""
    data = frame.bgra
    i = 0
    for y in range(frame.height):
        for x in range(frame.width):
            yield x, y, (data[i + 2] << 16) | (data[i + 1] << 8) | data[i]
            i += 4
