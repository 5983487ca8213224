from __future__ import annotations

import logging
from typing import Final

from domain.types import Color, Point, Region
from ports.vision import CapturePort, Frame

from .frames import extract, iter_pixels
from .matching import match_color

LOG: Final = logging.getLogger("fisher.vision")


class ColorScanner:
    """Scans one fresh capture per call; holds no state between calls."""

    def __init__(self, capture: CapturePort) -> None:
        self.capture: Final = capture

    def _grab(self, region: Region) -> Frame:
        return extract(self.capture.grab(), region)

    def count(self, region: Region, color: Color, tolerance: float) -> int:
        """Number of pixels in ``region`` fuzzily matching ``color``."""
        target = color.rgb
        total = 0
        for _x, _y, rgb in iter_pixels(self._grab(region)):
            if match_color(target, rgb, tolerance):
                total += 1
        LOG.debug("count %s in %s -> %d", color, region, total)
        return total

    def find_first(self, region: Region, color: Color) -> Point | None:
        """Global position of the first pixel exactly equal to ``color``."""
        target = color.rgb
        for x, y, rgb in iter_pixels(self._grab(region)):
            if rgb == target:
                return region.to_global(Point(x, y))
        return None
