from .errors import CaptureUnavailableError, RegionOutOfBoundsError
from .types import Color, Point, Region

__all__ = ["CaptureUnavailableError", "Color", "Point", "Region", "RegionOutOfBoundsError"]
