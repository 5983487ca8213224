from .frames import extract, iter_pixels
from .matching import match_channel, match_color
from .scanner import ColorScanner

__all__ = ["ColorScanner", "extract", "iter_pixels", "match_channel", "match_color"]
