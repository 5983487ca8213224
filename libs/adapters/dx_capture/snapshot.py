from __future__ import annotations

import logging
from pathlib import Path
from typing import Final

import mss.tools
from domain.types import Region
from domain.vision import extract
from ports.vision import Frame

LOG: Final = logging.getLogger("fisher.capture")


def bgra_to_rgb(frame: Frame) -> bytes:
    rgb = bytearray(frame.width * frame.height * 3)
    rgb[0::3] = frame.bgra[2::4]
    rgb[1::3] = frame.bgra[1::4]
    rgb[2::3] = frame.bgra[0::4]
    return bytes(rgb)


def write_region_png(frame: Frame, region: Region, path: str | Path) -> Path:
    """Encode ``region`` of ``frame`` as a PNG file (calibration aid)."""
    crop = extract(frame, region)
    out = Path(path)
    mss.tools.to_png(bgra_to_rgb(crop), crop.size(), output=str(out))
    LOG.info("wrote %dx%d snapshot to %s", crop.width, crop.height, out)
    return out
