"""Structural failures of the vision pipeline.

A missing marker or an unreached threshold is not an error; these are.
"""

from __future__ import annotations


class RegionOutOfBoundsError(IndexError):
    """Region does not lie inside the captured frame."""


class CaptureUnavailableError(RuntimeError):
    """The capture backend could not produce a frame."""
