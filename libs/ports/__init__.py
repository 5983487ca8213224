from .input import KEY_NAMES, InputPort, is_valid_key
from .telemetry import EventKind, TelemetryPort
from .time import ClockPort, SleeperPort
from .vision import CapturePort, Frame

__all__ = [
    "InputPort",
    "KEY_NAMES",
    "is_valid_key",
    "CapturePort",
    "Frame",
    "TelemetryPort",
    "EventKind",
    "ClockPort",
    "SleeperPort",
]
