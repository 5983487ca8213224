from .fakes import FakeTelemetryPort
from .log import LoggingTelemetryPort

__all__ = ["FakeTelemetryPort", "LoggingTelemetryPort"]
