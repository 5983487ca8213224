from __future__ import annotations

import logging
from typing import Any, Final

from ports.telemetry import TelemetryPort

from .fakes import as_dict

LOG: Final = logging.getLogger("fisher.events")

_MESSAGES: Final = {
    "cast": "cast #{cycle}",
    "bite": "marker at ({x}, {y})",
    "miss": "{note}",
    "splash": "splash detected ({count} px)",
    "catch": "fish caught at ({x}, {y})",
}


class LoggingTelemetryPort(TelemetryPort):
    """Reports each fishing event as one INFO line."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._log = logger or LOG

    def publish(self, record: Any) -> None:
        data = as_dict(record)
        template = _MESSAGES.get(data.get("kind", ""), "{kind}")
        self._log.info(template.format_map(_Missing(data)))


class _Missing(dict):
    def __missing__(self, key: str) -> str:
        return "?"
