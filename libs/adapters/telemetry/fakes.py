from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from ports.telemetry import TelemetryPort


@runtime_checkable
class _ModelDumpLike(Protocol):
    def model_dump(self) -> Mapping[str, Any]: ...


def as_dict(record: Any) -> dict[str, Any]:
    # Accept Pydantic models (v2) or plain mappings.
    if isinstance(record, Mapping):
        return dict(record)
    if isinstance(record, _ModelDumpLike):
        return dict(record.model_dump())
    raise TypeError(
        "telemetry records must be a Mapping or an object with model_dump(). "
        f"Got: {type(record)!r}"
    )


class FakeTelemetryPort(TelemetryPort):
    def __init__(self) -> None:
        self.records: list[dict[str, Any]] = []

    def publish(self, record: Any) -> None:
        self.records.append(as_dict(record))

    def kinds(self) -> list[str]:
        return [r["kind"] for r in self.records]
