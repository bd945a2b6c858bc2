"""In-process telemetry sink.

Used when no collector URL is configured: events are written to the
log and kept in memory, which also makes them easy to assert on.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TelemetryEvent:
    name: str
    kind: str  # "event" or "error"
    properties: Dict[str, Optional[str]] = field(default_factory=dict)
    measurements: Dict[str, float] = field(default_factory=dict)

    def to_payload(self) -> Dict[str, object]:
        return {
            "name": self.name,
            "kind": self.kind,
            "properties": dict(self.properties),
            "measurements": dict(self.measurements),
        }


class LoggingTelemetry:
    def __init__(self) -> None:
        self.events: List[TelemetryEvent] = []

    async def send_event(
        self,
        name: str,
        properties: Optional[Mapping[str, str]] = None,
        measurements: Optional[Mapping[str, float]] = None,
    ) -> None:
        self._record(TelemetryEvent(name, "event", dict(properties or {}), dict(measurements or {})))

    async def send_error_event(
        self,
        name: str,
        properties: Optional[Mapping[str, Optional[str]]] = None,
    ) -> None:
        self._record(TelemetryEvent(name, "error", dict(properties or {})))

    def _record(self, event: TelemetryEvent) -> None:
        logger.info("telemetry %s %s: %s %s", event.kind, event.name, event.properties, event.measurements)
        self.events.append(event)
