from __future__ import annotations

import logging
from typing import Mapping, Optional

import httpx

from core.telemetry import TelemetryEvent

logger = logging.getLogger(__name__)


class TelemetryClient:
    """Posts telemetry events to an HTTP collector.

    Delivery is best effort: transport and HTTP status errors are logged
    and dropped, never raised to the caller.
    """

    def __init__(self, *, base_url: str, timeout: float = 5.0, verify: bool = False) -> None:
        self._base_url = (base_url or "").rstrip("/")
        self._timeout = timeout
        self._verify = verify

    async def send_event(
        self,
        name: str,
        properties: Optional[Mapping[str, str]] = None,
        measurements: Optional[Mapping[str, float]] = None,
    ) -> None:
        await self._post(TelemetryEvent(name, "event", dict(properties or {}), dict(measurements or {})))

    async def send_error_event(
        self,
        name: str,
        properties: Optional[Mapping[str, Optional[str]]] = None,
    ) -> None:
        await self._post(TelemetryEvent(name, "error", dict(properties or {})))

    async def _post(self, event: TelemetryEvent) -> None:
        url = f"{self._base_url}/events"

        try:
            async with httpx.AsyncClient(timeout=self._timeout, verify=self._verify) as c:
                r = await c.post(url, json=event.to_payload())
                r.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning("Telemetry collector rejected %s: %s", event.name, e)
        except httpx.HTTPError as e:
            logger.warning("Failed to send telemetry %s: %s", event.name, e)
