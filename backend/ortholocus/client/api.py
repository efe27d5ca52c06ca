"""Async HTTP client for the scan/artwork API, used by the interaction state machine.

Failures never escape: a failed scan becomes the same ``[SYSTEM ERROR]``
report the backend produces, a failed artwork call becomes ``None``.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import urlencode

import httpx

from ortholocus.errors import UpstreamFailure
from ortholocus.imagery.static_map import DEFAULT_ZOOM, SCAN_SIZE
from ortholocus.models.domain import ArtworkStyle, Coordinate
from ortholocus.orchestrators.scan import system_error_report

logger = logging.getLogger(__name__)


class OrthoLocusClient:
    def __init__(self, http: httpx.AsyncClient) -> None:
        self._http = http

    async def _post(self, path: str, payload: dict[str, Any]) -> dict[str, Any]:
        try:
            response = await self._http.post(path, json=payload)
        except httpx.HTTPError as e:
            raise UpstreamFailure(f"{type(e).__name__}: {e}") from e

        try:
            data = response.json()
        except ValueError:
            raise UpstreamFailure(
                f"Unreadable response (HTTP {response.status_code})",
                status_code=response.status_code,
            ) from None

        if not isinstance(data, dict):
            raise UpstreamFailure("Unexpected response shape", status_code=response.status_code)
        if data.get("error"):
            raise UpstreamFailure(str(data["error"]), status_code=response.status_code)
        return data

    async def initiate_scan(self, coord: Coordinate) -> str:
        try:
            data = await self._post(
                "/api/scan",
                {"latitude": coord.latitude, "longitude": coord.longitude},
            )
            report = data.get("reportText")
            if not isinstance(report, str) or not report:
                raise UpstreamFailure("Empty scan report", status_code=502)
        except UpstreamFailure as e:
            logger.error("Scan error: %s", e.message)
            return system_error_report(e.message)
        return report

    async def generate_artwork(self, coord: Coordinate, style: ArtworkStyle) -> str | None:
        try:
            data = await self._post(
                "/api/artwork",
                {"latitude": coord.latitude, "longitude": coord.longitude, "style": style.value},
            )
        except UpstreamFailure as e:
            logger.error("Artwork generation error: %s", e.message)
            return None
        return data.get("imageDataUri") or None

    def snapshot_url(self, coord: Coordinate) -> str:
        """Proxy URL for the scan snapshot; the maps key stays on the server."""
        query = urlencode(
            {"lat": coord.latitude, "lng": coord.longitude, "zoom": DEFAULT_ZOOM, "size": SCAN_SIZE}
        )
        return str(self._http.base_url.join(f"/api/staticmap?{query}"))
