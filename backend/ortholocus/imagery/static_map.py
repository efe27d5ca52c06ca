"""Satellite imagery from the Google Static Maps API.

The server-held maps key is attached here and nowhere else. Callers get
either the raw bytes (``fetch``) or a two-valued ``ImageResult``
(``try_fetch``) for flows where missing imagery is not fatal.
"""

from __future__ import annotations

import logging

import httpx

from ortholocus.config import Settings
from ortholocus.errors import ConfigurationError, UpstreamFailure
from ortholocus.models.domain import (
    Coordinate,
    ImageObtained,
    ImageResult,
    ImageUnavailable,
    SatelliteImage,
)

logger = logging.getLogger(__name__)

DEFAULT_ZOOM = 19
DEFAULT_SIZE = "800x800"
# Portrait framing used for scans, favours ground-level structures
SCAN_SIZE = "600x800"
CACHE_CONTROL = "public, max-age=3600"

_FALLBACK_MIME = "image/png"


def _image_mime(content_type: str | None) -> str:
    if not content_type:
        return _FALLBACK_MIME
    mime = content_type.split(";", 1)[0].strip().lower()
    return mime if mime.startswith("image/") else _FALLBACK_MIME


class StaticMapClient:
    """Thin async wrapper over the static imagery endpoint."""

    def __init__(self, http: httpx.AsyncClient, settings: Settings) -> None:
        self._http = http
        self._settings = settings

    def _params(self, coord: Coordinate, zoom: int, size: str) -> dict[str, str]:
        return {
            "center": coord.as_query(),
            "zoom": str(zoom),
            "size": size,
            "maptype": "satellite",
            "key": self._settings.google_maps_server_key,
        }

    async def fetch(
        self,
        coord: Coordinate,
        zoom: int = DEFAULT_ZOOM,
        size: str = DEFAULT_SIZE,
    ) -> SatelliteImage:
        """Fetch one image. Raises ``UpstreamFailure`` carrying the upstream status."""
        if not self._settings.has_maps_key:
            raise ConfigurationError()

        logger.debug("Static map request center=%s zoom=%s size=%s", coord.as_query(), zoom, size)
        try:
            response = await self._http.get(
                self._settings.static_map_url,
                params=self._params(coord, zoom, size),
                timeout=self._settings.static_map_timeout_s,
            )
        except httpx.HTTPError as e:
            # str(e) may echo the request URL, key included
            raise UpstreamFailure(f"Static map transport error: {type(e).__name__}") from e

        if not response.is_success:
            raise UpstreamFailure("Failed to fetch map", status_code=response.status_code)

        return SatelliteImage(
            data=response.content,
            mime_type=_image_mime(response.headers.get("content-type")),
        )

    async def try_fetch(
        self,
        coord: Coordinate,
        zoom: int = DEFAULT_ZOOM,
        size: str = SCAN_SIZE,
    ) -> ImageResult:
        try:
            image = await self.fetch(coord, zoom=zoom, size=size)
        except UpstreamFailure as e:
            logger.warning(
                "Satellite imagery unavailable for %s (status %s): %s",
                coord.as_query(), e.status_code, e.message,
            )
            return ImageUnavailable(reason=e.message)
        return ImageObtained(image=image)
