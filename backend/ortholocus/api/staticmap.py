"""GET /api/staticmap: satellite tile proxy that keeps the maps key server-side."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse, Response

from ortholocus.dependencies import get_static_map
from ortholocus.errors import UpstreamFailure, ValidationError
from ortholocus.imagery.static_map import CACHE_CONTROL, DEFAULT_SIZE, DEFAULT_ZOOM, StaticMapClient
from ortholocus.models.domain import Coordinate
from ortholocus.models.responses import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/staticmap",
    response_class=Response,
    responses={
        200: {"content": {"image/png": {}}},
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def staticmap(
    lat: float | None = Query(None, description="Latitude"),
    lng: float | None = Query(None, description="Longitude"),
    zoom: int = Query(DEFAULT_ZOOM, ge=0, le=21),
    size: str = Query(DEFAULT_SIZE, pattern=r"^\d{1,4}x\d{1,4}$"),
    static_map: StaticMapClient = Depends(get_static_map),
) -> Response:
    if lat is None or lng is None:
        raise ValidationError("Missing coordinates", code="MISSING_COORDINATES")
    coord = Coordinate(latitude=lat, longitude=lng)

    try:
        image = await static_map.fetch(coord, zoom=zoom, size=size)
    except UpstreamFailure as e:
        logger.error("Static map proxy failed for %s: %s (%s)", coord.as_query(), e.message, e.status_code)
        # Upstream status passes through, upstream body does not
        return JSONResponse({"error": "Failed to fetch map"}, status_code=e.status_code)

    return Response(
        content=image.data,
        media_type=image.mime_type,
        headers={"Cache-Control": CACHE_CONTROL},
    )
