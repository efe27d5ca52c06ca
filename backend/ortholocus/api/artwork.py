"""POST /api/artwork: stylized rendering of one coordinate."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from ortholocus.dependencies import get_artwork_orchestrator
from ortholocus.errors import ModelFailure
from ortholocus.models.requests import ArtworkRequest
from ortholocus.models.responses import ArtworkResponse, ErrorResponse
from ortholocus.orchestrators.artwork import ArtworkOrchestrator

router = APIRouter()


@router.post(
    "/artwork",
    response_model=ArtworkResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def artwork(
    req: ArtworkRequest,
    orchestrator: ArtworkOrchestrator = Depends(get_artwork_orchestrator),
) -> ArtworkResponse:
    result = await orchestrator.run(req.to_coordinate(), req.style)
    if not result.produced:
        raise ModelFailure("No image generated", code="NO_IMAGE")
    return ArtworkResponse(image_data_uri=result.image_data_uri)
