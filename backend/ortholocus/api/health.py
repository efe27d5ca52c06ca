"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from ortholocus.config import Settings
from ortholocus.dependencies import get_settings
from ortholocus.llm.model_router import get_model_for_task
from ortholocus.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(cfg: Settings = Depends(get_settings)) -> HealthResponse:
    # Presence flags only, never the values
    return HealthResponse(
        status="ok",
        version="0.1.0",
        models={
            "scan": get_model_for_task("scan", cfg),
            "artwork": get_model_for_task("artwork", cfg),
        },
        credentials={"gemini": cfg.has_gemini_key, "maps": cfg.has_maps_key},
    )
