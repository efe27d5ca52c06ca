"""POST /api/scan: satellite analysis of one coordinate."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from ortholocus.dependencies import get_scan_orchestrator
from ortholocus.models.requests import ScanRequest
from ortholocus.models.responses import ErrorResponse, ScanResponse
from ortholocus.orchestrators.scan import ScanOrchestrator

router = APIRouter()


@router.post(
    "/scan",
    response_model=ScanResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def scan(
    req: ScanRequest,
    orchestrator: ScanOrchestrator = Depends(get_scan_orchestrator),
) -> ScanResponse:
    # Model and imagery failures come back as report text, never as a status
    result = await orchestrator.run(req.to_coordinate())
    return ScanResponse(report_text=result.report_text)
