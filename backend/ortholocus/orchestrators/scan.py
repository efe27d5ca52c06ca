"""Scan: satellite imagery + multimodal analysis → report text.

Only bad input and missing credentials raise. Everything past that point
(imagery, prompt, model) is folded into the returned report so the
terminal panel always has something to show.
"""

from __future__ import annotations

import logging

from ortholocus.config import Settings
from ortholocus.errors import ConfigurationError, ModelFailure, OrthoLocusError
from ortholocus.imagery.static_map import DEFAULT_ZOOM, SCAN_SIZE, StaticMapClient
from ortholocus.llm.client import AnalysisModel
from ortholocus.llm.prompts import build_scan_prompt
from ortholocus.models.domain import Coordinate, ImageObtained, ScanResult

logger = logging.getLogger(__name__)

_SYSTEM_ERROR_TEMPLATE = (
    "[SYSTEM ERROR]\n"
    "> VISUAL UPLINK FAILED\n"
    "> REASON: {reason}\n"
    "> RETRYING ON SECURE CHANNEL..."
)


def system_error_report(reason: str) -> str:
    return _SYSTEM_ERROR_TEMPLATE.format(reason=reason or "UNKNOWN")


def _reason(exc: Exception) -> str:
    if isinstance(exc, OrthoLocusError):
        return exc.message
    return str(exc) or type(exc).__name__


class ScanOrchestrator:
    def __init__(
        self,
        settings: Settings,
        static_map: StaticMapClient,
        model: AnalysisModel,
    ) -> None:
        self._settings = settings
        self._static_map = static_map
        self._model = model

    def _require_config(self) -> None:
        if not (self._settings.has_gemini_key and self._settings.has_maps_key):
            raise ConfigurationError()

    async def run(self, coord: Coordinate) -> ScanResult:
        self._require_config()

        try:
            imagery = await self._static_map.try_fetch(coord, zoom=DEFAULT_ZOOM, size=SCAN_SIZE)
            prompt = build_scan_prompt(coord, imagery)
            image = imagery.image if isinstance(imagery, ImageObtained) else None

            logger.info(
                "Scan %s with %s",
                coord.as_query(), "imagery" if image is not None else "coordinates only",
            )
            text = await self._model.analyze(prompt, image)
            if not text or not text.strip():
                raise ModelFailure("Empty response from analysis model")
        except Exception as e:
            logger.exception("Scan failed for %s", coord.as_query())
            return ScanResult(report_text=system_error_report(_reason(e)))

        return ScanResult(report_text=text)
