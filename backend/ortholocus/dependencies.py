"""FastAPI dependency injection."""

from __future__ import annotations

import httpx
from fastapi import Depends, Request

from ortholocus.config import Settings, settings
from ortholocus.imagery.static_map import StaticMapClient
from ortholocus.llm.client import AnalysisModel, GeminiAnalysisModel, GeminiImageModel, ImageModel
from ortholocus.orchestrators.artwork import ArtworkOrchestrator
from ortholocus.orchestrators.scan import ScanOrchestrator


def get_settings() -> Settings:
    return settings


def get_http_client(request: Request) -> httpx.AsyncClient:
    return request.app.state.http


def get_static_map(
    http: httpx.AsyncClient = Depends(get_http_client),
    cfg: Settings = Depends(get_settings),
) -> StaticMapClient:
    return StaticMapClient(http, cfg)


def get_analysis_model(cfg: Settings = Depends(get_settings)) -> AnalysisModel:
    return GeminiAnalysisModel(cfg)


def get_image_model(cfg: Settings = Depends(get_settings)) -> ImageModel:
    return GeminiImageModel(cfg)


def get_scan_orchestrator(
    cfg: Settings = Depends(get_settings),
    static_map: StaticMapClient = Depends(get_static_map),
    model: AnalysisModel = Depends(get_analysis_model),
) -> ScanOrchestrator:
    return ScanOrchestrator(cfg, static_map, model)


def get_artwork_orchestrator(
    cfg: Settings = Depends(get_settings),
    model: ImageModel = Depends(get_image_model),
) -> ArtworkOrchestrator:
    return ArtworkOrchestrator(cfg, model)
