"""Master API router: mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from ortholocus.api import artwork, health, scan, staticmap

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(scan.router)
api_router.include_router(artwork.router)
api_router.include_router(staticmap.router)
