"""Shared test fixtures."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from ortholocus.config import Settings
from ortholocus.dependencies import (
    get_analysis_model,
    get_http_client,
    get_image_model,
    get_settings,
)
from ortholocus.main import app
from ortholocus.models.domain import (
    ContentPart,
    Coordinate,
    InlineImagePart,
    SatelliteImage,
    TextPart,
)


NYC = (40.7128, -74.0060)

PNG_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01"

REPORT_TEXT = """[SECTOR ANALYSIS]
> TERRAIN: Low-lying estuarine plain, reclaimed shoreline.
> INFRASTRUCTURE: Dense orthogonal street grid, high-rise clusters.
> ANOMALIES: None detected.
> STRATEGIC VALUE: HIGH."""


class FakeAnalysisModel:
    def __init__(self, text: str = REPORT_TEXT, error: Exception | None = None) -> None:
        self.text = text
        self.error = error
        self.calls: list[tuple[str, SatelliteImage | None]] = []

    async def analyze(self, prompt: str, image: SatelliteImage | None = None) -> str:
        self.calls.append((prompt, image))
        if self.error is not None:
            raise self.error
        return self.text


class FakeImageModel:
    def __init__(
        self,
        parts: list[ContentPart] | None = None,
        error: Exception | None = None,
    ) -> None:
        if parts is None:
            parts = [TextPart(text="Here is your drawing."), InlineImagePart("image/png", PNG_BYTES)]
        self.parts = parts
        self.error = error
        self.prompts: list[str] = []

    async def generate(self, prompt: str) -> list[ContentPart]:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.parts


class FakeCamera:
    """Map view stand-in; pans freely even while locked."""

    def __init__(self, lat: float = NYC[0], lng: float = NYC[1]) -> None:
        self.position = Coordinate(lat, lng)
        self.locked = False
        self.lock_calls = 0
        self.unlock_calls = 0

    def pan(self, lat: float, lng: float) -> None:
        self.position = Coordinate(lat, lng)

    def center(self) -> Coordinate:
        return self.position

    def lock_gestures(self) -> None:
        self.locked = True
        self.lock_calls += 1

    def unlock_gestures(self) -> None:
        self.locked = False
        self.unlock_calls += 1


class MapUpstream:
    """``httpx.MockTransport`` handler standing in for the static imagery service."""

    def __init__(
        self,
        status: int = 200,
        content: bytes = PNG_BYTES,
        content_type: str = "image/png",
        exc: Exception | None = None,
    ) -> None:
        self.status = status
        self.content = content
        self.content_type = content_type
        self.exc = exc
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        return httpx.Response(
            self.status,
            content=self.content,
            headers={"content-type": self.content_type},
        )


def make_settings(**overrides) -> Settings:
    values = {
        "gemini_api_key": "test-gemini-key",
        "google_maps_server_key": "test-maps-key",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def upstream() -> MapUpstream:
    return MapUpstream()


@pytest.fixture
def analysis_model() -> FakeAnalysisModel:
    return FakeAnalysisModel()


@pytest.fixture
def image_model() -> FakeImageModel:
    return FakeImageModel()


@asynccontextmanager
async def mock_upstream_client(upstream: MapUpstream) -> AsyncIterator[httpx.AsyncClient]:
    async with httpx.AsyncClient(transport=httpx.MockTransport(upstream)) as http:
        yield http


@pytest_asyncio.fixture
async def upstream_http(upstream: MapUpstream) -> AsyncIterator[httpx.AsyncClient]:
    async with mock_upstream_client(upstream) as http:
        yield http


@pytest.fixture
def wired_app(settings, upstream_http, analysis_model, image_model):
    """The real app with credentials, upstream HTTP and models replaced."""
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_http_client] = lambda: upstream_http
    app.dependency_overrides[get_analysis_model] = lambda: analysis_model
    app.dependency_overrides[get_image_model] = lambda: image_model
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(wired_app) -> TestClient:
    with TestClient(wired_app) as c:
        yield c
