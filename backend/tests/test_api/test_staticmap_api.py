"""Tests for GET /api/staticmap."""

from __future__ import annotations

import httpx
import pytest

from tests.conftest import PNG_BYTES


def test_staticmap_proxies_image(client, upstream):
    response = client.get("/api/staticmap", params={"lat": 40.7128, "lng": -74.006})
    assert response.status_code == 200
    assert response.content == PNG_BYTES
    assert response.headers["content-type"] == "image/png"
    assert response.headers["cache-control"] == "public, max-age=3600"

    params = upstream.requests[0].url.params
    assert params["center"] == "40.7128,-74.006"
    assert params["zoom"] == "19"
    assert params["size"] == "800x800"
    assert params["maptype"] == "satellite"
    assert params["key"] == "test-maps-key"


def test_staticmap_overrides(client, upstream):
    response = client.get(
        "/api/staticmap",
        params={"lat": 1.5, "lng": 2.5, "zoom": 12, "size": "640x480"},
    )
    assert response.status_code == 200
    params = upstream.requests[0].url.params
    assert params["zoom"] == "12"
    assert params["size"] == "640x480"


def test_staticmap_keeps_upstream_image_type(client, upstream):
    upstream.content_type = "image/jpeg"
    response = client.get("/api/staticmap", params={"lat": 1, "lng": 2})
    assert response.headers["content-type"] == "image/jpeg"


@pytest.mark.parametrize("params", [{"lat": 40.7}, {"lng": -74.0}, {}])
def test_staticmap_missing_coordinates(client, upstream, params):
    response = client.get("/api/staticmap", params=params)
    assert response.status_code == 400
    assert response.json() == {"error": "Missing coordinates"}
    assert upstream.requests == []


def test_staticmap_non_numeric_coordinates(client, upstream):
    response = client.get("/api/staticmap", params={"lat": "forty", "lng": "-74"})
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid coordinates"}
    assert upstream.requests == []


def test_staticmap_bad_size(client, upstream):
    response = client.get("/api/staticmap", params={"lat": 1, "lng": 2, "size": "huge"})
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid size"}
    assert upstream.requests == []


@pytest.mark.parametrize("status", [403, 404, 500])
def test_staticmap_propagates_upstream_status(client, upstream, status):
    upstream.status = status
    upstream.content = b"The provided API key test-maps-key is invalid."
    upstream.content_type = "text/plain"
    response = client.get("/api/staticmap", params={"lat": 1, "lng": 2})
    assert response.status_code == status
    assert response.json() == {"error": "Failed to fetch map"}
    assert "test-maps-key" not in response.text


def test_staticmap_transport_error(client, upstream):
    upstream.exc = httpx.ConnectTimeout("timed out")
    response = client.get("/api/staticmap", params={"lat": 1, "lng": 2})
    assert response.status_code == 502
    assert response.json() == {"error": "Failed to fetch map"}


def test_staticmap_missing_maps_key(client, settings, upstream):
    settings.google_maps_server_key = ""
    response = client.get("/api/staticmap", params={"lat": 1, "lng": 2})
    assert response.status_code == 500
    assert response.json() == {"error": "Server configuration error"}
    assert upstream.requests == []
