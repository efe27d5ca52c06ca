"""Tests for POST /api/artwork."""

from __future__ import annotations

import base64

import pytest

from ortholocus.models.domain import InlineImagePart, TextPart
from tests.conftest import NYC, PNG_BYTES


def _artwork(client, style="PLANAR", latitude=NYC[0], longitude=NYC[1]):
    return client.post(
        "/api/artwork",
        json={"latitude": latitude, "longitude": longitude, "style": style},
    )


def test_artwork_planar_returns_data_uri(client, image_model):
    response = _artwork(client, "PLANAR")
    assert response.status_code == 200
    uri = response.json()["imageDataUri"]
    assert uri == "data:image/png;base64," + base64.b64encode(PNG_BYTES).decode("ascii")
    assert len(image_model.prompts) == 1


def test_artwork_nyc_planar_never_empty_success(client, image_model):
    image_model.parts = []
    response = _artwork(client, "PLANAR")
    if response.status_code == 200:
        assert response.json()["imageDataUri"].startswith("data:image/")
    else:
        assert response.status_code == 500
        assert response.json() == {"error": "No image generated"}


def test_artwork_prompts_distinct_per_style(client, image_model):
    _artwork(client, "PLANAR")
    _artwork(client, "PLEIN_AIR")
    planar, plein_air = image_model.prompts
    assert planar != plein_air
    for prompt in (planar, plein_air):
        assert "40.7128" in prompt
        assert "-74.006" in prompt
    assert "Blueprint" in planar
    assert "Impressionist" in plein_air


@pytest.mark.parametrize("style", ["WATERCOLOR", "planar", "", None, 1])
def test_artwork_unknown_style_rejected(client, image_model, style):
    response = _artwork(client, style)
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid style"}
    assert image_model.prompts == []


def test_artwork_invalid_coordinates(client, image_model):
    response = _artwork(client, latitude="40", longitude=-74)
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid coordinates"}
    assert image_model.prompts == []


def test_artwork_text_only_response_is_absence(client, image_model):
    image_model.parts = [TextPart(text="I cannot draw that.")]
    response = _artwork(client)
    assert response.status_code == 500
    assert response.json() == {"error": "No image generated"}


def test_artwork_model_error_is_absence(client, image_model):
    image_model.error = TimeoutError("deadline exceeded")
    response = _artwork(client)
    assert response.status_code == 500
    assert response.json() == {"error": "No image generated"}


def test_artwork_uses_returned_mime_type(client, image_model):
    image_model.parts = [InlineImagePart("image/jpeg", b"\xff\xd8\xff")]
    uri = _artwork(client, "PLEIN_AIR").json()["imageDataUri"]
    assert uri.startswith("data:image/jpeg;base64,")


def test_artwork_missing_gemini_key(client, settings, image_model):
    settings.gemini_api_key = ""
    response = _artwork(client)
    assert response.status_code == 500
    assert response.json() == {"error": "Server configuration error"}
    assert image_model.prompts == []


def test_artwork_does_not_need_maps_key(client, settings, upstream):
    settings.google_maps_server_key = ""
    response = _artwork(client)
    assert response.status_code == 200
    assert upstream.requests == []


def _raw_artwork(client, body: str):
    return client.post(
        "/api/artwork",
        content=body.encode(),
        headers={"content-type": "application/json"},
    )


@pytest.mark.parametrize("raw", ["NaN", "Infinity", "-Infinity"])
def test_artwork_non_finite_rejected(client, image_model, raw):
    response = _raw_artwork(client, f'{{"latitude": {raw}, "longitude": -74.0, "style": "PLANAR"}}')
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid coordinates"}
    assert image_model.prompts == []


def test_artwork_integer_beyond_float_range_rejected(client, image_model):
    huge = "1" + "0" * 400
    response = _raw_artwork(client, f'{{"latitude": {huge}, "longitude": -74.0, "style": "PLANAR"}}')
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid coordinates"}
    assert image_model.prompts == []


def test_artwork_bad_coordinates_reported_before_bad_style(client, image_model):
    response = _artwork(client, style="WATERCOLOR", latitude="40", longitude=1)
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid coordinates"}
    assert image_model.prompts == []
