"""Artwork: style prompt → image model → ``data:`` URI, or an explicit absence."""

from __future__ import annotations

import base64
import logging
from collections.abc import Iterable

from ortholocus.config import Settings
from ortholocus.errors import ConfigurationError
from ortholocus.llm.client import ImageModel
from ortholocus.llm.prompts import build_artwork_prompt
from ortholocus.models.domain import (
    ArtworkResult,
    ArtworkStyle,
    ContentPart,
    Coordinate,
    InlineImagePart,
)

logger = logging.getLogger(__name__)

_DEFAULT_IMAGE_MIME = "image/png"


def first_image_data_uri(parts: Iterable[ContentPart]) -> str | None:
    """Re-encode the first inline image part, or None if the model returned none."""
    for part in parts:
        if not isinstance(part, InlineImagePart) or not part.data:
            continue
        mime = part.mime_type or _DEFAULT_IMAGE_MIME
        if not mime.startswith("image/"):
            continue
        payload = base64.b64encode(part.data).decode("ascii")
        return f"data:{mime};base64,{payload}"
    return None


class ArtworkOrchestrator:
    def __init__(self, settings: Settings, model: ImageModel) -> None:
        self._settings = settings
        self._model = model

    async def run(self, coord: Coordinate, style: ArtworkStyle | str) -> ArtworkResult:
        style = ArtworkStyle.parse(style)
        if not self._settings.has_gemini_key:
            raise ConfigurationError()

        prompt = build_artwork_prompt(coord, style)
        logger.info("Artwork %s style=%s", coord.as_query(), style.value)

        try:
            parts = await self._model.generate(prompt)
        except Exception:
            logger.exception("Artwork generation failed for %s", coord.as_query())
            return ArtworkResult()

        uri = first_image_data_uri(parts)
        if uri is None:
            logger.warning("Image model returned no image part (%d parts)", len(parts))
        return ArtworkResult(image_data_uri=uri)
