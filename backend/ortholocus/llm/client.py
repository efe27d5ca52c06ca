"""Gemini model wrappers.

Analysis goes through LangChain's ``ChatGoogleGenerativeAI`` (multimodal
``HumanMessage``). Image generation goes through the ``google-genai`` SDK,
which exposes the raw content parts and their inline image payloads.
"""

from __future__ import annotations

import base64
from typing import Any, Protocol

from ortholocus.config import Settings
from ortholocus.llm.model_router import get_model_for_task
from ortholocus.models.domain import ContentPart, InlineImagePart, SatelliteImage, TextPart


class AnalysisModel(Protocol):
    async def analyze(self, prompt: str, image: SatelliteImage | None = None) -> str: ...


class ImageModel(Protocol):
    async def generate(self, prompt: str) -> list[ContentPart]: ...


def message_text(content: Any) -> str:
    """Flatten a LangChain message ``content`` (str or list of blocks) into text."""
    if isinstance(content, str):
        return content
    chunks: list[str] = []
    for block in content or []:
        if isinstance(block, str):
            chunks.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            chunks.append(block.get("text", ""))
    return "".join(chunks)


def parts_from_response(response: Any) -> list[ContentPart]:
    """Normalize the first candidate of a ``GenerateContentResponse`` into content parts."""
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return []
    content = getattr(candidates[0], "content", None)
    raw_parts = getattr(content, "parts", None) or []

    parts: list[ContentPart] = []
    for part in raw_parts:
        inline = getattr(part, "inline_data", None)
        if inline is not None and inline.data:
            data = inline.data
            if isinstance(data, str):
                data = base64.b64decode(data)
            parts.append(InlineImagePart(mime_type=inline.mime_type or "", data=data))
        elif getattr(part, "text", None):
            parts.append(TextPart(text=part.text))
    return parts


class GeminiAnalysisModel:
    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    async def analyze(self, prompt: str, image: SatelliteImage | None = None) -> str:
        from langchain_core.messages import HumanMessage
        from langchain_google_genai import ChatGoogleGenerativeAI

        llm = ChatGoogleGenerativeAI(
            model=get_model_for_task("scan", self._settings),
            google_api_key=self._settings.gemini_api_key,
            timeout=self._settings.model_timeout_s,
            max_retries=0,
        )

        content: list[dict[str, Any]] = [{"type": "text", "text": prompt}]
        if image is not None:
            b64 = base64.b64encode(image.data).decode("ascii")
            content.append(
                {
                    "type": "image_url",
                    "image_url": {"url": f"data:{image.mime_type};base64,{b64}"},
                }
            )

        response = await llm.ainvoke([HumanMessage(content=content)])
        return message_text(response.content)


class GeminiImageModel:
    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    async def generate(self, prompt: str) -> list[ContentPart]:
        from google import genai
        from google.genai import types

        client = genai.Client(
            api_key=self._settings.gemini_api_key,
            http_options=types.HttpOptions(timeout=int(self._settings.model_timeout_s * 1000)),
        )
        response = await client.aio.models.generate_content(
            model=get_model_for_task("artwork", self._settings),
            contents=prompt,
            config=types.GenerateContentConfig(response_modalities=["TEXT", "IMAGE"]),
        )
        return parts_from_response(response)
