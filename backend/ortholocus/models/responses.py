"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    models: dict[str, str] = Field(default_factory=dict)
    credentials: dict[str, bool] = Field(default_factory=dict)


class ScanResponse(_CamelModel):
    report_text: str


class ArtworkResponse(_CamelModel):
    image_data_uri: str


class ErrorResponse(BaseModel):
    error: str
