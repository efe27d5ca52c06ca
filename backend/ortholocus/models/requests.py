"""API request models."""

from __future__ import annotations

from typing import Annotated, Union

from pydantic import AliasChoices, BaseModel, Field, StrictInt
from pydantic.types import AllowInfNan, Strict

from ortholocus.models.domain import ArtworkStyle, Coordinate

# JSON numbers only: no numeric strings, no booleans, no NaN/Infinity
FiniteNumber = Union[StrictInt, Annotated[float, Strict(), AllowInfNan(False)]]


class ScanRequest(BaseModel):
    latitude: FiniteNumber = Field(
        ...,
        validation_alias=AliasChoices("latitude", "lat"),
        description="Latitude of the map center",
    )
    longitude: FiniteNumber = Field(
        ...,
        validation_alias=AliasChoices("longitude", "lng"),
        description="Longitude of the map center",
    )

    def to_coordinate(self) -> Coordinate:
        return Coordinate(latitude=self.latitude, longitude=self.longitude)


class ArtworkRequest(ScanRequest):
    style: ArtworkStyle = Field(..., description="Rendering style (PLANAR or PLEIN_AIR)")
