"""Domain values shared by the orchestrators, the proxy and the client."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Union

from ortholocus.errors import ValidationError


def _is_finite_number(value: object) -> bool:
    # bool is an int subclass but never a coordinate
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # int beyond float range
        return False


@dataclass(frozen=True)
class Coordinate:
    """A WGS84 point. Only finiteness is checked, not the ±90/±180 range."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        for value in (self.latitude, self.longitude):
            if not _is_finite_number(value):
                raise ValidationError("Invalid coordinates", code="INVALID_COORDINATES")

    def as_query(self) -> str:
        """``lat,lng`` as the static imagery service expects for ``center``."""
        return f"{self.latitude},{self.longitude}"

    def label(self, digits: int = 6) -> str:
        return f"{self.latitude:.{digits}f}, {self.longitude:.{digits}f}"


class ArtworkStyle(str, enum.Enum):
    PLANAR = "PLANAR"
    PLEIN_AIR = "PLEIN_AIR"

    @classmethod
    def parse(cls, value: object) -> "ArtworkStyle":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValidationError("Invalid style", code="INVALID_STYLE") from None


@dataclass(frozen=True)
class SatelliteImage:
    """Raw imagery held only for the duration of one request."""

    data: bytes
    mime_type: str = "image/png"


@dataclass(frozen=True)
class ImageObtained:
    image: SatelliteImage


@dataclass(frozen=True)
class ImageUnavailable:
    reason: str = ""


ImageResult = Union[ImageObtained, ImageUnavailable]


@dataclass(frozen=True)
class TextPart:
    text: str


@dataclass(frozen=True)
class InlineImagePart:
    mime_type: str
    data: bytes


ContentPart = Union[TextPart, InlineImagePart]


@dataclass(frozen=True)
class ScanResult:
    report_text: str


@dataclass(frozen=True)
class ArtworkResult:
    image_data_uri: str | None = None

    @property
    def produced(self) -> bool:
        return bool(self.image_data_uri)
