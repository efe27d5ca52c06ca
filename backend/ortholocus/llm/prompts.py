"""Prompt templates for the analysis and image-generation models."""

from __future__ import annotations

from ortholocus.models.domain import ArtworkStyle, Coordinate, ImageObtained, ImageResult

_SCAN_TEMPLATE = """SYSTEM: ORBITAL RECONNAISSANCE // GEMINI UPLINK ESTABLISHED
TARGET: {latitude}, {longitude}
DATA SOURCE: {data_source}

MISSION: Perform deep-spectrum analysis of the provided {subject}.
{imagery_note}

OUTPUT FORMAT:
[SECTOR ANALYSIS]
> TERRAIN: [Detailed geological/topographical analysis]
> INFRASTRUCTURE: [Identify structures, road networks, potential utility lines]
> ANOMALIES: [Detect any irregularities or notable features]
> STRATEGIC VALUE: [Assessment of location importance]

Keep the tone cold, robotic, and hyper-precise.
Limit response to 200 words."""

_IMAGERY_ATTACHED = (
    "IMAGERY: ATTACHED. A satellite image centered on the target follows this prompt. "
    "Ground every visual observation in that image."
)

_IMAGERY_ABSENT = (
    "IMAGERY: NONE. No image is attached. Do not claim to see anything; "
    "reason only from what is known about these coordinates."
)

_PLANAR_TEMPLATE = """Generate a high-precision architectural planar drawing (site plan) for the location at coordinates: {latitude}, {longitude}.

STYLE:
- Top-down orthographic view (Planar)
- Technical architectural drawing / Blueprint style
- High contrast: White lines on dark blueprint blue background
- Precise line weights showing infrastructure, building footprints, and terrain
- Annotations in technical font

GROUNDING:
- Use the actual geographic data for these coordinates to ensure the layout matches reality.
- Accurately represent the road network and major structures present at this location."""

_PLEIN_AIR_TEMPLATE = """Generate a "Plein Air" artistic masterpiece capturing the essence of the location at coordinates: {latitude}, {longitude}.

STYLE:
- Plein Air / Impressionist style
- Oil on canvas texture
- Atmospheric perspective, capturing the light and mood of the specific location
- Viewpoint: Eye-level or slightly elevated, looking AT the landscape/cityscape (not top-down)
- Expressive brushwork, vibrant but naturalistic colors

GROUNDING:
- Capture the specific biome, lighting conditions, and architectural vernacular of this real-world location.
- If urban: capture the energy, streets, and skyline.
- If nature: capture the flora, terrain, and atmosphere."""

_ARTWORK_TEMPLATES: dict[ArtworkStyle, str] = {
    ArtworkStyle.PLANAR: _PLANAR_TEMPLATE,
    ArtworkStyle.PLEIN_AIR: _PLEIN_AIR_TEMPLATE,
}


def build_scan_prompt(coord: Coordinate, imagery: ImageResult) -> str:
    """The prompt states whether imagery is attached so the model does not invent visuals."""
    has_image = isinstance(imagery, ImageObtained)
    return _SCAN_TEMPLATE.format(
        latitude=coord.latitude,
        longitude=coord.longitude,
        data_source="VISUAL SATELLITE FEED" if has_image else "GEOSPATIAL COORDINATE DATABASE",
        subject="satellite imagery" if has_image else "location",
        imagery_note=_IMAGERY_ATTACHED if has_image else _IMAGERY_ABSENT,
    )


def build_artwork_prompt(coord: Coordinate, style: ArtworkStyle) -> str:
    return _ARTWORK_TEMPLATES[style].format(latitude=coord.latitude, longitude=coord.longitude)
