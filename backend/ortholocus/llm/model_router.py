"""Task → model selection. Multimodal text model for scans, image model for artwork."""

from __future__ import annotations

from ortholocus.config import Settings, settings as default_settings

_TASK_MODEL_MAP = {
    "scan": "analysis",
    "artwork": "image",
}


def get_model_for_task(task: str, settings: Settings | None = None) -> str:
    cfg = settings or default_settings
    kind = _TASK_MODEL_MAP.get(task, "analysis")
    if kind == "image":
        return cfg.model_image
    return cfg.model_analysis
