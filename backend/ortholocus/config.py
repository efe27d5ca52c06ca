"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    gemini_api_key: str = ""
    google_maps_server_key: str = ""
    ortholocus_env: str = "development"
    ortholocus_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:5173"]

    # Model routing
    model_analysis: str = "gemini-2.0-flash"
    model_image: str = "gemini-2.0-flash-exp-image-generation"

    # Upstream imagery
    static_map_url: str = "https://maps.googleapis.com/maps/api/staticmap"

    # Upstream time bounds (seconds)
    static_map_timeout_s: float = 15.0
    model_timeout_s: float = 60.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @property
    def has_gemini_key(self) -> bool:
        return bool(self.gemini_api_key)

    @property
    def has_maps_key(self) -> bool:
        return bool(self.google_maps_server_key)


settings = Settings()
