"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    captionkit_env: str = "development"
    captionkit_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Caption geometry
    base_font_size: float = 48.0
    radius_em: float = 0.3
    line_height_em: float = 1.35
    block_margin: float = 50.0
    scale_delimiter: str = "|"

    # Text styling for rendered SVG
    font_family: str = "Arial, Helvetica, sans-serif"
    font_weight: str = "700"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
