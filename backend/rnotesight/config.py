"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    rnotesight_env: str = "development"
    rnotesight_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Document source
    notes_dir: str = "notes"
    max_upload_bytes: int = 32 * 1024 * 1024

    # Scene framing
    viewport_margin: float = 50.0
    default_viewport_width: float = 800.0
    default_viewport_height: float = 600.0
    background: str = "white"

    # Bitmap output
    png_width: int = 1024

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
