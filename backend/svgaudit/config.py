"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    svgaudit_env: str = "development"
    svgaudit_log_level: str = "info"

    # Traversal / canvas fallbacks
    svgaudit_max_depth: int = 100
    svgaudit_default_canvas_size: float = 100.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
