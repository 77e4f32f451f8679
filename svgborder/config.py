"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    svgborder_env: str = "development"
    svgborder_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Surface typed failures from the API instead of best-effort output
    svgborder_strict: bool = False

    # Border defaults used when a request omits them
    default_border_width: float = 10.0
    default_border_color: str = "#000000"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
