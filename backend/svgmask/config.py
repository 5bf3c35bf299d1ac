"""Application configuration from environment variables."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    svgmask_env: str = "development"
    svgmask_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Axis classification used when a request does not pick one
    svgmask_axis_mode: Literal["legacy", "full"] = "legacy"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
