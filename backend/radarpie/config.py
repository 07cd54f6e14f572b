"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    radarpie_env: str = "development"
    radarpie_log_level: str = "info"

    # Default for the layout debug flag when a request does not set it
    radarpie_debug: bool = False

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
