"""Environment-based configuration loader using pydantic BaseSettings."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Values come from the process environment (or a .env file) and are
    validated when the application is created.
    """

    # Application
    app_name: str = "Global Exception Handling API"
    app_version: str = "0.1.0"
    log_level: str = "INFO"

    # CORS origins, JSON-encoded when set via env (e.g. '["http://localhost:5173"]')
    cors_origins: list[str] = ["*"]

    # Mount /demo routes that succeed or fail on demand
    enable_demo_routes: bool = True

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


def get_settings() -> Settings:
    """Create and return a validated Settings instance."""
    return Settings()
