"""
Split Planner Configuration
===========================
All environment variables in one place. Pydantic Settings validates
types at startup so a bad value fails on boot rather than mid-request.

Only the HTTP layer (``app.main``) reads these. The planner services are
pure functions of their input and never import this module.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Loaded from environment variables or a .env file."""

    environment: str = "development"  # development | staging | production
    log_level: str = "INFO"
    cors_origins: list[str] = ["http://localhost:8081", "http://localhost:19006"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
