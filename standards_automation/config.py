"""
Application configuration using Pydantic Settings.
All environment-specific values are centralized here.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings
from pydantic import AliasChoices, Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # ── App ──────────────────────────────────────────────
    app_name: str = "Standards Requirements API"
    debug: bool = False

    # ── Source documents ─────────────────────────────────
    data_dir: str = "./data"
    data_glob: str = "*.json"

    # ── API server ───────────────────────────────────────
    api_host: str = "0.0.0.0"
    api_port: int = Field(default=3000, validation_alias=AliasChoices("api_port", "port"))
    cors_allow_origins: list[str] = ["*"]

    # ── Query limits ─────────────────────────────────────
    default_search_limit: int = 50
    max_search_limit: int = 1000

    # ── Logging ──────────────────────────────────────────
    log_level: str = "INFO"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings (singleton)."""
    return Settings()
