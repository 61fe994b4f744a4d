"""
Configuration for the tax tracker backend.

Every setting can be overridden with a TAX_TRACKER_* environment variable,
e.g. TAX_TRACKER_DB_URL or TAX_TRACKER_PORT.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


BACKEND_DIR = Path(__file__).resolve().parent.parent

DEFAULT_DB_URL = f"sqlite:///{BACKEND_DIR / 'tax_tracker.db'}"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TAX_TRACKER_",
        extra="ignore",
    )

    db_url: str = Field(default=DEFAULT_DB_URL, description="SQLAlchemy database URL")
    host: str = Field(default="0.0.0.0", description="Bind host for serve()")
    port: int = Field(default=3000, description="Bind port for serve()")
    static_dir: Path = Field(default=BACKEND_DIR / "public", description="Front-end bundle directory")
    cors_origins: str = Field(default="*", description="Comma-separated allowed origins")
    log_level: str = Field(default="INFO", description="Root log level for serve()")

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.strip().upper()

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


def load_settings() -> Settings:
    return Settings()
