"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).  Algorithm
thresholds are *not* here: each engine module carries its own config
model so that tests can inject overrides without touching the
environment.
"""

from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "Hypertrophy Coach: autoregulation and recovery analytics."
    VERSION: str = "0.1.0"
    AUTHORS: List[str] = []

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Engine defaults used by the HTTP surface
    FATIGUE_LOOKBACK_DAYS: int = Field(14, ge=1, le=90)

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


# Global settings instance
settings = Settings()
