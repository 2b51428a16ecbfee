"""Application settings (server, logging, fault injection)."""
from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.infrastructure.chaos import DEFAULT_FAILURE_RATE, ChaosProfile


class AppSettings(BaseSettings):
    """
    Service settings.
    Loaded from environment variables or .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=3000, ge=1, le=65535, alias="PORT")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_file: Optional[str] = Field(default="app.log", alias="LOG_FILE")

    chaos_enabled: bool = Field(default=True, alias="CHAOS_ENABLED")
    chaos_failure_rate: float = Field(
        default=DEFAULT_FAILURE_RATE,
        ge=0.0,
        le=1.0,
        alias="CHAOS_FAILURE_RATE",
    )

    def chaos_profile(self) -> ChaosProfile:
        """Build the fault-injection profile these settings describe."""
        if not self.chaos_enabled:
            return ChaosProfile.disabled()
        return ChaosProfile(failure_rate=self.chaos_failure_rate)


@lru_cache()
def get_app_settings() -> AppSettings:
    """Return cached global settings for the entire app."""
    return AppSettings()
