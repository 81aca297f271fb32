"""Application settings loaded from environment variables via pydantic-settings.

Every field can be overridden with a ``HARVEST_``-prefixed environment
variable or a ``.env`` file, e.g. ``HARVEST_DEFAULT_CITY=Bremen``.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central configuration for the CLI, flows, and data sources."""

    model_config = SettingsConfigDict(
        env_prefix="HARVEST_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # -- Application ----------------------------------------------------------
    app_name: str = "harvest-planner"
    app_env: str = "development"
    debug: bool = False
    log_level: str = "info"

    # -- Location & forecast --------------------------------------------------
    default_city: str = "Hamburg"
    timezone: str = "Europe/Berlin"
    forecast_days: int = Field(default=9, ge=2, le=16)

    # -- Harvest evaluation ---------------------------------------------------
    daytime_start_hour: int = Field(default=8, ge=0, le=23)
    daytime_end_hour: int = Field(default=20, ge=0, le=23)
    scan_days: int = Field(default=7, ge=1)

    # -- Output ---------------------------------------------------------------
    site_dir: str = "site"
    api_port: int = 8000
    # Nominatim asks for contact details here, e.g.
    # HARVEST_USER_AGENT="harvest-planner/0.1 (ops@example.org)"
    user_agent: str = "harvest-planner/0.1"

    @model_validator(mode="after")
    def _check_daytime_window(self) -> Settings:
        if self.daytime_start_hour > self.daytime_end_hour:
            msg = (
                f"daytime_start_hour ({self.daytime_start_hour}) exceeds "
                f"daytime_end_hour ({self.daytime_end_hour})"
            )
            raise ValueError(msg)
        return self


@lru_cache
def get_settings() -> Settings:
    """Singleton settings instance (cached after first call)."""
    return Settings()
