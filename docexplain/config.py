"""Runtime settings loaded from ``DOCEXPLAIN_*`` environment variables."""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine, upload and web settings.

    Attributes:
        min_content_length: Trimmed length below which the short-content
            fallback is returned.
        latency_min_seconds: Lower bound of the simulated processing delay.
        latency_max_seconds: Upper bound (exclusive) of the simulated delay.
        max_upload_bytes: Largest accepted uploaded file.
        preferences_url: SQLAlchemy URL for the preference store.
        log_level: Root log level name.
        frontend_dir: Directory holding the static browser UI, if served.
    """

    model_config = SettingsConfigDict(env_prefix="DOCEXPLAIN_", extra="ignore")

    min_content_length: int = Field(default=50, ge=0)
    latency_min_seconds: float = Field(default=1.0, ge=0)
    latency_max_seconds: float = Field(default=3.5, ge=0)
    max_upload_bytes: int = Field(default=5 * 1024 * 1024, gt=0)
    preferences_url: str = "sqlite://"
    log_level: str = "INFO"
    frontend_dir: Optional[Path] = None

    @model_validator(mode="after")
    def _check_latency_bounds(self) -> "Settings":
        if self.latency_max_seconds < self.latency_min_seconds:
            raise ValueError("latency_max_seconds must be >= latency_min_seconds")
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()
