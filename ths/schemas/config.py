"""Runtime settings loaded from the environment."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ScorerSettings(BaseSettings):
    """Settings for logging and CLI hints. Scoring thresholds are fixed."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_mode: Literal["development", "production"] = Field(
        default="development",
        alias="APP_MODE",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "silent"] = Field(
        default="INFO",
        alias="LOG_LEVEL",
    )
    min_recommended_chars: int = Field(
        default=50,
        ge=0,
        alias="MIN_RECOMMENDED_CHARS",
        description="Below this length the CLI warns that results are unreliable.",
    )

    @property
    def is_production(self) -> bool:
        return self.app_mode == "production"

    @property
    def is_silent(self) -> bool:
        return self.log_level == "silent"


@lru_cache(maxsize=1)
def get_settings() -> ScorerSettings:
    """Get cached settings instance."""
    return ScorerSettings()  # type: ignore[call-arg]
