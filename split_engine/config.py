"""Configuration management"""

import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from split_engine.models.split_mode import SplitMode


class Settings(BaseSettings):
    """Split engine settings"""

    app_name: str = "Household Split Engine"
    log_level: str = "INFO"

    # Household default when no policy has been configured
    default_split_mode: SplitMode = SplitMode.INCOME_WEIGHTED

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="SPLIT_ENGINE_",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name"""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"LOG_LEVEL must be a logging level name, got {v}")
        return level


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
