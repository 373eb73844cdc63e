"""
Configuration management using pydantic-settings.
Loads configuration from environment variables and .env file.
"""

from functools import lru_cache
from typing import Literal, Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application Configuration
    APP_NAME: str = "Entity Validator"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    LOG_FILE: Optional[str] = None  # Optional: also write logs to this file

    # Validation Configuration
    VALIDATION_SCHEMA_PATH: Optional[str] = None  # Defaults to config/validation/schema.yaml
    VALIDATION_ERROR_LEVEL: int = Field(default=0, ge=0, le=2)  # 0 buffer, 1 emit, 2 raise
    VALIDATION_COMMIT_PREPROCESSED: bool = True
    VALIDATION_MESSAGE_SEVERITY: Literal["info", "warning", "error", "critical"] = "error"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Uses lru_cache to ensure settings are loaded only once.
    """
    return Settings()


# Global settings instance
settings = get_settings()
