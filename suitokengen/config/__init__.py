"""
Settings for the token generator CLI, API server and HTTP client.
"""

from functools import lru_cache
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Values come from the process environment first, then ``.env``."""

    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    # API server bind address and the URL clients use to reach it
    SERVER_HOST: str = "127.0.0.1"
    SERVER_PORT: int = 5001
    SERVER_URL: str = "http://127.0.0.1:5001"
    REQUEST_TIMEOUT: float = 30.0

    GIT_EXECUTABLE: str = "git"
    GIT_CLONE_TIMEOUT: float = 120.0

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True, extra="ignore"
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def upper_log_level(cls, value: str) -> str:
        return value.upper()

    @field_validator("SERVER_URL")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
