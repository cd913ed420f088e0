"""Application configuration via pydantic-settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_ignore_empty=True,
    )

    # Obot task API
    obot_access_token: str = Field(min_length=1)
    task_api_url: str = ""
    task_api_timeout: float = 30.0

    # Slack
    slack_signing_secret: str = ""

    # App
    environment: str = "development"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8088


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings. Lazy initialization to avoid import-time errors.

    Raises pydantic.ValidationError if OBOT_ACCESS_TOKEN is missing or empty.
    """
    return Settings()
