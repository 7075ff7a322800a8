"""Central configuration management using pydantic-settings.

All configuration is loaded from environment variables with sensible defaults.
A .env file in the working directory is read as well.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class FetchSettings(BaseSettings):
    """HTTP transport configuration for feed retrieval."""

    model_config = SettingsConfigDict(env_prefix="PODFEED_FETCH_")

    timeout_seconds: float = Field(default=10.0, description="Request timeout in seconds")
    http2: bool = Field(default=True, description="Negotiate HTTP/2 when the server supports it")
    follow_redirects: bool = Field(default=True, description="Follow HTTP redirects")
    max_attempts: int = Field(
        default=3, ge=1, description="Attempts per feed on connection errors and timeouts"
    )
    user_agent: str = Field(default="podfeed/0.1.0", description="User-Agent header")


class Settings(BaseSettings):
    """Main application settings aggregating all config sections."""

    model_config = SettingsConfigDict(
        env_prefix="PODFEED_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging level"
    )
    json_logs: bool = Field(default=False, description="Render logs as JSON")

    fetch: FetchSettings = Field(default_factory=FetchSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings: Application settings loaded from environment.
    """
    return Settings()
