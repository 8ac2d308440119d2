"""12-factor configuration adapter using environment variables and a .env file."""

import logging
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

RATE_LIMIT_PROFILES = ("dev", "prod")


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Integration API credentials
    like_listing_client_id: str = Field(
        default="", description="Client ID of the Integration API application"
    )
    like_listing_client_secret: str = Field(
        default="", description="Client secret of the Integration API application"
    )
    sharetribe_integration_base_url: str = Field(
        default="https://flex-integ-api.sharetribe.com",
        description="Base URL of the Integration API",
    )
    api_timeout: int = Field(default=10, description="Timeout for API requests in seconds")

    # Rate limiting configuration
    rate_limit_profile: str = Field(
        default="dev",
        description="Rate limiter preset: 'dev' for dev/test marketplaces, 'prod' for live ones",
    )

    # Polling configuration
    event_types: str = Field(default="user/updated", description="Event types to poll for")
    poll_wait_ms: int = Field(
        default=250,
        description="Delay in milliseconds before the next poll when a full page was received",
    )
    poll_idle_wait_ms: int = Field(
        default=10000,
        description="Delay in milliseconds before the next poll when all events were fetched",
    )

    # State file keeping the last processed event sequence ID across restarts
    state_file: str = Field(
        default="./listing-likes.state",
        description="Path of the file storing the last processed event sequence ID",
    )

    log_level: str = Field(default="INFO", description="Log level (DEBUG/INFO/WARNING/ERROR)")

    @field_validator("rate_limit_profile")
    @classmethod
    def validate_rate_limit_profile(cls, v: str) -> str:
        """Validate rate limit profile is either 'dev' or 'prod'."""
        if v.lower() not in RATE_LIMIT_PROFILES:
            raise ValueError("rate_limit_profile must be either 'dev' or 'prod'")
        return v.lower()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a known logging level name."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelNamesMapping().get(level), int):
            raise ValueError(f"log_level must be a logging level name, got '{v}'")
        return level

    @field_validator("poll_wait_ms", "poll_idle_wait_ms", "api_timeout")
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        """Validate durations are not negative."""
        if v < 0:
            raise ValueError("durations must not be negative")
        return v

    @property
    def poll_wait_seconds(self) -> float:
        """Short poll delay in seconds."""
        return self.poll_wait_ms / 1000

    @property
    def poll_idle_wait_seconds(self) -> float:
        """Idle poll delay in seconds."""
        return self.poll_idle_wait_ms / 1000

    def require_credentials(self) -> None:
        """Raise ValueError unless client credentials are configured."""
        missing = [
            name
            for name, value in (
                ("LIKE_LISTING_CLIENT_ID", self.like_listing_client_id),
                ("LIKE_LISTING_CLIENT_SECRET", self.like_listing_client_secret),
            )
            if not value
        ]
        if missing:
            raise ValueError(f"Missing required configuration: {', '.join(missing)}")

    @classmethod
    def for_testing(cls, **overrides: Any) -> "AppConfig":
        """Build a configuration that ignores any .env file."""
        return cls(_env_file=None, **overrides)
