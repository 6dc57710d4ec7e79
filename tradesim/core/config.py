"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here; no scattered magic strings.
"""

from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        api_prefix: Path prefix for the trading routes. Empty serves them
            at the root, which is what the API Gateway routes expect.
        database_url: SQLAlchemy URL of the record store. When unset an
            in-memory store seeded with the default catalog is used.
        price_refresh_mode: ``request`` refreshes stale prices before every
            trading request; ``background`` refreshes them on a timer.
        price_staleness_seconds: Minimum age before a price moves again.
        price_refresh_interval_seconds: Timer period in background mode.
        identity_header: Optional request header trusted as the caller's
            user id when no JWT authorizer claim is present. For local
            development only.
        rate_limit_enabled: Toggle the per-client rate limiter.
        rate_limit_default: Default rate limit for all endpoints.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "TradeSim"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    api_prefix: str = ""

    database_url: Optional[str] = None

    price_refresh_mode: Literal["request", "background"] = "request"
    price_staleness_seconds: float = 60.0
    price_refresh_interval_seconds: float = 60.0

    identity_header: Optional[str] = None

    rate_limit_enabled: bool = True
    rate_limit_default: str = "60/minute"


settings = Settings()
