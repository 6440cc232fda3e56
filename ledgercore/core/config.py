"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here, no scattered magic strings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Variables are read with the LEDGERCORE_ prefix, e.g. LEDGERCORE_LOG_LEVEL.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (interactive docs). Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        api_prefix: Path prefix for every router.
        rate_limit_default: Rate limit for throttled endpoints.
    """

    model_config = SettingsConfigDict(
        env_prefix="LEDGERCORE_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    project_name: str = "LedgerCore API"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    api_prefix: str = "/api/v1"
    rate_limit_default: str = "60/minute"


settings = Settings()
