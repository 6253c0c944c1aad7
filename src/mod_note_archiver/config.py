# ABOUTME: Centralized configuration using Pydantic Settings.
# ABOUTME: Loads archiver settings from environment variables and .env file.

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Identity sent in the User-agent header
    app_domain: str = "localhost"
    archive_user_agent_suffix: str = "mod-note-archiver"

    # Wayback Machine
    wayback_save_url: str = "https://web.archive.org/save/"
    archive_timeout: float = 30.0
    archive_retries: int = 3
    archive_verify_tls: bool = True
    # archive.org allows ~15 req/min on the save API
    archive_delay_seconds: float = 5.0

    # Job scheduling
    archive_queue: str = "default"

    # Logging
    log_level: str = "INFO"
    log_format: str = "console"  # "console" or "json"

    @property
    def archive_user_agent(self) -> str:
        """User-agent header value identifying the submitting application."""
        return f"{self.app_domain} {self.archive_user_agent_suffix}"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Settings are loaded from environment variables and .env file.
    """
    return Settings()
