"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Any, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from site_analysis.crawler.fetcher import DEFAULT_TIMEOUT_MS, USER_AGENT


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    env: Literal["development", "production", "test"] = "development"
    debug: bool = False
    log_level: str = "INFO"

    # Fetcher
    fetch_timeout_ms: int = Field(DEFAULT_TIMEOUT_MS, ge=1)
    fetch_user_agent: str = USER_AGENT

    # Analysis
    default_url: str = "https://www.ecfr.gov/"
    analysis_concurrency: int = Field(5, ge=1)

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.env == "production"

    @property
    def is_test(self) -> bool:
        """Check if running in test mode."""
        return self.env == "test"

    def fetcher_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for constructing a Fetcher from these settings."""
        return {
            "timeout_ms": self.fetch_timeout_ms,
            "user_agent": self.fetch_user_agent,
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
