"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_URL = "https://www.googleapis.com/customsearch/v1"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Custom Search credentials
    google_search_engine_id: str = ""
    google_search_api_key: str = ""
    google_search_api_url: str = DEFAULT_API_URL

    # Transport
    google_search_timeout: float = 30.0
    google_search_verify_ssl: bool = True

    # Observability
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
