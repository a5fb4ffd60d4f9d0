from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Classical Cipher Lab"
    app_env: Literal["development", "staging", "production"] = "development"
    debug: bool = False
    api_v1_prefix: str = "/api/v1"
    log_level: str = "INFO"

    # Input limits
    max_text_length: int = 100_000

    # Key suggestion
    gemini_api_key: str | None = None
    gemini_model: str = "gemini-2.5-flash-lite"
    key_suggestion_timeout_seconds: float = 30.0

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"

    @property
    def key_suggestion_enabled(self) -> bool:
        return bool(self.gemini_api_key)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
