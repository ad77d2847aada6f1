"""Application configuration loading and validation."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import AliasChoices, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DEEPSEEK_API_URL = "https://api.deepseek.com/v1/chat/completions"


class Settings(BaseSettings):
    """Strongly typed settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="KYC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Completion API
    deepseek_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("KYC_DEEPSEEK_API_KEY", "DEEPSEEK_API_KEY", "deepseek_api_key"),
    )
    deepseek_api_url: str = DEFAULT_DEEPSEEK_API_URL
    deepseek_model: str = "deepseek-chat"
    completion_timeout_seconds: float = 120.0

    # Adverse media screening
    adverse_media_temperature: float = 0.3
    adverse_media_max_tokens: int = 3000
    default_date_range_days: int = 30

    # Portfolio analysis
    analysis_temperature: float = 0.3
    analysis_max_tokens: int = 2000

    # File-based configs
    logging_config_path: Path = Path("config/logging.yaml")

    @property
    def completion_api_configured(self) -> bool:
        """Return True when a non-blank completion API key is present."""
        return bool((self.deepseek_api_key or "").strip())

    @model_validator(mode="after")
    def validate_runtime_configuration(self) -> "Settings":
        """Validate cross-field configuration constraints."""
        if self.completion_timeout_seconds <= 0:
            raise ValueError("KYC_COMPLETION_TIMEOUT_SECONDS must be > 0")

        if self.adverse_media_max_tokens <= 0:
            raise ValueError("KYC_ADVERSE_MEDIA_MAX_TOKENS must be > 0")

        if self.analysis_max_tokens <= 0:
            raise ValueError("KYC_ANALYSIS_MAX_TOKENS must be > 0")

        if self.default_date_range_days <= 0:
            raise ValueError("KYC_DEFAULT_DATE_RANGE_DAYS must be > 0")

        if not 0 <= self.adverse_media_temperature <= 2:
            raise ValueError("KYC_ADVERSE_MEDIA_TEMPERATURE must be between 0 and 2")

        if not 0 <= self.analysis_temperature <= 2:
            raise ValueError("KYC_ANALYSIS_TEMPERATURE must be between 0 and 2")

        if not self.deepseek_api_url.startswith(("http://", "https://")):
            raise ValueError("KYC_DEEPSEEK_API_URL must be an http(s) URL")

        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached application settings."""
    return Settings()
