"""Application configuration via pydantic-settings."""

from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_URL = "https://cdn.builder.io/api/v3/content"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="BUILDER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Builder.io space credentials
    api_key: str = ""
    api_url: str = DEFAULT_API_URL

    # Content selection
    model: str = "page"
    locale: str = "us-en"
    default_locale: str = "Default"
    limit: int = 100

    # Extra field names to pull text from, on top of the built-in ones
    text_fields: list[str] = Field(default_factory=list)

    # HTTP
    timeout: float = 30.0

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get cached settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
