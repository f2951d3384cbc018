"""Runtime configuration for the record_constructor package.

Settings are loaded in priority order:
  1. Environment variables (highest priority)
  2. .env file in the project root
  3. Field defaults

Usage::

    from record_constructor.config import settings

    print(settings.log_format)
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="forbid",
    )

    log_format: str = Field(
        "text",
        alias="LOG_FORMAT",
        description="'json' for structured log lines, anything else for plaintext.",
    )
    log_level: str = Field(
        "WARNING",
        alias="LOG_LEVEL",
        description="Root logger level name, e.g. DEBUG or INFO.",
    )


settings = Settings()
