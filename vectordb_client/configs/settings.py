"""
Unified client settings.

Aggregates all configuration modules into a single Settings class.

Dependencies: All config modules
System role: Central configuration aggregator for the client
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import SettingsConfigDict

from vectordb_client.configs.base import BaseSettings, LogLevel
from vectordb_client.configs.client import ClientSettings
from vectordb_client.configs.embedding import EmbeddingSettings


class Settings(BaseSettings):
    """Unified settings aggregating all config modules."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="VECTORDB_",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: LogLevel = Field(
        default="INFO",
        description="Root log level applied by configure_logging",
    )

    # Aggregated settings
    client: ClientSettings = Field(default_factory=ClientSettings)
    embedding: EmbeddingSettings = Field(default_factory=EmbeddingSettings)

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


@lru_cache
def get_settings() -> Settings:
    """
    Get settings singleton.

    Returns Settings instance, cached after first use.
    Environment variables loaded once.

    Returns:
        Settings: Settings instance

    Usage:
        from vectordb_client.configs import get_settings
        settings = get_settings()
    """
    return Settings()
