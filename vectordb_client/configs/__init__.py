"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from vectordb_client.configs.client import ClientSettings
from vectordb_client.configs.embedding import EmbeddingSettings
from vectordb_client.configs.settings import Settings, get_settings

__all__ = ["ClientSettings", "EmbeddingSettings", "Settings", "get_settings"]
