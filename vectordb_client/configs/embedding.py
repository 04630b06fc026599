"""
Embedding provider configuration settings.

Selects the default embedding function for collections created without one.

Dependencies: pydantic, pydantic_settings
System role: Embedding provider configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from vectordb_client.configs.base import BaseSettings


class EmbeddingSettings(BaseSettings):
    """Default embedding provider configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="EMBEDDING_",
        case_sensitive=False,
        extra="ignore",
    )

    provider: str = Field(
        default="none",
        description="Embedding provider: 'none' (caller supplies vectors) or 'ollama'",
    )
    ollama_url: str = Field(
        default="http://127.0.0.1:11434/api/embeddings",
        description="Ollama embeddings endpoint",
    )
    ollama_model: str = Field(default="nomic-embed-text", description="Ollama model name")
    timeout_sec: float = Field(default=30.0, description="Embedding request timeout in seconds")
