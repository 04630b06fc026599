"""
Embedding function factory.

Depends on EMBEDDING_PROVIDER environment variable.
Provides the default capability for collections created without one.

Dependencies: vectordb_client.boundary.embeddings, vectordb_client.configs
System role: Embedding function instantiation and selection
"""

import logging

from vectordb_client.boundary.embeddings.base import EmbeddingFunction
from vectordb_client.boundary.embeddings.noop import NoOpEmbeddingFunction
from vectordb_client.boundary.embeddings.ollama import OllamaEmbeddingFunction
from vectordb_client.configs import EmbeddingSettings, get_settings

logger = logging.getLogger(__name__)


def get_embedding_function(settings: EmbeddingSettings | None = None) -> EmbeddingFunction:
    """
    Factory function to get the default embedding function.

    Args:
        settings: Optional embedding settings (global settings if None)

    Returns:
        EmbeddingFunction: Configured embedding function instance

    Raises:
        ValueError: If EMBEDDING_PROVIDER is invalid
    """
    settings = settings or get_settings().embedding
    provider = settings.provider.lower()

    if provider == "none":
        logger.debug(f"{__name__}:get_embedding_function - Using no-op embedding function")
        return NoOpEmbeddingFunction()

    elif provider == "ollama":
        logger.info(
            f"{__name__}:get_embedding_function - Creating Ollama embedding function "
            f"(model={settings.ollama_model})"
        )
        return OllamaEmbeddingFunction(
            url=settings.ollama_url,
            model=settings.ollama_model,
            timeout_sec=settings.timeout_sec,
        )

    else:
        raise ValueError(
            f"Invalid EMBEDDING_PROVIDER: {provider}. "
            f"Must be 'none' or 'ollama'."
        )
