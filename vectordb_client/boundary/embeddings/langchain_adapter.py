"""
LangChain embeddings adapter.

Exposes any LangChain Embeddings implementation as an EmbeddingFunction.

Dependencies: langchain_core
System role: Embedding provider bridge
"""

import logging

from langchain_core.embeddings import Embeddings

from vectordb_client.boundary.embeddings.base import EmbeddingFunction
from vectordb_client.core.exceptions import EmbeddingError

logger = logging.getLogger(__name__)


class LangChainEmbeddingFunction(EmbeddingFunction):
    """
    Adapter over a LangChain Embeddings model.

    Uses the model's async document embedding path, which falls back to a
    thread executor for models that only implement the sync API.
    """

    def __init__(self, embeddings: Embeddings) -> None:
        """
        Initialize adapter.

        Args:
            embeddings: LangChain embeddings model
        """
        self._embeddings = embeddings

    async def generate(self, texts: list[str]) -> list[list[float]]:
        if not texts:
            return []
        logger.debug(
            f"{__name__}:generate - Embedding {len(texts)} texts with "
            f"{type(self._embeddings).__name__}"
        )
        try:
            return await self._embeddings.aembed_documents(texts)
        except Exception as e:
            raise EmbeddingError(
                "LangChain embeddings call failed",
                details={"error": str(e), "model": type(self._embeddings).__name__},
            ) from e
