"""
No-op embedding function.

Default capability for collections without a configured provider.

Dependencies: vectordb_client.core.exceptions
System role: Degenerate embedding provider
"""

from vectordb_client.boundary.embeddings.base import EmbeddingFunction
from vectordb_client.core.exceptions import EmbeddingError


class NoOpEmbeddingFunction(EmbeddingFunction):
    """Embedding function that cannot embed anything."""

    async def generate(self, texts: list[str]) -> list[list[float]]:
        if not texts:
            return []
        raise EmbeddingError(
            "No embedding function configured; supply embeddings or set EMBEDDING_PROVIDER",
            details={"text_count": len(texts)},
        )
