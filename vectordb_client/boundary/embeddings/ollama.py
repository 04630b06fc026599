"""
Ollama embedding function.

Generates embeddings through an Ollama server's /api/embeddings endpoint.

Dependencies: httpx
System role: HTTP embedding provider
"""

import logging

import httpx

from vectordb_client.boundary.embeddings.base import EmbeddingFunction
from vectordb_client.core.exceptions import EmbeddingError

logger = logging.getLogger(__name__)

DEFAULT_OLLAMA_URL = "http://127.0.0.1:11434/api/embeddings"


class OllamaEmbeddingFunction(EmbeddingFunction):
    """
    Ollama embeddings over HTTP.

    The endpoint embeds one prompt per request, so texts are sent sequentially
    to keep the output aligned with the input.
    """

    def __init__(
        self,
        url: str = DEFAULT_OLLAMA_URL,
        model: str = "nomic-embed-text",
        timeout_sec: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize Ollama embedding function.

        Args:
            url: Full embeddings endpoint URL
            model: Ollama model name
            timeout_sec: Request timeout when the client is created here
            client: Optional shared AsyncClient (caller keeps ownership)
        """
        self.url = url
        self.model = model
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=httpx.Timeout(timeout_sec))

    async def generate(self, texts: list[str]) -> list[list[float]]:
        embeddings: list[list[float]] = []
        for text in texts:
            embeddings.append(await self._embed_text(text))
        return embeddings

    async def _embed_text(self, text: str) -> list[float]:
        payload = {"model": self.model, "prompt": text}
        try:
            response = await self._client.post(self.url, json=payload)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"{__name__}:_embed_text - Ollama request failed: {e}")
            raise EmbeddingError(
                "Ollama embedding request failed",
                details={"url": self.url, "model": self.model, "error": str(e)},
            ) from e

        data = response.json()
        embedding = data.get("embedding") if isinstance(data, dict) else None
        if not isinstance(embedding, list):
            raise EmbeddingError(
                "Ollama response missing embedding vector",
                details={"url": self.url, "model": self.model},
            )
        return embedding

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()
