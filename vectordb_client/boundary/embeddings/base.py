"""
Embedding function interface.

Defines the pluggable capability that turns texts into embedding vectors.

Dependencies: None
System role: Contract between the embedding resolver and concrete providers
"""

from abc import ABC, abstractmethod


class EmbeddingFunction(ABC):
    """
    Pluggable text-to-vector capability bound to a collection.

    Implementations must return exactly one vector per input text, in input
    order: ``vectors[i]`` embeds ``texts[i]``.
    """

    @abstractmethod
    async def generate(self, texts: list[str]) -> list[list[float]]:
        """
        Generate embeddings for texts.

        Args:
            texts: Texts to embed

        Returns:
            list[list[float]]: One vector per text, index-aligned
        """
        ...

    async def aclose(self) -> None:
        """Release provider resources. No-op unless the provider holds any."""
        return None
