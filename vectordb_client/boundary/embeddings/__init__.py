"""
Embedding functions.

Pluggable capabilities that turn texts into vectors.
- NoOpEmbeddingFunction: default when vectors are always supplied by the caller
- LangChainEmbeddingFunction: bridge to any LangChain Embeddings model
- OllamaEmbeddingFunction: Ollama HTTP embeddings endpoint
"""

from vectordb_client.boundary.embeddings.base import EmbeddingFunction
from vectordb_client.boundary.embeddings.factory import get_embedding_function
from vectordb_client.boundary.embeddings.langchain_adapter import LangChainEmbeddingFunction
from vectordb_client.boundary.embeddings.noop import NoOpEmbeddingFunction
from vectordb_client.boundary.embeddings.ollama import OllamaEmbeddingFunction

__all__ = [
    "EmbeddingFunction",
    "LangChainEmbeddingFunction",
    "NoOpEmbeddingFunction",
    "OllamaEmbeddingFunction",
    "get_embedding_function",
]
