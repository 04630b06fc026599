"""
Async client for a remote vector-similarity store.

Marshals document records to parallel arrays, resolves missing embeddings
through a pluggable embedding function, and fans batched similarity queries
out and back in.
"""

from vectordb_client.application import ClientState, VectorStoreClient
from vectordb_client.boundary.embeddings import (
    EmbeddingFunction,
    LangChainEmbeddingFunction,
    NoOpEmbeddingFunction,
    OllamaEmbeddingFunction,
)
from vectordb_client.core.exceptions import (
    ClientInitializationError,
    DuplicateIdError,
    EmbeddingError,
    InvalidCollectionError,
    LengthMismatchError,
    MissingContentError,
    StoreConnectionError,
    StoreServerError,
    UnauthorizedError,
    ValidationError,
    VectorClientException,
)
from vectordb_client.models import (
    CollectionHandle,
    DeleteOptions,
    Document,
    GetOptions,
    Include,
    ParallelArrays,
    QueryDoc,
    QueryOptions,
    QueryResult,
    RankedResult,
)

__version__ = "0.1.0"

__all__ = [
    "ClientInitializationError",
    "ClientState",
    "CollectionHandle",
    "DeleteOptions",
    "Document",
    "DuplicateIdError",
    "EmbeddingError",
    "EmbeddingFunction",
    "GetOptions",
    "Include",
    "InvalidCollectionError",
    "LangChainEmbeddingFunction",
    "LengthMismatchError",
    "MissingContentError",
    "NoOpEmbeddingFunction",
    "OllamaEmbeddingFunction",
    "ParallelArrays",
    "QueryDoc",
    "QueryOptions",
    "QueryResult",
    "RankedResult",
    "StoreConnectionError",
    "StoreServerError",
    "UnauthorizedError",
    "ValidationError",
    "VectorClientException",
    "VectorStoreClient",
]
