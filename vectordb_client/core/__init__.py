"""
Core marshalling and query orchestration module.

Contains the record/column codec, embedding resolution, query normalization
and the exception hierarchy.
"""

from vectordb_client.core.exceptions import (
    VectorClientException,
    ValidationError,
    DuplicateIdError,
    LengthMismatchError,
    MissingContentError,
    EmbeddingError,
    StoreConnectionError,
    StoreServerError,
    UnauthorizedError,
    InvalidCollectionError,
    ClientInitializationError,
)

__all__ = [
    # Exceptions
    "VectorClientException",
    "ValidationError",
    "DuplicateIdError",
    "LengthMismatchError",
    "MissingContentError",
    "EmbeddingError",
    "StoreConnectionError",
    "StoreServerError",
    "UnauthorizedError",
    "InvalidCollectionError",
    "ClientInitializationError",
]
