"""
Domain models.

Pydantic models for documents, query options and collection handles.
"""

from vectordb_client.models.collection import CollectionHandle
from vectordb_client.models.document import (
    Document,
    Embedding,
    Metadata,
    ParallelArrays,
    QueryDoc,
    QueryResult,
    RankedResult,
)
from vectordb_client.models.query import (
    DeleteOptions,
    GetOptions,
    Include,
    QueryOptions,
    Where,
    WhereDocument,
)

__all__ = [
    "CollectionHandle",
    "DeleteOptions",
    "Document",
    "Embedding",
    "GetOptions",
    "Include",
    "Metadata",
    "ParallelArrays",
    "QueryDoc",
    "QueryOptions",
    "QueryResult",
    "RankedResult",
    "Where",
    "WhereDocument",
]
