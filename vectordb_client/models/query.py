"""
Request option models.

Filter grammars, include flags and option bundles for get, delete and query calls.
Filters are passed to the server verbatim and never interpreted client-side.

Dependencies: pydantic
System role: Type definitions for read-side request parameters
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

# {"field": literal} or {"field": {"$gt": 1}} or {"$and": [Where, ...]}
Where = dict[str, Any]
# {"$contains": "text"} or {"$or": [WhereDocument, ...]}
WhereDocument = dict[str, Any]


class Include(str, Enum):
    """Fields the server may return alongside ids."""

    DOCUMENTS = "documents"
    EMBEDDINGS = "embeddings"
    METADATAS = "metadatas"
    DISTANCES = "distances"


class QueryOptions(BaseModel):
    """Options for a similarity query."""

    n_results: int = Field(default=10, ge=1, description="Neighbours to return per query")
    where: Where | None = Field(default=None, description="Metadata filter")
    where_document: WhereDocument | None = Field(default=None, description="Contents filter")
    include: list[Include] | None = Field(default=None, description="Fields to return")


class GetOptions(BaseModel):
    """Options for fetching documents by id or filter."""

    ids: list[str] | None = Field(default=None, description="Ids to fetch")
    where: Where | None = Field(default=None)
    limit: int | None = Field(default=None, ge=1)
    offset: int | None = Field(default=None, ge=0)
    include: list[Include] | None = Field(default=None)
    where_document: WhereDocument | None = Field(default=None)


class DeleteOptions(BaseModel):
    """Options selecting documents to delete."""

    ids: list[str] | None = Field(default=None)
    where: Where | None = Field(default=None)
    where_document: WhereDocument | None = Field(default=None)
