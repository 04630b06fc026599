"""
Document domain models.

Record-oriented documents, the column-oriented wire form, and query documents.

Dependencies: pydantic
System role: Document data structures shared by the codec, resolver and query layer
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

MetadataValue = str | int | float | bool
Metadata = dict[str, MetadataValue]
Embedding = list[float]


class Document(BaseModel):
    """Document record carrying all of its fields together."""

    model_config = ConfigDict(frozen=True)

    id: str | None = Field(default=None, description="Document identifier (required for writes)")
    embedding: Embedding | None = Field(default=None, description="Embedding vector")
    metadata: Metadata | None = Field(default=None, description="Scalar metadata values")
    contents: str | None = Field(default=None, description="Document text contents")


class QueryDoc(BaseModel):
    """
    Document used to query a collection.

    Carries an embedding, contents, or both. Never has an identifier.
    """

    model_config = ConfigDict(frozen=True)

    embedding: Embedding | None = Field(default=None, description="Query embedding vector")
    contents: str | None = Field(default=None, description="Query text")
    metadata: Metadata | None = Field(default=None, description="Optional caller metadata")

    @model_validator(mode="after")
    def _require_embedding_or_contents(self) -> "QueryDoc":
        if self.embedding is None and self.contents is None:
            raise ValueError("QueryDoc requires an embedding or contents")
        return self

    @property
    def kind(self) -> Literal["embedding", "contents"]:
        """Variant tag: embedding-carrying or contents-carrying."""
        return "embedding" if self.embedding is not None else "contents"


class ParallelArrays(BaseModel):
    """
    Column-oriented document batch.

    Every present optional column is index-aligned with ids. A column set to
    None means the field was not provided, which differs from a column of
    per-element Nones.
    """

    ids: list[str] = Field(description="Document ids, defines the batch length")
    embeddings: list[Embedding | None] | None = Field(default=None)
    documents: list[str | None] | None = Field(default=None, description="Contents column")
    metadatas: list[Metadata | None] | None = Field(default=None)

    def to_payload(self) -> dict:
        """Wire body for add/upsert/update requests."""
        return self.model_dump()


class RankedResult(BaseModel):
    """Retrieved document paired with its distance from the query."""

    doc: Document = Field(description="Reconstructed neighbour document")
    distance: float = Field(default=0.0, description="Server-computed distance")


class QueryResult(BaseModel):
    """Ranked neighbours for one query, in server order."""

    query_doc: QueryDoc = Field(description="Normalized query that produced these results")
    results: list[RankedResult] = Field(default_factory=list)
