"""
Collection handle model.

Immutable reference to a server-side collection and its embedding function.

Dependencies: pydantic
System role: Context value threaded through document and query operations
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from vectordb_client.boundary.embeddings.base import EmbeddingFunction

_UNSET: Any = object()


class CollectionHandle(BaseModel):
    """Collection reference returned by the collection calls."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str = Field(description="Collection name")
    id: str = Field(description="Server-assigned collection id")
    metadata: dict[str, Any] | None = Field(default=None, description="Collection metadata")
    embedding_function: EmbeddingFunction = Field(
        description="Capability used to embed documents lacking a vector",
        exclude=True,
    )

    def with_changes(
        self,
        name: str | None = None,
        metadata: Any = _UNSET,
    ) -> "CollectionHandle":
        """
        Return a new handle with the given name and/or metadata replaced.

        Omitting ``metadata`` keeps the current value; ``metadata=None`` clears it.
        """
        update: dict[str, Any] = {}
        if name is not None:
            update["name"] = name
        if metadata is not _UNSET:
            update["metadata"] = metadata
        return self.model_copy(update=update)
