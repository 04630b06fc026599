"""
Embedding resolver.

Fills in missing embedding vectors using a collection's embedding function.

Dependencies: vectordb_client.boundary.embeddings, vectordb_client.models
System role: Embedding resolution for write and query paths
"""

import logging
from collections.abc import Sequence
from typing import TypeVar

from vectordb_client.boundary.embeddings.base import EmbeddingFunction
from vectordb_client.core.exceptions import EmbeddingError, MissingContentError
from vectordb_client.models.document import Document, QueryDoc

logger = logging.getLogger(__name__)

DocT = TypeVar("DocT", Document, QueryDoc)


def _label(doc: Document | QueryDoc, position: int) -> str:
    doc_id = getattr(doc, "id", None)
    return doc_id if doc_id is not None else f"#{position}"


async def compute_embeddings(
    documents: Sequence[DocT],
    embedding_function: EmbeddingFunction,
) -> list[DocT]:
    """
    Ensure every document carries an embedding.

    The embedding function is called at most once, with the contents of the
    documents that lack a vector. Inputs are never modified; resolved documents
    are copies placed back at their original positions.

    Args:
        documents: Documents or query documents to resolve
        embedding_function: Capability used for documents without a vector

    Returns:
        list: Documents in input order, all with embeddings

    Raises:
        MissingContentError: If a document has neither contents nor an embedding
        EmbeddingError: If the embedding function returns the wrong number of vectors
    """
    # Empty contents cannot be embedded
    empty = [
        _label(doc, i)
        for i, doc in enumerate(documents)
        if not doc.contents and doc.embedding is None
    ]
    if empty:
        raise MissingContentError(empty)

    missing = [i for i, doc in enumerate(documents) if doc.embedding is None]
    if not missing:
        return list(documents)

    texts = [documents[i].contents for i in missing]
    logger.debug(
        f"{__name__}:compute_embeddings - Generating {len(texts)} of "
        f"{len(documents)} embeddings with {type(embedding_function).__name__}"
    )
    vectors = await embedding_function.generate(texts)

    if len(vectors) != len(texts):
        raise EmbeddingError(
            "Embedding function returned a different number of vectors than texts",
            details={"expected": len(texts), "received": len(vectors)},
        )

    resolved = list(documents)
    for position, vector in zip(missing, vectors):
        resolved[position] = resolved[position].model_copy(update={"embedding": list(vector)})
    return resolved
