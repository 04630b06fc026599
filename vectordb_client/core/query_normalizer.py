"""
Query normalizer.

Turns caller query shapes into query documents and fans the nested server
response back into one ranked result list per query.

Dependencies: vectordb_client.core.documents, vectordb_client.models
System role: Query fan-out preparation and fan-in reassembly
"""

from collections.abc import Sequence
from numbers import Number
from typing import Any

from vectordb_client.core.documents import parallel_arrays_to_docs
from vectordb_client.core.exceptions import LengthMismatchError, ValidationError
from vectordb_client.models.document import ParallelArrays, QueryDoc, QueryResult, RankedResult

# Free text, a raw embedding vector, or an explicit query document
DocQuery = str | Sequence[float] | QueryDoc


def _is_vector(value: Any) -> bool:
    return (
        isinstance(value, (list, tuple))
        and len(value) > 0
        and all(isinstance(x, Number) and not isinstance(x, bool) for x in value)
    )


def normalize_query(query: DocQuery) -> QueryDoc:
    """
    Convert one caller query into a QueryDoc.

    Args:
        query: Text, raw vector, or QueryDoc

    Returns:
        QueryDoc: Contents-only for text, embedding-only for vectors, unchanged otherwise

    Raises:
        ValidationError: If the value is none of the supported shapes
    """
    if isinstance(query, QueryDoc):
        return query
    if isinstance(query, str):
        return QueryDoc(contents=query)
    if _is_vector(query):
        return QueryDoc(embedding=[float(x) for x in query])
    raise ValidationError(
        "Query must be a string, an embedding vector, or a QueryDoc",
        field="query",
        details={"type": type(query).__name__},
    )


def is_batch_query(query: DocQuery | Sequence[DocQuery]) -> bool:
    """
    Check whether the caller passed a batch of queries.

    A list of numbers is a single raw-vector query; any other list or tuple,
    including an empty one, is a batch.
    """
    if not isinstance(query, (list, tuple)):
        return False
    return not _is_vector(query)


def _row(column: list | None, index: int) -> list | None:
    """Per-query slice of a nested column; a short or absent column yields None."""
    if column is None or index >= len(column):
        return None
    return column[index]


def build_query_results(
    query_docs: Sequence[QueryDoc],
    response: dict[str, Any],
) -> list[QueryResult]:
    """
    Split a batched query response into per-query result bundles.

    Args:
        query_docs: Query documents in request order
        response: Server body with nested ids, embeddings, documents,
            metadatas and distances

    Returns:
        list[QueryResult]: One bundle per query, aligned with query_docs

    Raises:
        LengthMismatchError: If the response covers a different number of queries,
            or a neighbour column disagrees with its ids
    """
    nested_ids = response.get("ids") or []
    if len(nested_ids) != len(query_docs):
        raise LengthMismatchError({"query_embeddings": len(query_docs), "ids": len(nested_ids)})

    embeddings = response.get("embeddings")
    documents = response.get("documents")
    metadatas = response.get("metadatas")
    distances = response.get("distances")

    results: list[QueryResult] = []
    for index, ids in enumerate(nested_ids):
        docs = parallel_arrays_to_docs(
            ParallelArrays(
                ids=ids,
                embeddings=_row(embeddings, index),
                documents=_row(documents, index),
                metadatas=_row(metadatas, index),
            )
        )
        row = _row(distances, index) or []
        ranked = [
            RankedResult(doc=doc, distance=row[i] if i < len(row) and row[i] is not None else 0.0)
            for i, doc in enumerate(docs)
        ]
        results.append(QueryResult(query_doc=query_docs[index], results=ranked))
    return results
