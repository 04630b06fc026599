"""
Record/column document codec.

Converts between document records and the parallel-array form used on the wire.

Dependencies: vectordb_client.models, vectordb_client.core.exceptions
System role: Write-path encoding and read-path decoding of document batches
"""

from collections.abc import Sequence

from vectordb_client.core.exceptions import (
    DuplicateIdError,
    LengthMismatchError,
    ValidationError,
)
from vectordb_client.models.document import Document, ParallelArrays


def validate_ids(documents: Sequence[Document]) -> None:
    """
    Check that every document has an id and no id repeats.

    Scans the whole batch before failing so the error names every repeated id.

    Raises:
        ValidationError: If a document has no id
        DuplicateIdError: If any id appears more than once
    """
    seen: set[str] = set()
    duplicates: dict[str, None] = {}

    for position, doc in enumerate(documents):
        if doc.id is None:
            raise ValidationError(
                "Documents written to a collection require an id",
                field="id",
                details={"position": position},
            )
        if doc.id in seen:
            duplicates[doc.id] = None
        seen.add(doc.id)

    if duplicates:
        raise DuplicateIdError(list(duplicates))


def docs_to_parallel_arrays(documents: Sequence[Document]) -> ParallelArrays:
    """
    Encode documents into index-aligned columns.

    Nothing is returned when an id is missing or repeats.

    Args:
        documents: Documents to write, each with an id

    Returns:
        ParallelArrays: Columns in input order, optional fields as per-element None

    Raises:
        ValidationError: If a document has no id
        DuplicateIdError: If any id appears more than once
    """
    validate_ids(documents)

    return ParallelArrays(
        ids=[doc.id for doc in documents],
        embeddings=[doc.embedding for doc in documents],
        documents=[doc.contents for doc in documents],
        metadatas=[doc.metadata for doc in documents],
    )


def parallel_arrays_to_docs(arrays: ParallelArrays) -> list[Document]:
    """
    Decode index-aligned columns into document records.

    Args:
        arrays: Columns returned by the server; absent columns yield None fields

    Returns:
        list[Document]: One document per id, in column order

    Raises:
        LengthMismatchError: If a present column differs in length from ids
    """
    count = len(arrays.ids)
    columns = {
        "embeddings": arrays.embeddings,
        "documents": arrays.documents,
        "metadatas": arrays.metadatas,
    }
    present = {name: len(col) for name, col in columns.items() if col is not None}
    if any(length != count for length in present.values()):
        raise LengthMismatchError({"ids": count, **present})

    return [
        Document(
            id=doc_id,
            embedding=arrays.embeddings[i] if arrays.embeddings is not None else None,
            contents=arrays.documents[i] if arrays.documents is not None else None,
            metadata=arrays.metadatas[i] if arrays.metadatas is not None else None,
        )
        for i, doc_id in enumerate(arrays.ids)
    ]
