"""
Test suite for the record/column document codec.

Covers encoding with duplicate detection and decoding with length validation.

System role: Verification of write-path and read-path marshalling
"""

import pytest

from vectordb_client.core.documents import (
    docs_to_parallel_arrays,
    parallel_arrays_to_docs,
    validate_ids,
)
from vectordb_client.core.exceptions import (
    DuplicateIdError,
    LengthMismatchError,
    ValidationError,
)
from vectordb_client.models import Document, ParallelArrays


class TestDocsToParallelArrays:
    """Test suite for docs_to_parallel_arrays."""

    def test_encode_contents_only_documents(self) -> None:
        """Absent fields become per-element None, not absent columns."""
        # Arrange
        docs = [Document(id="doc1", contents="doc1"), Document(id="doc2", contents="doc2")]

        # Act
        arrays = docs_to_parallel_arrays(docs)

        # Assert
        assert arrays.ids == ["doc1", "doc2"]
        assert arrays.documents == ["doc1", "doc2"]
        assert arrays.embeddings == [None, None]
        assert arrays.metadatas == [None, None]

    def test_encode_preserves_order_and_fields(self) -> None:
        """Every field lands at the same index as its id."""
        docs = [
            Document(id="b", embedding=[1.0, 2.0], metadata={"k": 1}),
            Document(id="a", contents="text", metadata={"flag": True}),
        ]

        arrays = docs_to_parallel_arrays(docs)

        assert arrays.ids == ["b", "a"]
        assert arrays.embeddings == [[1.0, 2.0], None]
        assert arrays.documents == [None, "text"]
        assert arrays.metadatas == [{"k": 1}, {"flag": True}]

    def test_encode_duplicate_ids_raises(self) -> None:
        """A repeated id rejects the whole batch and is named in the error."""
        docs = [
            Document(id="a", contents="x"),
            Document(id="b", contents="y"),
            Document(id="a", contents="z"),
        ]

        with pytest.raises(DuplicateIdError) as exc_info:
            docs_to_parallel_arrays(docs)

        assert exc_info.value.duplicate_ids == ["a"]
        assert "Duplicate ids found: a" in str(exc_info.value)

    def test_encode_names_every_duplicate(self) -> None:
        """Duplicates after the first one are still reported."""
        docs = [
            Document(id="a", contents="1"),
            Document(id="a", contents="2"),
            Document(id="c", contents="3"),
            Document(id="b", contents="4"),
            Document(id="b", contents="5"),
            Document(id="a", contents="6"),
        ]

        with pytest.raises(DuplicateIdError) as exc_info:
            docs_to_parallel_arrays(docs)

        assert exc_info.value.duplicate_ids == ["a", "b"]

    def test_encode_missing_id_raises(self) -> None:
        """Write documents must carry an id."""
        with pytest.raises(ValidationError) as exc_info:
            docs_to_parallel_arrays([Document(id="a", contents="x"), Document(contents="y")])

        assert exc_info.value.details["position"] == 1

    def test_encode_empty_batch(self) -> None:
        arrays = docs_to_parallel_arrays([])

        assert arrays.ids == []
        assert arrays.embeddings == []


class TestValidateIds:
    """Test suite for validate_ids."""

    def test_unique_ids_pass(self) -> None:
        assert validate_ids([Document(id="a"), Document(id="b")]) is None

    def test_needs_no_contents_or_embeddings(self) -> None:
        """Only ids are inspected, so it can run before embeddings exist."""
        with pytest.raises(DuplicateIdError) as exc_info:
            validate_ids([Document(id="x"), Document(id="y"), Document(id="x"), Document(id="y")])

        assert exc_info.value.duplicate_ids == ["x", "y"]


class TestParallelArraysToDocs:
    """Test suite for parallel_arrays_to_docs."""

    def test_decode_absent_columns_yield_none_fields(self) -> None:
        """Columns that were not returned leave the field unset."""
        docs = parallel_arrays_to_docs(ParallelArrays(ids=["x", "y"], documents=["a", None]))

        assert docs == [
            Document(id="x", contents="a"),
            Document(id="y"),
        ]

    def test_decode_length_mismatch_raises(self) -> None:
        """An embeddings column shorter than ids is rejected."""
        with pytest.raises(LengthMismatchError) as exc_info:
            parallel_arrays_to_docs(ParallelArrays(ids=["x", "y"], embeddings=[[1, 2, 3]]))

        assert exc_info.value.lengths == {"ids": 2, "embeddings": 1}

    @pytest.mark.parametrize("column", ["documents", "metadatas"])
    def test_decode_other_columns_checked(self, column: str) -> None:
        values = {"documents": ["a"], "metadatas": [{"k": "v"}]}[column]

        with pytest.raises(LengthMismatchError):
            parallel_arrays_to_docs(ParallelArrays(ids=["x", "y"], **{column: values}))

    def test_decode_round_trip(self) -> None:
        """Decoding an encoded batch returns the original documents."""
        docs = [
            Document(id="1", embedding=[0.1, 0.2], contents="one", metadata={"n": 1}),
            Document(id="2", contents="two"),
            Document(id="3", embedding=[0.5, 0.5], metadata={"tag": "x", "ok": False}),
        ]

        assert parallel_arrays_to_docs(docs_to_parallel_arrays(docs)) == docs
