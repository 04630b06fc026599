"""
Exception hierarchy for the vector store client.

Provides layered exception structure for marshalling, embedding and transport errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the client
"""

from typing import Any


class VectorClientException(Exception):
    """Base exception for all vector store client errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging

        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(VectorClientException):
    """Raised when caller input is invalid."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class DuplicateIdError(VectorClientException):
    """Raised when a write batch repeats one or more document ids."""

    def __init__(self, duplicate_ids: list[str], details: dict[str, Any] | None = None) -> None:
        """
        Initialize duplicate id error.

        Args:
            duplicate_ids: Every id seen more than once, in first-seen order
            details: Additional context
        """
        self.duplicate_ids = list(duplicate_ids)
        details = details or {}
        details["duplicate_ids"] = self.duplicate_ids
        super().__init__(f"Duplicate ids found: {', '.join(self.duplicate_ids)}", details)


class LengthMismatchError(VectorClientException):
    """Raised when a parallel array disagrees in length with the ids array."""

    def __init__(self, lengths: dict[str, int], details: dict[str, Any] | None = None) -> None:
        """
        Initialize length mismatch error.

        Args:
            lengths: Length of every present column, keyed by wire name
            details: Additional context
        """
        self.lengths = dict(lengths)
        details = details or {}
        details["lengths"] = self.lengths
        super().__init__(
            "ids, embeddings, metadatas, and documents must all be the same length",
            details,
        )


class MissingContentError(VectorClientException):
    """Raised when documents have neither contents nor an embedding."""

    def __init__(self, document_ids: list[str], details: dict[str, Any] | None = None) -> None:
        """
        Initialize missing content error.

        Args:
            document_ids: Ids (or positional labels) of the offending documents
            details: Additional context
        """
        self.document_ids = list(document_ids)
        details = details or {}
        details["document_ids"] = self.document_ids
        super().__init__(
            "The following documents have neither contents nor embeddings: "
            + ", ".join(self.document_ids),
            details,
        )


class EmbeddingError(VectorClientException):
    """Raised when embedding generation fails or breaks its length contract."""

    pass


class StoreConnectionError(VectorClientException):
    """Raised when the vector store cannot be reached."""

    def __init__(
        self,
        message: str,
        url: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize connection error.

        Args:
            message: Error message
            url: URL that could not be reached
            details: Additional context
        """
        details = details or {}
        if url:
            details["url"] = url
        super().__init__(message, details)


class StoreServerError(VectorClientException):
    """Raised when the vector store answers with a non-success status."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize server error.

        Args:
            message: Server-provided error message, surfaced verbatim
            status_code: HTTP status code of the response
            details: Additional context
        """
        self.status_code = status_code
        details = details or {}
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(message, details)


class UnauthorizedError(StoreServerError):
    """Raised when the vector store rejects the client's credentials."""

    pass


class InvalidCollectionError(StoreServerError):
    """Raised when the server reports that a referenced collection does not exist."""

    pass


class ClientInitializationError(VectorClientException):
    """Raised on every call once client initialization has failed."""

    pass
