"""
Vector store client.

Coordinates collection management, document writes, reads and similarity
queries against the remote vector store.

Dependencies: vectordb_client.boundary, vectordb_client.core, vectordb_client.models
System role: Public client facade
"""

import asyncio
import logging
from collections.abc import Sequence
from enum import Enum
from typing import Any

from vectordb_client.boundary.embeddings import EmbeddingFunction, get_embedding_function
from vectordb_client.boundary.http import ApiTransport
from vectordb_client.configs import ClientSettings, get_settings
from vectordb_client.core.documents import (
    docs_to_parallel_arrays,
    parallel_arrays_to_docs,
    validate_ids,
)
from vectordb_client.core.embedding_resolver import compute_embeddings
from vectordb_client.core.exceptions import (
    ClientInitializationError,
    StoreServerError,
    VectorClientException,
)
from vectordb_client.core.query_normalizer import (
    DocQuery,
    build_query_results,
    is_batch_query,
    normalize_query,
)
from vectordb_client.models import (
    CollectionHandle,
    DeleteOptions,
    Document,
    GetOptions,
    ParallelArrays,
    QueryOptions,
    QueryResult,
)
from vectordb_client.observability.log_utils import log_exception_with_context, log_with_context

logger = logging.getLogger(__name__)


class ClientState(str, Enum):
    """Readiness of a client instance."""

    UNINITIALIZED = "uninitialized"
    READY = "ready"
    FAILED = "failed"


class VectorStoreClient:
    """
    Async client for a remote vector store.

    Every public call first waits for a one-time tenant/database check.
    If that check fails the client stays failed and every later call raises
    ClientInitializationError.
    """

    def __init__(
        self,
        settings: ClientSettings | None = None,
        transport: ApiTransport | None = None,
        default_embedding_function: EmbeddingFunction | None = None,
    ) -> None:
        """
        Initialize client.

        Args:
            settings: Optional connection settings (global settings if None)
            transport: Optional transport (created from settings if None)
            default_embedding_function: Capability for collections opened
                without one (configured provider if None)
        """
        self.settings = settings or get_settings().client
        self._transport = transport
        self._default_embedding_function = default_embedding_function
        self._owns_embedding_function = default_embedding_function is None
        self._state = ClientState.UNINITIALIZED
        self._init_error: Exception | None = None
        self._init_lock = asyncio.Lock()

    @property
    def transport(self) -> ApiTransport:
        """Lazy-load transport to avoid creating an HTTP client until first use."""
        if self._transport is None:
            self._transport = ApiTransport(self.settings)
        return self._transport

    @property
    def default_embedding_function(self) -> EmbeddingFunction:
        """Lazy-load default embedding function from configuration."""
        if self._default_embedding_function is None:
            self._default_embedding_function = get_embedding_function()
        return self._default_embedding_function

    @property
    def state(self) -> ClientState:
        return self._state

    @property
    def _scope(self) -> dict[str, str]:
        return {"tenant": self.settings.tenant, "database": self.settings.database}

    async def __aenter__(self) -> "VectorStoreClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Release the HTTP client and the configured embedding function."""
        if self._transport is not None:
            await self._transport.aclose()
        if self._owns_embedding_function and self._default_embedding_function is not None:
            await self._default_embedding_function.aclose()

    async def _initialize(self) -> None:
        """Verify that the configured tenant and database exist."""
        await self.transport.request("GET", f"/tenants/{self.settings.tenant}")
        await self.transport.request(
            "GET",
            f"/databases/{self.settings.database}",
            params={"tenant": self.settings.tenant},
        )

    async def _ensure_ready(self) -> None:
        if self._state is ClientState.READY:
            return

        async with self._init_lock:
            if self._state is ClientState.UNINITIALIZED:
                try:
                    await self._initialize()
                except Exception as e:
                    self._state = ClientState.FAILED
                    self._init_error = e
                    log_exception_with_context(
                        logger,
                        f"{__name__}:_ensure_ready - Client initialization failed",
                        e,
                        tenant=self.settings.tenant,
                        database=self.settings.database,
                    )
                else:
                    self._state = ClientState.READY
                    logger.info(
                        f"{__name__}:_ensure_ready - Connected to {self.settings.base_url} "
                        f"(tenant={self.settings.tenant}, database={self.settings.database})"
                    )

        if self._state is ClientState.FAILED:
            raise ClientInitializationError(
                "Vector store client failed to initialize",
                details={"error": str(self._init_error)},
            ) from self._init_error

    # ---------- server ----------

    async def heartbeat(self) -> int:
        """
        Check server liveness.

        Returns:
            int: Server clock in nanoseconds
        """
        await self._ensure_ready()
        response = await self.transport.request("GET", "/heartbeat")
        return response["nanosecond heartbeat"]

    async def version(self) -> str:
        """Return the server version string."""
        await self._ensure_ready()
        return await self.transport.request("GET", "/version")

    async def reset(self) -> bool:
        """Reset all server state. Only honoured by servers that allow resets."""
        await self._ensure_ready()
        return bool(await self.transport.request("POST", "/reset"))

    # ---------- collections ----------

    def _to_handle(
        self,
        data: dict[str, Any],
        embedding_function: EmbeddingFunction | None,
    ) -> CollectionHandle:
        if data.get("error"):
            raise StoreServerError(str(data["error"]))
        return CollectionHandle(
            name=data["name"],
            id=data["id"],
            metadata=data.get("metadata"),
            embedding_function=embedding_function or self.default_embedding_function,
        )

    async def create_collection(
        self,
        name: str,
        metadata: dict[str, Any] | None = None,
        embedding_function: EmbeddingFunction | None = None,
        get_or_create: bool = False,
    ) -> CollectionHandle:
        """
        Create a collection.

        Args:
            name: Collection name
            metadata: Optional collection metadata
            embedding_function: Capability bound to the returned handle
                (client default if None)
            get_or_create: Return the existing collection instead of failing

        Returns:
            CollectionHandle: Handle for the created or existing collection

        Raises:
            StoreServerError: If the server rejects the request
        """
        await self._ensure_ready()
        data = await self.transport.request(
            "POST",
            "/collections",
            params=self._scope,
            json={"name": name, "metadata": metadata, "get_or_create": get_or_create},
        )
        handle = self._to_handle(data, embedding_function)
        logger.info(f"{__name__}:create_collection - Collection '{handle.name}' id={handle.id}")
        return handle

    async def get_or_create_collection(
        self,
        name: str,
        metadata: dict[str, Any] | None = None,
        embedding_function: EmbeddingFunction | None = None,
    ) -> CollectionHandle:
        """Return the named collection, creating it when missing."""
        return await self.create_collection(
            name,
            metadata=metadata,
            embedding_function=embedding_function,
            get_or_create=True,
        )

    async def get_collection(
        self,
        name: str,
        embedding_function: EmbeddingFunction | None = None,
    ) -> CollectionHandle:
        """
        Fetch an existing collection by name.

        Raises:
            InvalidCollectionError: If the collection does not exist
        """
        await self._ensure_ready()
        data = await self.transport.request("GET", f"/collections/{name}", params=self._scope)
        return self._to_handle(data, embedding_function)

    async def list_collections(
        self,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[CollectionHandle]:
        """List collections, bound to the default embedding function."""
        await self._ensure_ready()
        data = await self.transport.request(
            "GET",
            "/collections",
            params={"limit": limit, "offset": offset, **self._scope},
        )
        return [self._to_handle(item, None) for item in data or []]

    async def count_collections(self) -> int:
        await self._ensure_ready()
        return await self.transport.request("GET", "/count_collections", params=self._scope)

    async def update_collection(
        self,
        collection: CollectionHandle,
        name: str | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> CollectionHandle:
        """
        Rename a collection and/or replace its metadata.

        The given handle is left untouched. ``None`` leaves a field unchanged;
        pass ``{}`` to clear the metadata.

        Returns:
            CollectionHandle: New handle reflecting the update
        """
        await self._ensure_ready()
        await self.transport.request(
            "PUT",
            f"/collections/{collection.id}",
            json={"new_name": name, "new_metadata": metadata},
        )
        if metadata is None:
            return collection.with_changes(name=name)
        return collection.with_changes(name=name, metadata=metadata)

    async def delete_collection(self, name: str) -> None:
        await self._ensure_ready()
        await self.transport.request("DELETE", f"/collections/{name}", params=self._scope)
        logger.info(f"{__name__}:delete_collection - Deleted collection '{name}'")

    # ---------- documents ----------

    async def _write_documents(
        self,
        operation: str,
        collection: CollectionHandle,
        documents: Sequence[Document],
    ) -> Any:
        await self._ensure_ready()
        try:
            validate_ids(documents)
            resolved = await compute_embeddings(documents, collection.embedding_function)
            arrays = docs_to_parallel_arrays(resolved)
            response = await self.transport.request(
                "POST",
                f"/collections/{collection.id}/{operation}",
                json=arrays.to_payload(),
            )
        except VectorClientException as e:
            log_exception_with_context(
                logger,
                f"{__name__}:{operation}_documents - Write failed",
                e,
                collection_name=collection.name,
                document_count=len(documents),
            )
            raise

        log_with_context(
            logger,
            logging.INFO,
            f"{__name__}:{operation}_documents - Wrote {len(documents)} documents "
            f"to '{collection.name}'",
            collection_id=collection.id,
            ids=arrays.ids,
        )
        return response

    async def add_documents(
        self,
        collection: CollectionHandle,
        documents: Sequence[Document],
    ) -> Any:
        """
        Add documents to a collection.

        Missing embeddings are generated with the collection's embedding function.

        Args:
            collection: Target collection
            documents: Documents with unique ids

        Returns:
            Any: Server acknowledgement

        Raises:
            DuplicateIdError: If ids repeat within the batch
            MissingContentError: If a document has neither contents nor embedding
            InvalidCollectionError: If the collection no longer exists
        """
        return await self._write_documents("add", collection, documents)

    async def upsert_documents(
        self,
        collection: CollectionHandle,
        documents: Sequence[Document],
    ) -> Any:
        """Insert documents or overwrite those whose ids already exist."""
        return await self._write_documents("upsert", collection, documents)

    async def get_documents(
        self,
        collection: CollectionHandle,
        options: GetOptions | None = None,
    ) -> list[Document]:
        """
        Fetch documents by id and/or filter.

        Args:
            collection: Collection to read
            options: Ids, filters, paging and include flags

        Returns:
            list[Document]: Documents in server order; fields not included are None

        Raises:
            LengthMismatchError: If the response columns disagree in length
        """
        await self._ensure_ready()
        options = options or GetOptions()
        response = await self.transport.request(
            "POST",
            f"/collections/{collection.id}/get",
            json=options.model_dump(mode="json"),
        )
        if response.get("error"):
            raise StoreServerError(str(response["error"]))

        return parallel_arrays_to_docs(
            ParallelArrays(
                ids=response["ids"],
                embeddings=response.get("embeddings"),
                documents=response.get("documents"),
                metadatas=response.get("metadatas"),
            )
        )

    async def delete_documents(
        self,
        collection: CollectionHandle,
        options: DeleteOptions,
    ) -> list[str]:
        """
        Delete documents by id and/or filter.

        Returns:
            list[str]: Ids the server reports as deleted
        """
        await self._ensure_ready()
        response = await self.transport.request(
            "POST",
            f"/collections/{collection.id}/delete",
            json=options.model_dump(mode="json"),
        )
        return response or []

    async def count_documents(self, collection: CollectionHandle) -> int:
        await self._ensure_ready()
        return await self.transport.request("GET", f"/collections/{collection.id}/count")

    async def query_documents(
        self,
        collection: CollectionHandle,
        query: DocQuery | Sequence[DocQuery],
        options: QueryOptions | None = None,
    ) -> QueryResult | list[QueryResult]:
        """
        Find nearest neighbours for one query or a batch of queries.

        All queries are embedded with one embedding call and sent in one
        request. The result mirrors the input: a single query returns one
        QueryResult, a list of queries returns a list in the same order.

        Args:
            collection: Collection to search
            query: Text, raw vector, QueryDoc, or a list of those
            options: Result count, filters and include flags

        Returns:
            QueryResult | list[QueryResult]: Ranked neighbours per query

        Raises:
            ValidationError: If a query has an unsupported shape
            InvalidCollectionError: If the collection no longer exists
        """
        await self._ensure_ready()
        options = options or QueryOptions(n_results=self.settings.default_n_results)

        batch = is_batch_query(query)
        raw_queries = list(query) if batch else [query]
        if not raw_queries:
            return []

        try:
            query_docs = [normalize_query(q) for q in raw_queries]
            resolved = await compute_embeddings(query_docs, collection.embedding_function)
            body = options.model_dump(mode="json")
            body["query_embeddings"] = [doc.embedding for doc in resolved]
            response = await self.transport.request(
                "POST",
                f"/collections/{collection.id}/query",
                json=body,
            )
            results = build_query_results(resolved, response)
        except VectorClientException as e:
            log_exception_with_context(
                logger,
                f"{__name__}:query_documents - Query failed",
                e,
                collection_name=collection.name,
                query_count=len(raw_queries),
            )
            raise

        log_with_context(
            logger,
            logging.DEBUG,
            f"{__name__}:query_documents - {len(results)} queries against '{collection.name}'",
            collection_id=collection.id,
            n_results=options.n_results,
            where=options.where,
        )
        return results if batch else results[0]
