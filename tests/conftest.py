"""
Shared test fixtures and configuration for entire test suite.

Provides: recording embedding function, collection handles, settings,
and a VectorStoreClient wired to an in-process httpx.MockTransport
Dependencies: pytest, httpx
System role: Test infrastructure and fixture management
"""

import json
from collections.abc import Callable

import httpx
import pytest

from vectordb_client.application.client import VectorStoreClient
from vectordb_client.boundary.embeddings.base import EmbeddingFunction
from vectordb_client.boundary.http.transport import ApiTransport
from vectordb_client.configs import ClientSettings
from vectordb_client.models import CollectionHandle

API = "http://testserver/api/v1"


class RecordingEmbeddingFunction(EmbeddingFunction):
    """Deterministic embedding function that records every call."""

    def __init__(self) -> None:
        self.calls: list[list[str]] = []

    async def generate(self, texts: list[str]) -> list[list[float]]:
        self.calls.append(list(texts))
        return [[float(len(text)), 1.0, 0.0] for text in texts]


class ServerStub:
    """
    Minimal in-process vector store.

    Routes are registered as (method, path) -> handler returning
    (status_code, json_body). Every request is recorded.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.routes: dict[tuple[str, str], Callable[[httpx.Request], tuple[int, object]]] = {
            ("GET", "/tenants/default_tenant"): lambda r: (200, {"name": "default_tenant"}),
            ("GET", "/databases/default_database"): lambda r: (
                200,
                {"name": "default_database", "tenant": "default_tenant"},
            ),
        }

    def on(self, method: str, path: str, status: int = 200, body: object = None) -> None:
        self.routes[(method, path)] = lambda r: (status, body)

    def bodies(self, method: str, path: str) -> list[dict]:
        return [
            json.loads(r.content)
            for r in self.requests
            if r.method == method and r.url.path == f"/api/v1{path}"
        ]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix("/api/v1")
        route = self.routes.get((request.method, path))
        if route is None:
            return httpx.Response(404, json={"error": "NotFound", "message": f"No route {path}"})
        status, body = route(request)
        return httpx.Response(status, json=body)


@pytest.fixture
def embedding_function() -> RecordingEmbeddingFunction:
    """Provide recording embedding function."""
    return RecordingEmbeddingFunction()


@pytest.fixture
def collection(embedding_function: RecordingEmbeddingFunction) -> CollectionHandle:
    """Provide collection handle bound to the recording embedding function."""
    return CollectionHandle(
        name="test",
        id="c0ffee00-0000-0000-0000-000000000001",
        metadata={"description": "test collection"},
        embedding_function=embedding_function,
    )


@pytest.fixture
def client_settings() -> ClientSettings:
    """Provide client settings pointing at the stub server."""
    return ClientSettings(base_url="http://testserver")


@pytest.fixture
def server() -> ServerStub:
    """Provide in-process server stub."""
    return ServerStub()


@pytest.fixture
async def client(
    server: ServerStub,
    client_settings: ClientSettings,
    embedding_function: RecordingEmbeddingFunction,
):
    """
    Create VectorStoreClient backed by the server stub.

    Yields:
        VectorStoreClient: Client with a MockTransport-backed httpx client
    """
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(server.handler))
    transport = ApiTransport(client_settings, client=http_client)
    vector_client = VectorStoreClient(
        settings=client_settings,
        transport=transport,
        default_embedding_function=embedding_function,
    )
    yield vector_client
    await http_client.aclose()
