"""
Vector store HTTP transport.

Sends JSON requests to the versioned API and maps failures onto the client
exception hierarchy. Performs no retries.

Dependencies: httpx, vectordb_client.configs, vectordb_client.core.exceptions
System role: Low-level request/response channel to the vector store
"""

import logging
import re
from typing import Any

import httpx

from vectordb_client.boundary.http.auth import build_auth_headers
from vectordb_client.configs import ClientSettings
from vectordb_client.core.exceptions import (
    InvalidCollectionError,
    StoreConnectionError,
    StoreServerError,
    UnauthorizedError,
)

logger = logging.getLogger(__name__)

_MISSING_COLLECTION = re.compile(r"collection .* does not exist", re.IGNORECASE)


def _drop_none(values: dict[str, Any] | None) -> dict[str, Any] | None:
    if values is None:
        return None
    return {key: value for key, value in values.items() if value is not None}


def _error_from_response(response: httpx.Response) -> StoreServerError:
    """Classify a non-success response."""
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        error_name = str(body.get("error") or "")
        message = str(body.get("message") or body.get("error") or response.text)
    else:
        error_name = ""
        message = response.text or response.reason_phrase

    details = {"url": str(response.request.url)}
    if error_name:
        details["error"] = error_name

    if response.status_code in (401, 403):
        return UnauthorizedError(message, status_code=response.status_code, details=details)
    if error_name.startswith("InvalidCollection") or _MISSING_COLLECTION.search(message):
        return InvalidCollectionError(message, status_code=response.status_code, details=details)
    return StoreServerError(message, status_code=response.status_code, details=details)


class ApiTransport:
    """
    JSON transport over httpx.AsyncClient.

    Owns the HTTP client unless one is passed in.
    """

    def __init__(
        self,
        settings: ClientSettings,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize transport.

        Args:
            settings: Connection settings
            client: Optional preconfigured AsyncClient (caller keeps ownership)
        """
        self.settings = settings
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(
                settings.read_timeout,
                connect=settings.connect_timeout,
            ),
        )
        self._headers = {"Content-Type": "application/json", **build_auth_headers(settings)}

    async def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> Any:
        """
        Send one API request.

        Args:
            method: HTTP method
            path: Path under the API root, starting with "/"
            params: Query parameters (None values dropped)
            json: Request body (top-level None values dropped)

        Returns:
            Any: Decoded JSON body, or None for an empty body

        Raises:
            StoreConnectionError: If the server cannot be reached
            StoreServerError: If the server answers with a non-success status
        """
        url = f"{self.settings.api_url}{path}"
        logger.debug(f"{__name__}:request - {method} {url}")
        try:
            response = await self._client.request(
                method,
                url,
                params=_drop_none(params),
                json=_drop_none(json),
                headers=self._headers,
            )
        except httpx.TransportError as e:
            logger.error(f"{__name__}:request - {method} {url} failed: {type(e).__name__}: {e}")
            raise StoreConnectionError(
                f"Failed to connect to vector store: {e}", url=url
            ) from e

        if response.is_error:
            error = _error_from_response(response)
            logger.warning(
                f"{__name__}:request - {method} {url} returned {response.status_code}: {error.message}"
            )
            raise error

        if not response.content:
            return None
        return response.json()

    async def aclose(self) -> None:
        """Close the HTTP client if this transport created it."""
        if self._owns_client:
            await self._client.aclose()
