"""
HTTP boundary.

JSON transport and authentication headers for the vector store API.
"""

from vectordb_client.boundary.http.auth import build_auth_headers
from vectordb_client.boundary.http.transport import ApiTransport

__all__ = ["ApiTransport", "build_auth_headers"]
