"""
Application layer.

Client facade orchestrating the core codec, embedding resolution and transport.
"""

from vectordb_client.application.client import ClientState, VectorStoreClient

__all__ = ["ClientState", "VectorStoreClient"]
