"""
Vector store client configuration settings.

Manages server location, tenancy, timeouts and token authentication.

Dependencies: pydantic, pydantic_settings
System role: Connection configuration for the HTTP transport
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from vectordb_client.configs.base import BaseSettings


class ClientSettings(BaseSettings):
    """Remote vector store connection configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="VECTORDB_",
        case_sensitive=False,
        extra="ignore",
    )

    base_url: str = Field(default="http://localhost:8000", description="Server base URL")
    tenant: str = Field(default="default_tenant", description="Tenant name")
    database: str = Field(default="default_database", description="Database name")

    connect_timeout: float = Field(default=10.0, description="Connect timeout in seconds")
    read_timeout: float = Field(default=60.0, description="Read/write timeout in seconds")

    auth_token: str | None = Field(default=None, description="Static API token")
    auth_header_type: Literal["authorization", "x_chroma_token"] = Field(
        default="authorization",
        description="Header carrying the token: 'authorization' (Bearer) or 'x_chroma_token'",
    )

    default_n_results: int = Field(
        default=10,
        ge=1,
        description="Neighbours per query when the caller does not specify",
    )

    @property
    def api_url(self) -> str:
        """
        Versioned API root.

        Returns:
            str: Base URL joined with the API prefix
        """
        return f"{self.base_url.rstrip('/')}/api/v1"
