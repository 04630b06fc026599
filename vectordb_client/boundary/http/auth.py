"""
Token authentication headers.

Dependencies: vectordb_client.configs
System role: Header injection for authenticated servers
"""

from vectordb_client.configs import ClientSettings


def build_auth_headers(settings: ClientSettings) -> dict[str, str]:
    """
    Build the authentication header for the configured token.

    Args:
        settings: Client settings carrying the token and header type

    Returns:
        dict[str, str]: Header mapping, empty when no token is configured
    """
    if not settings.auth_token:
        return {}
    if settings.auth_header_type == "x_chroma_token":
        return {"X-Chroma-Token": settings.auth_token}
    return {"Authorization": f"Bearer {settings.auth_token}"}
