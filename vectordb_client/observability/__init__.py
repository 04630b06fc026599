"""
Observability module.

Provides logging configuration and safe structured logging helpers.
"""

from vectordb_client.observability.logger import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
