"""
Structured logging helpers for the vector store client.

Vectors, document batches and server payloads are summarized by shape so a
log line never carries a full embedding or document body.

Dependencies: logging (stdlib), pydantic
System role: Logging helper functions
"""

import logging
from numbers import Number
from typing import Any

from pydantic import BaseModel


def safe_log_value(value: Any, max_length: int = 500) -> str:
    """
    Render a value for a log record's extra fields.

    Args:
        value: Value to render
        max_length: Maximum length before truncating

    Returns:
        str: ``vector(dim=N)`` for numeric sequences, ``list(N items)`` for
            other sequences, ``dict(N keys)`` for mappings, the class and id
            for models, otherwise ``str(value)``
    """
    if value is None:
        return "None"

    if isinstance(value, str):
        rendered = value
    elif isinstance(value, (list, tuple)):
        if value and all(isinstance(v, Number) and not isinstance(v, bool) for v in value):
            rendered = f"vector(dim={len(value)})"
        else:
            rendered = f"{type(value).__name__}({len(value)} items)"
    elif isinstance(value, dict):
        rendered = f"dict({len(value)} keys)"
    elif isinstance(value, BaseModel):
        model_id = getattr(value, "id", None)
        rendered = type(value).__name__ if model_id is None else f"{type(value).__name__}(id={model_id})"
    else:
        try:
            rendered = str(value)
        except Exception as e:
            return f"<unable to log: {type(e).__name__}>"

    if len(rendered) > max_length:
        return rendered[:max_length] + f"... (truncated, {len(rendered)} total)"
    return rendered


def _safe_context(context: dict[str, Any]) -> dict[str, str]:
    return {key: safe_log_value(val) for key, val in context.items()}


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context,
) -> None:
    """Log ``message`` with ``context`` attached as summarized extra fields."""
    if logger.isEnabledFor(level):
        logger.log(level, message, extra=_safe_context(context))


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: Exception,
    **context,
) -> None:
    """
    Log an exception at ERROR with traceback and context.

    Client exceptions contribute their ``details`` as ``error_details``.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception instance
        **context: Additional context
    """
    extra = _safe_context(context)
    extra["error_type"] = type(exc).__name__
    extra["error_msg"] = getattr(exc, "message", None) or str(exc)
    details = getattr(exc, "details", None)
    if details:
        extra["error_details"] = safe_log_value(str(_safe_context(details)), max_length=2000)
    logger.error(message, exc_info=exc, extra=extra)
