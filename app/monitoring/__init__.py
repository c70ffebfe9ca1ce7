"""
Logging for the Bloglist backend.

Usage
-----
>>> from app.monitoring import configure_logging, get_logger
>>> configure_logging(settings)
>>> logger = get_logger(__name__)
"""

from app.monitoring.logging import (
    bind_request_id,
    clear_context,
    configure_logging,
    get_logger,
    redact_tokens,
    sanitize_headers,
    sanitize_log_message,
)

__all__ = [
    "bind_request_id",
    "clear_context",
    "configure_logging",
    "get_logger",
    "redact_tokens",
    "sanitize_headers",
    "sanitize_log_message",
]
