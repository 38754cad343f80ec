"""Core Webman utilities.

This module exports core utilities for use throughout the application.
"""

from webman.core.config import Settings, get_settings
from webman.core.exceptions import (
    BadRequestError,
    NotFoundError,
    PersistenceError,
    UpstreamError,
    WebmanError,
)
from webman.core.logging import (
    LoggingContext,
    bind_correlation_id,
    clear_context,
    configure_logging,
    get_logger,
)

__all__ = [
    "BadRequestError",
    "LoggingContext",
    "NotFoundError",
    "PersistenceError",
    "Settings",
    "UpstreamError",
    "WebmanError",
    "bind_correlation_id",
    "clear_context",
    "configure_logging",
    "get_logger",
    "get_settings",
]
