"""
Observability module.

Provides structured logging, correlation ID tracking and request logging.
"""

from photobooth.observability.correlation import (
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from photobooth.observability.logger import configure_logging
from photobooth.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

__all__ = [
    "CorrelationMiddleware",
    "RequestLoggingMiddleware",
    "clear_correlation_id",
    "configure_logging",
    "get_correlation_id",
    "set_correlation_id",
]
