"""
Observability module.

Structured logging setup and request middleware.
"""

from mangaverse.observability.logger import configure_logging, correlation_id_var
from mangaverse.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

__all__ = [
    "configure_logging",
    "correlation_id_var",
    "CorrelationMiddleware",
    "RequestLoggingMiddleware",
]
