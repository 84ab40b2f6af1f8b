"""
Router utility functions.

Contains helpers shared by router endpoints to keep them clean.
"""

from mangaverse.api.routers.router_utils.error_handling import (
    AUTH_ERROR_RESPONSES,
    handle_service_errors,
    status_for,
)

__all__ = [
    "AUTH_ERROR_RESPONSES",
    "handle_service_errors",
    "status_for",
]
