"""
Core domain module.

Contains the exception hierarchy and the in-process settings broadcaster.
"""

from mangaverse.core.exceptions import (
    MangaverseException,
    ValidationError,
    NotFoundError,
    ConflictError,
    AuthenticationError,
    PermissionDeniedError,
    CatalogError,
    CatalogNotFoundError,
    CatalogUnavailableError,
)

__all__ = [
    "MangaverseException",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "AuthenticationError",
    "PermissionDeniedError",
    "CatalogError",
    "CatalogNotFoundError",
    "CatalogUnavailableError",
]
