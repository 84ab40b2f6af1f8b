"""
Exception hierarchy for the Mangaverse application.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class MangaverseException(Exception):
    """Base exception for all Mangaverse application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging

        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(MangaverseException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class NotFoundError(MangaverseException):
    """Raised when a requested resource does not exist."""

    def __init__(
        self,
        message: str,
        resource: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize not found error.

        Args:
            message: Error message returned to the client
            resource: Kind of resource that was missing
            details: Additional context
        """
        details = details or {}
        if resource:
            details["resource"] = resource
        super().__init__(message, details)


class ConflictError(MangaverseException):
    """Raised when a write would violate a uniqueness rule."""

    pass


class AuthenticationError(MangaverseException):
    """Raised when credentials are missing or wrong."""

    pass


class PermissionDeniedError(MangaverseException):
    """Raised when an authenticated user may not perform an action."""

    pass


class CatalogError(MangaverseException):
    """Raised when an upstream catalog request fails."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize catalog error.

        Args:
            message: Error message
            status_code: HTTP status returned by the upstream catalog
            details: Additional context
        """
        details = details or {}
        if status_code is not None:
            details["status_code"] = status_code
        self.status_code = status_code
        super().__init__(message, details)


class CatalogNotFoundError(CatalogError):
    """Raised when the upstream catalog answers 404."""

    pass


class CatalogUnavailableError(CatalogError):
    """Raised when the upstream catalog cannot be reached after retries."""

    pass
