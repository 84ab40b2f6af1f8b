"""
Router error mapping.

Translates service-layer exceptions into HTTP responses so endpoint bodies
only describe the happy path.

Dependencies: fastapi, pydantic, mangaverse.core.exceptions
System role: Exception to HTTP status translation for routers
"""

import functools
import logging
from typing import Any, Awaitable, Callable, TypeVar

import pydantic
from fastapi import HTTPException

from mangaverse.core.exceptions import (
    AuthenticationError,
    CatalogError,
    CatalogNotFoundError,
    ConflictError,
    MangaverseException,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)
from mangaverse.models.common import ErrorResponse

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])

# Order matters: subclasses before their parents.
STATUS_BY_EXCEPTION: list[tuple[type[Exception], int]] = [
    (NotFoundError, 404),
    (ConflictError, 409),
    (ValidationError, 400),
    (AuthenticationError, 401),
    (PermissionDeniedError, 403),
    (CatalogNotFoundError, 404),
    (CatalogError, 502),
]


def status_for(exc: Exception) -> int:
    """HTTP status for a service exception, 500 when unmapped."""
    for exc_type, status in STATUS_BY_EXCEPTION:
        if isinstance(exc, exc_type):
            return status
    return 500


def handle_service_errors(operation: str) -> Callable[[F], F]:
    """
    Decorate an async endpoint with the service error mapping.

    Args:
        operation: Short description used in logs and 500 details

    Returns:
        Decorator preserving the endpoint signature for FastAPI
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except HTTPException:
                raise
            except MangaverseException as e:
                status = status_for(e)
                log = logger.error if status >= 500 else logger.info
                log(
                    f"{operation} failed",
                    extra={
                        "status_code": status,
                        "error_type": type(e).__name__,
                        "error_msg": e.message,
                    },
                )
                raise HTTPException(status_code=status, detail=e.message) from e
            except pydantic.ValidationError as e:
                raise HTTPException(status_code=422, detail=str(e)) from e
            except ValueError as e:
                status = 404 if "not found" in str(e).lower() else 400
                raise HTTPException(status_code=status, detail=str(e)) from e
            except Exception as e:
                logger.exception(
                    f"{operation} failed",
                    extra={"error_type": type(e).__name__, "error_msg": str(e)},
                )
                raise HTTPException(
                    status_code=500,
                    detail=f"{operation} failed: {e}",
                ) from e

        return wrapper  # type: ignore[return-value]

    return decorator


# OpenAPI error documentation for routers behind bearer auth
AUTH_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    401: {"model": ErrorResponse, "description": "Access token required"},
    403: {"model": ErrorResponse, "description": "Invalid or expired token, or insufficient role"},
}
