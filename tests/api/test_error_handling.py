"""
Tests for router error mapping.

System role: Verification of exception to HTTP status translation
"""

import pytest
from fastapi import HTTPException

from mangaverse.api.routers.router_utils import handle_service_errors
from mangaverse.api.routers.router_utils.error_handling import status_for
from mangaverse.core.exceptions import (
    AuthenticationError,
    CatalogError,
    CatalogNotFoundError,
    CatalogUnavailableError,
    ConflictError,
    MangaverseException,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)


@pytest.mark.parametrize(
    "exc,expected",
    [
        (NotFoundError("missing"), 404),
        (ConflictError("taken"), 409),
        (ValidationError("bad"), 400),
        (AuthenticationError("who"), 401),
        (PermissionDeniedError("no"), 403),
        (CatalogNotFoundError("gone", status_code=404), 404),
        (CatalogUnavailableError("down"), 502),
        (CatalogError("boom", status_code=500), 502),
        (MangaverseException("other"), 500),
    ],
)
def test_status_for(exc, expected):
    assert status_for(exc) == expected


async def _raise(exc: Exception):
    raise exc


async def test_passes_result_through():
    @handle_service_errors("Echo")
    async def endpoint(value: int) -> int:
        return value

    assert await endpoint(3) == 3


async def test_http_exception_untouched():
    @handle_service_errors("Guarded")
    async def endpoint():
        await _raise(HTTPException(status_code=418, detail="teapot"))

    with pytest.raises(HTTPException) as exc_info:
        await endpoint()

    assert exc_info.value.status_code == 418


async def test_value_error_not_found_message():
    @handle_service_errors("Lookup")
    async def endpoint():
        await _raise(ValueError("Thing not found"))

    with pytest.raises(HTTPException) as exc_info:
        await endpoint()

    assert exc_info.value.status_code == 404


async def test_value_error_is_400():
    @handle_service_errors("Parse")
    async def endpoint():
        await _raise(ValueError("bad input"))

    with pytest.raises(HTTPException) as exc_info:
        await endpoint()

    assert exc_info.value.status_code == 400
    assert exc_info.value.detail == "bad input"


async def test_unexpected_error_is_500():
    @handle_service_errors("Export")
    async def endpoint():
        await _raise(RuntimeError("disk full"))

    with pytest.raises(HTTPException) as exc_info:
        await endpoint()

    assert exc_info.value.status_code == 500
    assert exc_info.value.detail == "Export failed: disk full"
