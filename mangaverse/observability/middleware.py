"""
FastAPI middleware for observability.

Correlation ID propagation and per-request access logging.

Dependencies: fastapi, starlette
System role: Request/response observability injection
"""

import logging
import time
import uuid

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from mangaverse.observability.logger import correlation_id_var

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"

# High-volume or long-lived routes that would drown the access log
QUIET_PATH_SEGMENTS = ("health", "image-proxy")
QUIET_PATH_SUFFIXES = ("/settings/stream",)


def is_quiet_path(path: str) -> bool:
    """True for health checks (any depth), image proxying and the settings stream."""
    if path.endswith(QUIET_PATH_SUFFIXES):
        return True
    return any(segment in QUIET_PATH_SEGMENTS for segment in path.strip("/").split("/"))


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Access log with latency; 5xx responses are logged as errors."""

    async def dispatch(self, request: Request, call_next):
        path = request.url.path
        if is_quiet_path(path):
            return await call_next(request)

        started = time.perf_counter()
        try:
            response: Response = await call_next(request)
        except Exception as e:
            logger.exception(
                f"{request.method} {path} - unhandled {type(e).__name__}",
                extra={"method": request.method, "path": path, "error_msg": str(e)},
            )
            raise

        elapsed_ms = round((time.perf_counter() - started) * 1000, 2)
        log = logger.error if response.status_code >= 500 else logger.info
        log(
            f"{request.method} {path} - {response.status_code} ({elapsed_ms} ms)",
            extra={
                "method": request.method,
                "path": path,
                "status_code": response.status_code,
                "process_time_ms": elapsed_ms,
                "client_host": request.client.host if request.client else None,
            },
        )
        return response


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Echo or generate X-Correlation-ID and expose it to log records."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get(CORRELATION_HEADER) or uuid.uuid4().hex
        request.state.correlation_id = correlation_id
        token = correlation_id_var.set(correlation_id)
        try:
            response: Response = await call_next(request)
        finally:
            correlation_id_var.reset(token)
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
