"""
Shared HTTP plumbing for catalog adapters.

Builds httpx clients and wraps requests in a tenacity retry loop that
retries transport errors and HTTP 429 with exponential jitter.

Dependencies: httpx, tenacity
System role: Resilient outbound HTTP for upstream catalogs
"""

import logging

import httpx
from tenacity import (
    AsyncRetrying,
    RetryError,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential_jitter,
)

from mangaverse.core.exceptions import CatalogUnavailableError

logger = logging.getLogger(__name__)

USER_AGENT = "mangaverse/0.1 (+https://github.com/mangaverse)"


class RetryableStatus(Exception):
    """Internal signal for a response that should be retried."""

    def __init__(self, response: httpx.Response) -> None:
        self.response = response
        super().__init__(f"HTTP {response.status_code}")


def _is_retryable(exc: BaseException) -> bool:
    return isinstance(exc, (httpx.TransportError, RetryableStatus))


def build_client(
    base_url: str = "",
    timeout: float = 15.0,
    transport: httpx.AsyncBaseTransport | None = None,
    follow_redirects: bool = True,
) -> httpx.AsyncClient:
    """
    Create an AsyncClient for an upstream catalog.

    Args:
        base_url: Root URL prepended to relative request paths
        timeout: Per-request timeout in seconds
        transport: Optional transport override (tests pass httpx.MockTransport)
        follow_redirects: Let httpx follow 3xx responses to any host

    Returns:
        httpx.AsyncClient: Configured client
    """
    return httpx.AsyncClient(
        base_url=base_url,
        timeout=timeout,
        transport=transport,
        headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
        follow_redirects=follow_redirects,
    )


async def send_with_retry(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    *,
    attempts: int = 3,
    source: str = "catalog",
    **kwargs,
) -> httpx.Response:
    """
    Send a request, retrying transport failures and 429 responses.

    Args:
        client: httpx client
        method: HTTP method
        url: Absolute or client-relative URL
        attempts: Total attempts before giving up
        source: Catalog name for logs and errors
        **kwargs: Passed to client.request (params, headers, ...)

    Returns:
        httpx.Response: Final response (any status except exhausted 429s)

    Raises:
        CatalogUnavailableError: When every attempt failed
    """
    retrying = AsyncRetrying(
        retry=retry_if_exception(_is_retryable),
        stop=stop_after_attempt(attempts),
        wait=wait_exponential_jitter(initial=0.5, max=8, jitter=1),
        before_sleep=lambda retry_state: logger.warning(
            f"{__name__}:send_with_retry - Retry {retry_state.attempt_number}/{attempts}",
            extra={"source": source, "url": url},
        ),
    )
    try:
        async for attempt in retrying:
            with attempt:
                response = await client.request(method, url, **kwargs)
                if response.status_code == 429:
                    raise RetryableStatus(response)
                return response
    except RetryError as e:
        last = e.last_attempt.exception()
        if isinstance(last, RetryableStatus):
            raise CatalogUnavailableError(
                f"{source} rate limit exceeded",
                status_code=429,
                details={"url": url},
            ) from last
        raise CatalogUnavailableError(
            f"{source} unreachable: {type(last).__name__}",
            details={"url": url},
        ) from last
    # AsyncRetrying either returns or raises above
    raise CatalogUnavailableError(f"{source} request produced no response", details={"url": url})
