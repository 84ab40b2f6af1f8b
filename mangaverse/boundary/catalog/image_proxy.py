"""
Image proxy fetcher.

Fetches cover and page images from allow-listed catalog hosts so browsers
can load them without CORS or hotlink restrictions, and builds the
placeholder served when an image cannot be proxied.

Dependencies: httpx
System role: Outbound image fetching for the image proxy endpoint
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence
from urllib.parse import urlsplit
from xml.sax.saxutils import escape

import httpx

from mangaverse.boundary.catalog.http import build_client

logger = logging.getLogger(__name__)

BROWSER_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
    ),
    "Accept": "image/webp,image/apng,image/*,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
    "Pragma": "no-cache",
    "Cache-Control": "no-cache",
}

IMAGE_MAX_AGE = 86400
PLACEHOLDER_MAX_AGE = 3600
MAX_REDIRECTS = 3


@dataclass
class ProxiedImage:
    """Image bytes ready to return to the browser."""

    content: bytes
    media_type: str
    max_age: int
    is_placeholder: bool = False


def host_allowed(url: str, allowed_domains: Sequence[str]) -> bool:
    """
    True when the URL is http(s) and its host equals or is under an allowed domain.

    Args:
        url: Candidate image URL
        allowed_domains: Domain suffixes such as "mangadex.org"

    Returns:
        bool: Whether the proxy may fetch the URL
    """
    try:
        parts = urlsplit(url)
    except ValueError:
        return False
    if parts.scheme not in ("http", "https"):
        return False
    host = (parts.hostname or "").lower().rstrip(".")
    if not host:
        return False
    for domain in allowed_domains:
        domain = domain.lower().lstrip(".")
        if host == domain or host.endswith(f".{domain}"):
            return True
    return False


def svg_placeholder(text: str) -> bytes:
    """400x600 dark SVG with a centered caption."""
    return (
        '<svg width="400" height="600" xmlns="http://www.w3.org/2000/svg">'
        '<rect width="100%" height="100%" fill="#1a1a1a"/>'
        '<text x="50%" y="50%" font-family="Arial" font-size="16" fill="white" '
        'text-anchor="middle" dominant-baseline="middle">'
        f"{escape(text)}</text></svg>"
    ).encode("utf-8")


class ImageProxyFetcher:
    """Fetch allow-listed images, falling back to a placeholder."""

    def __init__(
        self,
        allowed_domains: Sequence[str] = ("mangadex.org", "mangadex.network"),
        placeholder_path: str | None = None,
        timeout: float = 15.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.allowed_domains = tuple(allowed_domains)
        self.placeholder_path = Path(placeholder_path) if placeholder_path else None
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = build_client(
                timeout=self.timeout, transport=self._transport, follow_redirects=False
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def placeholder(self, text: str = "No Cover") -> ProxiedImage:
        """
        Stock cover when configured and readable, else a generated SVG.

        Args:
            text: Caption for the generated SVG

        Returns:
            ProxiedImage: Placeholder image
        """
        if self.placeholder_path is not None:
            try:
                content = self.placeholder_path.read_bytes()
            except OSError as e:
                logger.warning(
                    "Stock placeholder unreadable",
                    extra={"path": str(self.placeholder_path), "error": str(e)},
                )
            else:
                return ProxiedImage(content, "image/jpeg", PLACEHOLDER_MAX_AGE, is_placeholder=True)
        return ProxiedImage(svg_placeholder(text), "image/svg+xml", PLACEHOLDER_MAX_AGE, is_placeholder=True)

    async def fetch(self, url: str | None) -> ProxiedImage:
        """
        Fetch an upstream image.

        Redirects are followed by hand, at most MAX_REDIRECTS hops, and every
        hop must pass the host allow-list.

        Args:
            url: Absolute image URL, already decoded by the query parser

        Returns:
            ProxiedImage: Upstream bytes, or a placeholder on any failure
        """
        if not url or not url.strip():
            return self.placeholder("No URL provided")

        target = url.strip()
        for _ in range(MAX_REDIRECTS + 1):
            if not host_allowed(target, self.allowed_domains):
                logger.info("Image proxy rejected host", extra={"url": target[:200]})
                return self.placeholder("Invalid URL")

            try:
                response = await self.client.get(target, headers=BROWSER_HEADERS)
            except httpx.HTTPError as e:
                logger.warning(
                    "Image proxy fetch failed",
                    extra={"url": target[:200], "error_type": type(e).__name__},
                )
                return self.placeholder("Failed to load")

            if not response.is_redirect:
                break
            target = str(response.url.join(response.headers["location"]))
        else:
            logger.info("Image proxy redirect limit reached", extra={"url": url[:200]})
            return self.placeholder("Failed to load")

        if not response.is_success:
            logger.info(
                "Image proxy upstream error",
                extra={"url": target[:200], "status_code": response.status_code},
            )
            return self.placeholder("Image not found")

        media_type = response.headers.get("content-type", "image/jpeg")
        return ProxiedImage(response.content, media_type, IMAGE_MAX_AGE)
