"""
MangaDex API client.

Stateless async wrapper over the public MangaDex REST API. Returns raw
JSON envelopes; normalization lives in mangadex_normalizer.

Dependencies: httpx, tenacity, mangaverse.configs
System role: Primary upstream manga catalog adapter
"""

import logging
from typing import Any, Sequence

import httpx

from mangaverse.boundary.catalog.http import build_client, send_with_retry
from mangaverse.core.exceptions import CatalogError, CatalogNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_INCLUDES = ("cover_art", "author", "artist")


class MangaDexClient:
    """
    Async MangaDex client.

    One httpx.AsyncClient is created lazily and reused; call close() at
    shutdown.
    """

    def __init__(
        self,
        base_url: str = "https://api.mangadex.org",
        timeout: float = 15.0,
        max_retries: int = 3,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            base_url: MangaDex API root
            timeout: Request timeout in seconds
            max_retries: Attempts per request for transport errors and 429
            transport: Optional httpx transport (tests use MockTransport)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.max_retries = max_retries
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = build_client(self.base_url, self.timeout, self._transport)
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _get(self, path: str, params: list[tuple[str, Any]] | None = None) -> dict[str, Any]:
        """
        GET a MangaDex path and return its JSON body.

        Raises:
            CatalogNotFoundError: Upstream 404
            CatalogError: Any other non-2xx response
            CatalogUnavailableError: Transport failure after retries
        """
        response = await send_with_retry(
            self.client,
            "GET",
            path,
            attempts=self.max_retries,
            source="MangaDex",
            params=params,
        )
        if response.is_success:
            return response.json()

        body = response.text[:200]
        logger.warning(
            "MangaDex request failed",
            extra={"path": path, "status_code": response.status_code, "body": body},
        )
        message = f"MangaDex API error: {response.status_code} {response.reason_phrase} - {body}"
        if response.status_code == 404:
            raise CatalogNotFoundError(message, status_code=404, details={"path": path})
        raise CatalogError(message, status_code=response.status_code, details={"path": path})

    @staticmethod
    def _extend(params: list[tuple[str, Any]], key: str, values: Sequence[str] | None) -> None:
        for value in values or ():
            params.append((key, value))

    async def get_manga_list(
        self,
        limit: int = 20,
        offset: int = 0,
        order_field: str = "updatedAt",
        order_direction: str = "desc",
        includes: Sequence[str] | None = DEFAULT_INCLUDES,
        has_available_chapters: bool | None = None,
        content_rating: Sequence[str] | None = None,
        status: Sequence[str] | None = None,
        included_tags: Sequence[str] | None = None,
        excluded_tags: Sequence[str] | None = None,
    ) -> dict[str, Any]:
        """
        List manga with filters.

        Args:
            limit: Page size
            offset: Rows to skip (omitted from the query when 0)
            order_field: MangaDex order key (updatedAt, title, rating, ...)
            order_direction: asc or desc
            includes: Relationships to expand
            has_available_chapters: Restrict to manga with readable chapters
            content_rating: Allowed ratings
            status: Publication statuses
            included_tags: Tag IDs that must be present
            excluded_tags: Tag IDs that must be absent

        Returns:
            dict: Raw envelope {result, response, data, limit, offset, total}
        """
        params: list[tuple[str, Any]] = []
        if limit:
            params.append(("limit", limit))
        if offset:
            params.append(("offset", offset))
        params.append((f"order[{order_field}]", order_direction))
        self._extend(params, "includes[]", includes)
        if has_available_chapters is not None:
            params.append(("hasAvailableChapters", "true" if has_available_chapters else "false"))
        self._extend(params, "contentRating[]", content_rating)
        self._extend(params, "status[]", status)
        self._extend(params, "includedTags[]", included_tags)
        self._extend(params, "excludedTags[]", excluded_tags)
        return await self._get("/manga", params)

    async def search_manga(
        self,
        title: str,
        limit: int = 20,
        offset: int = 0,
        includes: Sequence[str] | None = DEFAULT_INCLUDES,
        has_available_chapters: bool | None = None,
    ) -> dict[str, Any]:
        """Search manga by title."""
        params: list[tuple[str, Any]] = [("title", title)]
        if limit:
            params.append(("limit", limit))
        if offset:
            params.append(("offset", offset))
        self._extend(params, "includes[]", includes)
        if has_available_chapters is not None:
            params.append(("hasAvailableChapters", "true" if has_available_chapters else "false"))
        return await self._get("/manga", params)

    async def get_manga(
        self,
        manga_id: str,
        includes: Sequence[str] | None = DEFAULT_INCLUDES,
    ) -> dict[str, Any]:
        params: list[tuple[str, Any]] = []
        self._extend(params, "includes[]", includes)
        return await self._get(f"/manga/{manga_id}", params)

    async def get_chapters(
        self,
        manga_id: str,
        limit: int = 100,
        offset: int = 0,
        translated_languages: Sequence[str] | None = ("en",),
    ) -> dict[str, Any]:
        """
        List a manga's chapters in reading order (volume, chapter ascending).

        Args:
            manga_id: MangaDex manga UUID
            limit: Page size
            offset: Rows to skip
            translated_languages: Language codes to include

        Returns:
            dict: Raw chapter envelope
        """
        params: list[tuple[str, Any]] = [("manga", manga_id)]
        if limit:
            params.append(("limit", limit))
        if offset:
            params.append(("offset", offset))
        self._extend(params, "translatedLanguage[]", translated_languages)
        params.append(("order[volume]", "asc"))
        params.append(("order[chapter]", "asc"))
        return await self._get("/chapter", params)

    async def get_chapter(self, chapter_id: str) -> dict[str, Any]:
        return await self._get(f"/chapter/{chapter_id}")

    async def get_at_home(self, chapter_id: str) -> dict[str, Any]:
        """MangaDex@Home server info: {baseUrl, chapter: {hash, data, dataSaver}}."""
        return await self._get(f"/at-home/server/{chapter_id}")

    async def get_tags(self) -> dict[str, Any]:
        return await self._get("/manga/tag")

    async def get_cover(self, cover_id: str) -> dict[str, Any]:
        return await self._get(f"/cover/{cover_id}")
