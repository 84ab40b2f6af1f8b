"""
MangaPlus web API client.

Best-effort adapter: every lookup degrades to an empty result on failure
and logs the cause, so a MangaPlus outage never breaks MangaDex pages.

Dependencies: httpx, tenacity
System role: Secondary upstream manga catalog adapter
"""

import logging
from datetime import datetime, timezone
from typing import Any

import httpx

from mangaverse.boundary.catalog.http import build_client, send_with_retry
from mangaverse.core.exceptions import CatalogError
from mangaverse.models.manga import Author, Chapter, Manga

logger = logging.getLogger(__name__)

ID_PREFIX = "mp-"
DEFAULT_GENRES = ["Shonen", "Action"]


def is_mangaplus_id(value: str) -> bool:
    return value.startswith(ID_PREFIX)


def strip_prefix(value: str) -> str:
    return value[len(ID_PREFIX):] if is_mangaplus_id(value) else value


def _iso_from_seconds(timestamp: Any) -> str | None:
    try:
        return datetime.fromtimestamp(int(timestamp), tz=timezone.utc).isoformat().replace(
            "+00:00", "Z"
        )
    except (TypeError, ValueError, OverflowError, OSError):
        return None


def convert_title(title: dict[str, Any]) -> Manga:
    """
    Map a MangaPlus title to the internal Manga model.

    MangaPlus exposes no genres, rating or status, so fixed defaults fill them.
    """
    chapters = title.get("chapters") or []
    author = title.get("author") or "Unknown"
    view_count = title.get("viewCount") or 0
    return Manga(
        id=f"{ID_PREFIX}{title['id']}",
        title=title.get("name") or "Unknown Title",
        description=f"Author: {author}. View Count: {int(view_count):,}",
        cover_url=title.get("portraitImageUrl") or None,
        status="ongoing",
        year=datetime.now(timezone.utc).year,
        content_rating="safe",
        genres=list(DEFAULT_GENRES),
        authors=[Author(id="1", name=author, type="author")],
        updated_at=datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        latest_chapter=chapters[0].get("title") if chapters else None,
        available_languages=[title.get("language") or "en"],
        has_chapters=True,
        source="mangaplus",
    )


def convert_chapter(chapter: dict[str, Any], title_id: str | int) -> Chapter:
    """Map a MangaPlus chapter to the internal Chapter model."""
    chapter_id = str(chapter["id"])
    published = _iso_from_seconds(chapter.get("startTimeStamp"))
    return Chapter(
        id=f"{ID_PREFIX}{chapter_id}",
        manga_id=f"{ID_PREFIX}{title_id}",
        volume="1",
        chapter=chapter_id,
        title=chapter.get("title") or chapter.get("subtitle") or f"Chapter {chapter_id}",
        language="en",
        pages=0,
        publish_at=published,
        readable_at=published,
        source="mangaplus",
    )


class MangaPlusClient:
    """Async MangaPlus client with fail-soft lookups."""

    def __init__(
        self,
        base_url: str = "https://jumpg-webapi.tokyo-cdn.com/api",
        timeout: float = 15.0,
        max_retries: int = 3,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
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

    async def _get_success(self, path: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        """
        GET a MangaPlus path and return its "success" payload.

        Raises:
            CatalogError: Non-2xx status, undecodable body or an error payload
        """
        response = await send_with_retry(
            self.client,
            "GET",
            path,
            attempts=self.max_retries,
            source="MangaPlus",
            params=params,
        )
        if not response.is_success:
            raise CatalogError(
                f"MangaPlus API error: {response.status_code}",
                status_code=response.status_code,
                details={"path": path},
            )
        try:
            payload = response.json()
        except ValueError as e:
            raise CatalogError("MangaPlus returned a non-JSON body", details={"path": path}) from e
        success = payload.get("success") if isinstance(payload, dict) else None
        if not success:
            raise CatalogError("MangaPlus returned an error payload", details={"path": path})
        return success

    async def get_all_titles(self) -> list[dict[str, Any]]:
        """All titles, or [] when MangaPlus is unavailable."""
        try:
            success = await self._get_success("/title_list/all")
        except CatalogError as e:
            logger.warning("Error fetching MangaPlus titles", extra={"error": str(e)})
            return []
        return (success.get("allTitlesView") or {}).get("titles") or []

    async def get_title_detail(self, title_id: str) -> dict[str, Any] | None:
        """
        Title detail with its chapter lists merged.

        Returns:
            dict | None: Title plus "chapters" (first list then last list) and
            "overview", or None when unavailable
        """
        try:
            success = await self._get_success("/title_detailV3", {"title_id": title_id})
        except CatalogError as e:
            logger.warning(
                "Error fetching MangaPlus title detail",
                extra={"title_id": title_id, "error": str(e)},
            )
            return None
        detail = success.get("titleDetailView")
        if not detail or not detail.get("title"):
            return None
        return {
            **detail["title"],
            "overview": detail.get("overview"),
            "chapters": (detail.get("firstChapterList") or []) + (detail.get("lastChapterList") or []),
        }

    async def get_chapter_pages(self, chapter_id: str) -> list[str]:
        """Page image URLs of a chapter, or [] when unavailable."""
        try:
            success = await self._get_success(
                "/manga_viewer",
                {"chapter_id": chapter_id, "split": "yes", "img_quality": "super_high"},
            )
        except CatalogError as e:
            logger.warning(
                "Error fetching MangaPlus chapter pages",
                extra={"chapter_id": chapter_id, "error": str(e)},
            )
            return []
        pages = (success.get("mangaViewer") or {}).get("pages") or []
        return [
            page["page"]["imageUrl"]
            for page in pages
            if (page.get("page") or {}).get("imageUrl")
        ]
