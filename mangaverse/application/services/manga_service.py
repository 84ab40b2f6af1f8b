"""
Manga aggregation service.

Combines the MangaDex and MangaPlus catalogs behind one normalized API:
listing with filters and sort keys, detail, chapter lists, reader pages
and genre tags.

Dependencies: mangaverse.boundary.catalog, mangaverse.models.manga
System role: Catalog use case orchestration
"""

import asyncio
import logging
import re
from typing import Sequence

from mangaverse.boundary.catalog import mangadex_normalizer as mdx
from mangaverse.boundary.catalog.mangadex_client import MangaDexClient
from mangaverse.boundary.catalog.mangaplus_client import (
    MangaPlusClient,
    convert_chapter,
    convert_title,
    is_mangaplus_id,
    strip_prefix,
)
from mangaverse.core.exceptions import CatalogError, CatalogNotFoundError, NotFoundError
from mangaverse.models.manga import (
    Chapter,
    ChapterListResponse,
    ChapterReading,
    GenreListResponse,
    MangaListResponse,
    Manga,
)

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_RATING = ("safe", "suggestive")
SOURCES = ("mangadex", "mangaplus", "all")

# Public sort key -> (MangaDex order field, direction)
ORDER_MAP: dict[str, tuple[str, str]] = {
    "none": ("updatedAt", "desc"),
    "relevance": ("relevance", "desc"),
    "latestUploadedChapter": ("latestUploadedChapter", "desc"),
    "oldestUploadedChapter": ("latestUploadedChapter", "asc"),
    "title-asc": ("title", "asc"),
    "title-desc": ("title", "desc"),
    "rating-asc": ("rating", "asc"),
    "rating-desc": ("rating", "desc"),
    "followedCount-asc": ("followedCount", "asc"),
    "followedCount-desc": ("followedCount", "desc"),
    "createdAt-asc": ("createdAt", "asc"),
    "createdAt-desc": ("createdAt", "desc"),
    "year-asc": ("year", "asc"),
    "year-desc": ("year", "desc"),
}
DEFAULT_ORDER = ORDER_MAP["none"]

_LEADING_NUMBER = re.compile(r"^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def resolve_order(order: str | None) -> tuple[str, str]:
    """Map a public sort key to a MangaDex order field and direction."""
    return ORDER_MAP.get(order or "none", DEFAULT_ORDER)


def leading_number(value: str | None) -> float:
    """
    Parse the numeric prefix of a volume/chapter label.

    "12.5a" -> 12.5; None, "" and labels without a numeric prefix -> 0.
    """
    if not value:
        return 0.0
    match = _LEADING_NUMBER.match(value)
    if not match:
        return 0.0
    try:
        return float(match.group(0))
    except ValueError:
        return 0.0


def sort_latest_first(chapters: Sequence[Chapter]) -> list[Chapter]:
    """Volume descending, then chapter number descending; ties keep upstream order."""
    return sorted(
        chapters,
        key=lambda c: (-leading_number(c.volume), -leading_number(c.chapter)),
    )


class MangaService:
    """Catalog aggregation across MangaDex and MangaPlus."""

    def __init__(
        self,
        mangadex: MangaDexClient,
        mangaplus: MangaPlusClient,
        image_proxy_path: str = "/api/v1/image-proxy",
        uploads_url: str = "https://uploads.mangadex.org",
        cover_size: int = 512,
    ) -> None:
        """
        Initialize manga service.

        Args:
            mangadex: MangaDex client
            mangaplus: MangaPlus client
            image_proxy_path: Public path of the image proxy
            uploads_url: MangaDex cover host
            cover_size: Cover thumbnail width
        """
        self.mangadex = mangadex
        self.mangaplus = mangaplus
        self.image_proxy_path = image_proxy_path
        self.uploads_url = uploads_url
        self.cover_size = cover_size

    def _proxy(self, url: str | None) -> str | None:
        return mdx.proxied_url(url, self.image_proxy_path)

    def _normalize(self, raw: dict) -> Manga:
        return mdx.normalize_manga(
            raw,
            proxy=self._proxy,
            uploads_url=self.uploads_url,
            cover_size=self.cover_size,
        )

    async def _mangadex_page(
        self,
        limit: int,
        offset: int,
        order: str,
        search: str | None,
        status: Sequence[str] | None,
        tags: Sequence[str] | None,
        excluded_tags: Sequence[str] | None,
        content_rating: Sequence[str] | None,
    ) -> tuple[list[Manga], int]:
        try:
            if search:
                result = await self.mangadex.search_manga(
                    search,
                    limit=limit,
                    offset=offset,
                    has_available_chapters=True,
                )
            else:
                order_field, direction = resolve_order(order)
                result = await self.mangadex.get_manga_list(
                    limit=limit,
                    offset=offset,
                    order_field=order_field,
                    order_direction=direction,
                    has_available_chapters=True,
                    content_rating=content_rating,
                    status=status,
                    included_tags=tags,
                    excluded_tags=excluded_tags,
                )
        except CatalogError as e:
            logger.error(
                "Error fetching MangaDex manga list",
                extra={"error": str(e), "search": search, "order": order},
            )
            return [], 0

        data = [self._normalize(raw) for raw in result.get("data") or []]
        return data, int(result.get("total") or 0)

    async def _mangaplus_page(
        self,
        limit: int,
        offset: int,
        search: str | None,
    ) -> tuple[list[Manga], int]:
        titles = await self.mangaplus.get_all_titles()
        if search:
            needle = search.casefold()
            titles = [t for t in titles if needle in (t.get("name") or "").casefold()]
        window = titles[offset:offset + limit]
        return [convert_title(t) for t in window], len(titles)

    async def list_manga(
        self,
        limit: int = 20,
        offset: int = 0,
        order: str = "none",
        search: str | None = None,
        status: Sequence[str] | None = None,
        tags: Sequence[str] | None = None,
        excluded_tags: Sequence[str] | None = None,
        content_rating: Sequence[str] | None = DEFAULT_CONTENT_RATING,
        source: str = "mangadex",
    ) -> MangaListResponse:
        """
        List manga from one or both catalogs.

        Args:
            limit: Page size
            offset: Rows to skip
            order: Public sort key (see ORDER_MAP); unknown keys sort by updatedAt desc
            search: Title query; switches MangaDex to its search endpoint
            status: Publication status filter
            tags: Required tag IDs
            excluded_tags: Forbidden tag IDs
            content_rating: Allowed content ratings
            source: mangadex, mangaplus or all

        Returns:
            MangaListResponse: Page with total and consulted sources
        """
        data: list[Manga] = []
        total = 0
        sources: list[str] = []

        if source in ("mangadex", "all"):
            page, count = await self._mangadex_page(
                limit, offset, order, search, status, tags, excluded_tags, content_rating
            )
            data.extend(page)
            total += count
            sources.append("mangadex")

        if source in ("mangaplus", "all"):
            page, count = await self._mangaplus_page(limit, offset, search)
            data.extend(page)
            total += count
            sources.append("mangaplus")

        logger.debug(
            "Manga list assembled",
            extra={"source": source, "returned": len(data), "total": total},
        )
        return MangaListResponse(data=data, total=total, limit=limit, offset=offset, sources=sources)

    async def get_manga(self, manga_id: str) -> Manga:
        """
        Manga detail from the catalog that owns the ID.

        Raises:
            NotFoundError: Unknown manga
            CatalogError: Upstream failure other than 404
        """
        if is_mangaplus_id(manga_id):
            detail = await self.mangaplus.get_title_detail(strip_prefix(manga_id))
            if detail is None:
                raise NotFoundError("Manga not found", resource="manga")
            return convert_title(detail)

        try:
            result = await self.mangadex.get_manga(manga_id)
        except CatalogNotFoundError as e:
            raise NotFoundError("Manga not found", resource="manga") from e
        return self._normalize(result["data"])

    async def get_chapters(
        self,
        manga_id: str,
        limit: int = 100,
        offset: int = 0,
        languages: Sequence[str] | None = ("en",),
    ) -> ChapterListResponse:
        """
        Chapters of a manga, latest first.

        Raises:
            NotFoundError: Unknown manga
            CatalogError: Upstream failure other than 400/404
        """
        if is_mangaplus_id(manga_id):
            title_id = strip_prefix(manga_id)
            detail = await self.mangaplus.get_title_detail(title_id)
            if detail is None:
                raise NotFoundError("Manga not found or no chapters available", resource="manga")
            chapters = sort_latest_first(
                [convert_chapter(c, title_id) for c in detail.get("chapters") or []]
            )
            return ChapterListResponse(
                data=chapters[offset:offset + limit],
                total=len(chapters),
                limit=limit,
                offset=offset,
            )

        try:
            result = await self.mangadex.get_chapters(
                manga_id,
                limit=limit,
                offset=offset,
                translated_languages=languages,
            )
        except CatalogNotFoundError as e:
            raise NotFoundError("Manga not found or no chapters available", resource="manga") from e
        except CatalogError as e:
            if e.status_code == 400:
                logger.info(
                    "MangaDex rejected chapter query, returning empty list",
                    extra={"manga_id": manga_id},
                )
                return ChapterListResponse(data=[], total=0, limit=limit, offset=offset)
            raise

        chapters = sort_latest_first([mdx.normalize_chapter(c) for c in result.get("data") or []])
        return ChapterListResponse(
            data=chapters,
            total=int(result.get("total") or 0),
            limit=int(result.get("limit", limit)),
            offset=int(result.get("offset", offset)),
        )

    async def read_chapter(self, chapter_id: str) -> ChapterReading:
        """
        Chapter metadata with proxied page image URLs.

        Raises:
            NotFoundError: Unknown chapter
            CatalogError: Upstream failure other than 404
        """
        if is_mangaplus_id(chapter_id):
            pages = await self.mangaplus.get_chapter_pages(strip_prefix(chapter_id))
            if not pages:
                raise NotFoundError("Chapter not found", resource="chapter")
            return ChapterReading(
                id=chapter_id,
                chapter=strip_prefix(chapter_id),
                language="en",
                pages=len(pages),
                images=pages,
                source="mangaplus",
            )

        try:
            chapter_result, at_home = await asyncio.gather(
                self.mangadex.get_chapter(chapter_id),
                self.mangadex.get_at_home(chapter_id),
            )
        except CatalogNotFoundError as e:
            raise NotFoundError("Chapter not found", resource="chapter") from e

        chapter = mdx.normalize_chapter(chapter_result["data"])
        base_url = at_home.get("baseUrl") or ""
        chapter_hash = (at_home.get("chapter") or {}).get("hash") or ""
        files = (at_home.get("chapter") or {}).get("data") or []
        images = [
            self._proxy(mdx.build_image_url(base_url, chapter_hash, name))
            for name in files
        ]
        return ChapterReading(
            **chapter.model_dump(),
            images=images,
            hash=chapter_hash,
            base_url=base_url,
        )

    async def list_genres(self) -> GenreListResponse:
        """Genre tags sorted alphabetically by name."""
        result = await self.mangadex.get_tags()
        genres = [
            mdx.tag_to_genre(tag)
            for tag in result.get("data") or []
            if (tag.get("attributes") or {}).get("group") == "genre"
        ]
        genres.sort(key=lambda g: g.name.casefold())
        return GenreListResponse(data=genres, total=len(genres))
