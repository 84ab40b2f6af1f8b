"""
Manga catalog API endpoints.

Routes:
- GET /manga - Browse or search manga across catalogs
- GET /manga/{id} - Manga details
- GET /manga/{id}/chapters - Chapter list, latest first
- GET /chapter/{id} - Chapter pages for the reader
- GET /tags - Genre list

Dependencies: mangaverse.application.services.manga_service, mangaverse.models
System role: Catalog HTTP API
"""

import logging
from typing import Literal

from fastapi import APIRouter, Depends, Query

from mangaverse.api.deps import get_manga_service
from mangaverse.api.routers.router_utils import handle_service_errors
from mangaverse.application.services.manga_service import DEFAULT_CONTENT_RATING, MangaService
from mangaverse.models.manga import (
    ChapterListResponse,
    ChapterReading,
    GenreListResponse,
    Manga,
    MangaListResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["manga"])


@router.get("/manga", response_model=MangaListResponse)
@handle_service_errors("Manga listing")
async def list_manga(
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
    order: str = "none",
    search: str | None = None,
    status: list[str] | None = Query(None),
    tags: list[str] | None = Query(None),
    excluded_tags: list[str] | None = Query(None),
    content_rating: list[str] | None = Query(None),
    source: Literal["mangadex", "mangaplus", "all"] = "mangadex",
    manga_service: MangaService = Depends(get_manga_service),
) -> MangaListResponse:
    """
    Browse manga.

    Args:
        limit: Page size (1-100)
        offset: Items to skip
        order: Sort key (none, relevance, latestUploadedChapter, title-asc, ...)
        search: Title search
        status: Publication status filter
        tags: Tag IDs that must be present
        excluded_tags: Tag IDs that must be absent
        content_rating: Ratings to include (default safe, suggestive)
        source: Catalog(s) to consult
        manga_service: Injected MangaService

    Returns:
        MangaListResponse: One page of manga
    """
    return await manga_service.list_manga(
        limit=limit,
        offset=offset,
        order=order,
        search=search,
        status=status,
        tags=tags,
        excluded_tags=excluded_tags,
        content_rating=content_rating or list(DEFAULT_CONTENT_RATING),
        source=source,
    )


@router.get("/manga/{manga_id}", response_model=Manga)
@handle_service_errors("Manga lookup")
async def get_manga(
    manga_id: str,
    manga_service: MangaService = Depends(get_manga_service),
) -> Manga:
    """
    Manga details from MangaDex, or MangaPlus for mp- IDs.

    Raises:
        HTTPException(404): Unknown manga
        HTTPException(502): Upstream catalog failure
    """
    return await manga_service.get_manga(manga_id)


@router.get("/manga/{manga_id}/chapters", response_model=ChapterListResponse)
@handle_service_errors("Chapter listing")
async def get_chapters(
    manga_id: str,
    limit: int = Query(100, ge=1, le=500),
    offset: int = Query(0, ge=0),
    languages: list[str] | None = Query(None),
    manga_service: MangaService = Depends(get_manga_service),
) -> ChapterListResponse:
    """Chapters of a manga, latest volume and chapter first."""
    return await manga_service.get_chapters(
        manga_id,
        limit=limit,
        offset=offset,
        languages=languages or ["en"],
    )


@router.get("/chapter/{chapter_id}", response_model=ChapterReading)
@handle_service_errors("Chapter read")
async def read_chapter(
    chapter_id: str,
    manga_service: MangaService = Depends(get_manga_service),
) -> ChapterReading:
    """Chapter metadata with proxied page image URLs."""
    return await manga_service.read_chapter(chapter_id)


@router.get("/tags", response_model=GenreListResponse)
@handle_service_errors("Genre listing")
async def list_genres(
    manga_service: MangaService = Depends(get_manga_service),
) -> GenreListResponse:
    """Genre tags sorted by name."""
    return await manga_service.list_genres()
