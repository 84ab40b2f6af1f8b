"""
Catalog domain models.

Normalized manga, chapter and genre shapes shared by the MangaDex and
MangaPlus adapters and returned by the manga API.

Dependencies: pydantic
System role: Catalog API contracts
"""

from typing import Literal

from pydantic import BaseModel, Field

CatalogSource = Literal["mangadex", "mangaplus"]


class Author(BaseModel):
    """Author or artist credit."""

    id: str
    name: str = "Unknown"
    type: str = "author"


class Manga(BaseModel):
    """Catalog manga normalized across sources."""

    id: str
    title: str
    description: str
    cover_url: str | None = None
    status: str | None = None
    year: int | None = None
    content_rating: str | None = None
    genres: list[str] = Field(default_factory=list)
    authors: list[Author] = Field(default_factory=list)
    updated_at: str | None = None
    latest_chapter: str | None = None
    available_languages: list[str] = Field(default_factory=list)
    has_chapters: bool = True
    source: CatalogSource = "mangadex"


class Chapter(BaseModel):
    """Chapter metadata normalized across sources."""

    id: str
    manga_id: str | None = None
    volume: str | None = None
    chapter: str | None = None
    title: str | None = None
    language: str | None = None
    pages: int = 0
    publish_at: str | None = None
    readable_at: str | None = None
    source: CatalogSource = "mangadex"


class ChapterReading(Chapter):
    """Chapter metadata plus page image URLs for the reader."""

    images: list[str] = Field(default_factory=list)
    hash: str | None = None
    base_url: str | None = None


class Genre(BaseModel):
    """Genre tag."""

    id: str
    name: str
    group: str = "genre"


class MangaListResponse(BaseModel):
    """Paginated manga list with the catalogs consulted."""

    data: list[Manga]
    total: int
    limit: int
    offset: int
    sources: list[str]


class ChapterListResponse(BaseModel):
    """Paginated chapter list, latest first."""

    data: list[Chapter]
    total: int
    limit: int
    offset: int


class GenreListResponse(BaseModel):
    """All genre tags sorted by name."""

    data: list[Genre]
    total: int
