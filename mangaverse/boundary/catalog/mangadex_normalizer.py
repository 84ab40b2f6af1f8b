"""
MangaDex field extraction and normalization.

Turns raw MangaDex JSON:API resources into the internal Manga, Chapter and
Genre shapes. Pure functions; no I/O.

Dependencies: mangaverse.models.manga
System role: MangaDex -> internal catalog model mapping
"""

from typing import Any, Callable
from urllib.parse import quote

from mangaverse.models.manga import Author, Chapter, Genre, Manga

UNKNOWN_TITLE = "Unknown Title"
NO_DESCRIPTION = "No description available"
FALLBACK_LANGUAGES = ("ja-ro", "ja")


def _localized(values: dict[str, str] | None, language: str, default: str) -> str:
    """Pick language, then ja-ro, then ja, then the first value, then default."""
    values = values or {}
    for key in (language, *FALLBACK_LANGUAGES):
        if values.get(key):
            return values[key]
    first = next(iter(values.values()), None)
    return first or default


def extract_title(manga: dict[str, Any], language: str = "en") -> str:
    return _localized(manga.get("attributes", {}).get("title"), language, UNKNOWN_TITLE)


def extract_description(manga: dict[str, Any], language: str = "en") -> str:
    return _localized(manga.get("attributes", {}).get("description"), language, NO_DESCRIPTION)


def _tag_name(tag: dict[str, Any]) -> str:
    names = tag.get("attributes", {}).get("name") or {}
    return names.get("en") or next(iter(names.values()), "")


def extract_genres(manga: dict[str, Any]) -> list[str]:
    """Names of tags in the genre group."""
    tags = manga.get("attributes", {}).get("tags") or []
    return [
        _tag_name(tag)
        for tag in tags
        if tag.get("attributes", {}).get("group") == "genre"
    ]


def extract_authors(manga: dict[str, Any]) -> list[Author]:
    """Author and artist relationships as credits."""
    authors = []
    for rel in manga.get("relationships") or []:
        if rel.get("type") not in ("author", "artist"):
            continue
        name = (rel.get("attributes") or {}).get("name") or "Unknown"
        authors.append(Author(id=rel["id"], name=name, type=rel["type"]))
    return authors


def build_cover_url(uploads_url: str, manga_id: str, file_name: str, size: int = 512) -> str:
    return f"{uploads_url.rstrip('/')}/covers/{manga_id}/{file_name}.{size}.jpg"


def extract_cover_url(
    manga: dict[str, Any],
    uploads_url: str = "https://uploads.mangadex.org",
    size: int = 512,
) -> str | None:
    """
    Build the cover thumbnail URL from the cover_art relationship.

    Args:
        manga: Raw MangaDex manga resource (with includes[]=cover_art)
        uploads_url: MangaDex uploads host
        size: Thumbnail width

    Returns:
        str | None: Cover URL, or None without an expanded cover_art relationship
    """
    for rel in manga.get("relationships") or []:
        if rel.get("type") != "cover_art":
            continue
        file_name = (rel.get("attributes") or {}).get("fileName")
        if file_name:
            return build_cover_url(uploads_url, manga["id"], file_name, size)
        return None
    return None


def build_image_url(base_url: str, chapter_hash: str, file_name: str, quality: str = "data") -> str:
    """Page image URL on a MangaDex@Home node (quality is data or data-saver)."""
    return f"{base_url}/{quality}/{chapter_hash}/{file_name}"


def proxied_url(url: str | None, proxy_path: str) -> str | None:
    """Route an upstream image URL through the local image proxy."""
    if not url or not url.strip():
        return None
    return f"{proxy_path}?url={quote(url, safe='')}"


def normalize_manga(
    raw: dict[str, Any],
    proxy: Callable[[str | None], str | None] | None = None,
    uploads_url: str = "https://uploads.mangadex.org",
    cover_size: int = 512,
) -> Manga:
    """
    Map a raw MangaDex manga resource to the internal Manga model.

    Args:
        raw: MangaDex manga resource
        proxy: Callable that rewrites the cover URL through the image proxy
        uploads_url: MangaDex uploads host
        cover_size: Cover thumbnail width

    Returns:
        Manga: Normalized manga
    """
    attrs = raw.get("attributes") or {}
    cover = extract_cover_url(raw, uploads_url, cover_size)
    if proxy is not None:
        cover = proxy(cover)
    elif cover is not None and not cover.strip():
        cover = None

    return Manga(
        id=raw["id"],
        title=extract_title(raw),
        description=extract_description(raw),
        cover_url=cover,
        status=attrs.get("status"),
        year=attrs.get("year"),
        content_rating=attrs.get("contentRating"),
        genres=extract_genres(raw),
        authors=extract_authors(raw),
        updated_at=attrs.get("updatedAt"),
        latest_chapter=attrs.get("lastChapter") or None,
        available_languages=attrs.get("availableTranslatedLanguages") or [],
        has_chapters=True,
        source="mangadex",
    )


def normalize_chapter(raw: dict[str, Any]) -> Chapter:
    """Map a raw MangaDex chapter resource to the internal Chapter model."""
    attrs = raw.get("attributes") or {}
    manga_id = next(
        (rel.get("id") for rel in raw.get("relationships") or [] if rel.get("type") == "manga"),
        None,
    )
    return Chapter(
        id=raw["id"],
        manga_id=manga_id,
        volume=attrs.get("volume"),
        chapter=attrs.get("chapter"),
        title=attrs.get("title"),
        language=attrs.get("translatedLanguage"),
        pages=attrs.get("pages") or 0,
        publish_at=attrs.get("publishAt"),
        readable_at=attrs.get("readableAt"),
        source="mangadex",
    )


def tag_to_genre(raw: dict[str, Any]) -> Genre:
    return Genre(
        id=raw["id"],
        name=_tag_name(raw),
        group=raw.get("attributes", {}).get("group") or "genre",
    )
