"""
Test suite for the manga aggregation service.

Catalog clients are AsyncMocks; no HTTP is involved.

System role: Verification of catalog orchestration, ordering and fallbacks
"""

from unittest.mock import AsyncMock

import pytest

from mangaverse.application.services.manga_service import (
    MangaService,
    leading_number,
    resolve_order,
    sort_latest_first,
)
from mangaverse.core.exceptions import CatalogError, CatalogNotFoundError, NotFoundError
from mangaverse.models.manga import Chapter


def _raw_manga(manga_id: str, title: str) -> dict:
    return {"id": manga_id, "attributes": {"title": {"en": title}}, "relationships": []}


def _raw_chapter(chapter_id: str, volume: str | None, chapter: str | None) -> dict:
    return {
        "id": chapter_id,
        "attributes": {"volume": volume, "chapter": chapter, "translatedLanguage": "en"},
        "relationships": [{"id": "m1", "type": "manga"}],
    }


@pytest.fixture
def service(mock_mangadex, mock_mangaplus) -> MangaService:
    return MangaService(mangadex=mock_mangadex, mangaplus=mock_mangaplus)


class TestHelpers:
    """Module-level sorting helpers."""

    @pytest.mark.parametrize(
        "order,expected",
        [
            ("none", ("updatedAt", "desc")),
            ("oldestUploadedChapter", ("latestUploadedChapter", "asc")),
            ("title-asc", ("title", "asc")),
            ("followedCount-desc", ("followedCount", "desc")),
            ("bogus", ("updatedAt", "desc")),
            (None, ("updatedAt", "desc")),
        ],
    )
    def test_resolve_order(self, order, expected) -> None:
        assert resolve_order(order) == expected

    @pytest.mark.parametrize(
        "value,expected",
        [("12.5a", 12.5), ("7", 7.0), ("", 0.0), (None, 0.0), ("Extra", 0.0), (" 3", 3.0)],
    )
    def test_leading_number(self, value, expected) -> None:
        assert leading_number(value) == expected

    def test_sort_latest_first(self) -> None:
        chapters = [
            Chapter(id="a", volume="1", chapter="1"),
            Chapter(id="b", volume="2", chapter="10"),
            Chapter(id="c", volume="2", chapter="10.5"),
            Chapter(id="d", volume=None, chapter="99"),
        ]
        assert [c.id for c in sort_latest_first(chapters)] == ["c", "b", "a", "d"]


class TestListManga:
    """Browsing and searching."""

    async def test_list_uses_list_endpoint_with_order(self, service, mock_mangadex) -> None:
        # Arrange
        mock_mangadex.get_manga_list.return_value = {
            "data": [_raw_manga("m1", "Alpha")],
            "total": 1,
        }

        # Act
        result = await service.list_manga(order="rating-desc", tags=["t1"])

        # Assert
        kwargs = mock_mangadex.get_manga_list.call_args.kwargs
        assert kwargs["order_field"] == "rating"
        assert kwargs["order_direction"] == "desc"
        assert kwargs["included_tags"] == ["t1"]
        assert kwargs["has_available_chapters"] is True
        assert result.total == 1
        assert result.data[0].title == "Alpha"
        assert result.sources == ["mangadex"]
        mock_mangadex.search_manga.assert_not_called()

    async def test_search_uses_search_endpoint(self, service, mock_mangadex) -> None:
        await service.list_manga(search="frieren")

        mock_mangadex.search_manga.assert_awaited_once()
        assert mock_mangadex.search_manga.call_args.args[0] == "frieren"
        mock_mangadex.get_manga_list.assert_not_called()

    async def test_mangadex_failure_yields_empty_page(self, service, mock_mangadex) -> None:
        mock_mangadex.get_manga_list.side_effect = CatalogError("boom", status_code=500)

        result = await service.list_manga(limit=5, offset=10)

        assert result.data == []
        assert result.total == 0
        assert (result.limit, result.offset) == (5, 10)

    async def test_mangaplus_source_filters_and_slices(self, service, mock_mangaplus) -> None:
        mock_mangaplus.get_all_titles.return_value = [
            {"id": 1, "name": "One Piece"},
            {"id": 2, "name": "Piece of Cake"},
            {"id": 3, "name": "Naruto"},
        ]

        result = await service.list_manga(source="mangaplus", search="piece", limit=1, offset=1)

        assert [m.id for m in result.data] == ["mp-2"]
        assert result.total == 2
        assert result.sources == ["mangaplus"]

    async def test_all_sources_sum_totals(self, service, mock_mangadex, mock_mangaplus) -> None:
        mock_mangadex.get_manga_list.return_value = {"data": [_raw_manga("m1", "A")], "total": 40}
        mock_mangaplus.get_all_titles.return_value = [{"id": 9, "name": "B"}]

        result = await service.list_manga(source="all")

        assert [m.id for m in result.data] == ["m1", "mp-9"]
        assert result.total == 41
        assert result.sources == ["mangadex", "mangaplus"]


class TestDetailAndChapters:
    """Detail, chapter list and reader pages."""

    async def test_get_manga_not_found(self, service, mock_mangadex) -> None:
        mock_mangadex.get_manga.side_effect = CatalogNotFoundError("gone", status_code=404)

        with pytest.raises(NotFoundError):
            await service.get_manga("missing")

    async def test_get_manga_other_errors_propagate(self, service, mock_mangadex) -> None:
        mock_mangadex.get_manga.side_effect = CatalogError("bad gateway", status_code=502)

        with pytest.raises(CatalogError):
            await service.get_manga("m1")

    async def test_get_manga_proxies_cover(self, service, mock_mangadex) -> None:
        raw = _raw_manga("m1", "A")
        raw["relationships"] = [{"id": "c", "type": "cover_art", "attributes": {"fileName": "f.jpg"}}]
        mock_mangadex.get_manga.return_value = {"data": raw}

        manga = await service.get_manga("m1")

        assert manga.cover_url.startswith("/api/v1/image-proxy?url=https%3A%2F%2Fuploads.mangadex.org")

    async def test_get_mangaplus_detail(self, service, mock_mangaplus) -> None:
        mock_mangaplus.get_title_detail.return_value = {"id": 42, "name": "T", "chapters": []}

        manga = await service.get_manga("mp-42")

        mock_mangaplus.get_title_detail.assert_awaited_once_with("42")
        assert manga.id == "mp-42"

    async def test_get_mangaplus_detail_missing(self, service) -> None:
        with pytest.raises(NotFoundError):
            await service.get_manga("mp-42")

    async def test_get_chapters_sorted_latest_first(self, service, mock_mangadex) -> None:
        mock_mangadex.get_chapters.return_value = {
            "data": [
                _raw_chapter("c1", "1", "1"),
                _raw_chapter("c3", "2", "12.5a"),
                _raw_chapter("c2", "2", "12"),
            ],
            "total": 3,
            "limit": 100,
            "offset": 0,
        }

        result = await service.get_chapters("m1")

        assert [c.id for c in result.data] == ["c3", "c2", "c1"]
        assert result.total == 3

    async def test_get_chapters_bad_request_is_empty(self, service, mock_mangadex) -> None:
        mock_mangadex.get_chapters.side_effect = CatalogError("bad", status_code=400)

        result = await service.get_chapters("m1", limit=10)

        assert result.data == []
        assert result.total == 0

    async def test_get_chapters_not_found(self, service, mock_mangadex) -> None:
        mock_mangadex.get_chapters.side_effect = CatalogNotFoundError("gone", status_code=404)

        with pytest.raises(NotFoundError, match="Manga not found or no chapters available"):
            await service.get_chapters("m1")

    async def test_read_chapter_proxies_pages(self, service, mock_mangadex) -> None:
        # Arrange
        mock_mangadex.get_chapter.return_value = {"data": _raw_chapter("c1", "1", "3")}
        mock_mangadex.get_at_home.return_value = {
            "baseUrl": "https://node.mangadex.network",
            "chapter": {"hash": "h", "data": ["1.png", "2.png"], "dataSaver": []},
        }

        # Act
        reading = await service.read_chapter("c1")

        # Assert
        assert reading.hash == "h"
        assert reading.base_url == "https://node.mangadex.network"
        assert reading.images == [
            "/api/v1/image-proxy?url=https%3A%2F%2Fnode.mangadex.network%2Fdata%2Fh%2F1.png",
            "/api/v1/image-proxy?url=https%3A%2F%2Fnode.mangadex.network%2Fdata%2Fh%2F2.png",
        ]

    async def test_read_mangaplus_chapter(self, service, mock_mangaplus) -> None:
        mock_mangaplus.get_chapter_pages.return_value = ["https://img/1.jpg"]

        reading = await service.read_chapter("mp-5001")

        mock_mangaplus.get_chapter_pages.assert_awaited_once_with("5001")
        assert reading.images == ["https://img/1.jpg"]
        assert reading.source == "mangaplus"

    async def test_list_genres_sorted_and_filtered(self, service, mock_mangadex) -> None:
        mock_mangadex.get_tags = AsyncMock(
            return_value={
                "data": [
                    {"id": "1", "attributes": {"name": {"en": "Romance"}, "group": "genre"}},
                    {"id": "2", "attributes": {"name": {"en": "Oneshot"}, "group": "format"}},
                    {"id": "3", "attributes": {"name": {"en": "action"}, "group": "genre"}},
                ]
            }
        )

        result = await service.list_genres()

        assert [g.name for g in result.data] == ["action", "Romance"]
        assert result.total == 2
