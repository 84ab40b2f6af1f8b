"""
Integration tests for AnalyticsService.

System role: Verification of tracking ingestion and admin reports
"""

from datetime import datetime, timedelta, timezone

import pytest

from mangaverse.application.services.ad_service import AdService
from mangaverse.application.services.analytics_service import AnalyticsService, range_start
from mangaverse.application.services.favorites_service import FavoritesService
from mangaverse.boundary.db.CRUD.analytics_crud import visitor_session_crud


@pytest.fixture
def analytics(test_async_db) -> AnalyticsService:
    return AnalyticsService(db=test_async_db)


class TestRangeStart:
    @pytest.mark.parametrize(
        "time_range,days",
        [("1d", 1), ("7d", 7), ("30d", 30), ("90d", 7)],
    )
    def test_range_start(self, time_range, days) -> None:
        now = datetime(2024, 6, 30, tzinfo=timezone.utc)
        assert range_start(time_range, now) == now - timedelta(days=days)


class TestAnalyticsService:
    async def test_page_views_and_visitors(self, analytics) -> None:
        # Arrange
        await analytics.record_page_view("/", "v1")
        await analytics.record_page_view("/", "v2")
        await analytics.record_page_view("/browse", "v1", referrer="https://google.com")

        # Act
        overview = await analytics.overview("7d")

        # Assert
        assert overview.total_views == 3
        assert overview.unique_visitors == 2
        assert [(p.path, p.views) for p in overview.top_pages] == [("/", 2), ("/browse", 1)]

    async def test_clicks_by_ad(self, test_async_db, analytics) -> None:
        ads = AdService(db=test_async_db)
        ad = await ads.create_ad(network_name="Promo", banner_image="/p.jpg")
        await ads.record_click(ad.id, slot="homepage_top")
        await ads.record_click(ad.id, slot="reader_top")

        overview = await analytics.overview("1d")

        assert overview.total_clicks == 2
        assert [(c.ad_id, c.network_name, c.clicks) for c in overview.clicks_by_ad] == [
            (ad.id, "Promo", 2)
        ]

    async def test_top_manga_by_event_type(self, analytics) -> None:
        await analytics.track_event("m1", "view", manga_title="Alpha")
        await analytics.track_event("m1", "view", manga_title="Alpha")
        await analytics.track_event("m2", "view", manga_title="Beta")
        await analytics.track_event("m2", "click", manga_title="Beta")

        views = await analytics.top_manga("7d", event_type="view")
        clicks = await analytics.top_manga("7d", event_type="click")

        assert [(t.manga_id, t.count) for t in views] == [("m1", 2), ("m2", 1)]
        assert [t.manga_id for t in clicks] == ["m2"]

    async def test_dashboard_stats(self, test_async_db, analytics, reader) -> None:
        await FavoritesService(db=test_async_db).add_favorite(reader.id, "m1")
        await analytics.record_page_view("/", "v1", user_id=reader.id)

        stats = await analytics.dashboard_stats("30d")

        assert stats.time_range == "30d"
        assert stats.total_page_views == 1
        assert stats.unique_visitors == 1
        assert stats.total_users == 1
        assert stats.total_favorites == 1
        assert stats.total_blog_posts == 0
        assert stats.total_ad_clicks == 0


class TestVisitorSessions:
    async def test_page_views_extend_one_session(self, test_async_db, analytics, reader) -> None:
        # Arrange
        await analytics.record_page_view("/", "v1", user_id=reader.id, user_agent="UA-1")
        await analytics.record_page_view("/browse", "v1", user_agent="UA-2")
        await analytics.record_page_view("/blog", "v1")

        # Act
        row = await visitor_session_crud.get_by_session_id(test_async_db, "v1")

        # Assert
        assert row.page_count == 3
        assert row.user_id == reader.id
        assert row.user_agent == "UA-1"
        assert row.last_seen >= row.first_seen

    async def test_session_stats(self, analytics) -> None:
        await analytics.record_page_view("/", "v1")
        await analytics.record_page_view("/a", "v1")
        await analytics.record_page_view("/", "v2")
        await analytics.record_page_view("/", "v3")

        stats = await analytics.session_stats("1d")

        assert stats.time_range == "1d"
        assert stats.total_sessions == 3
        assert stats.avg_page_views == 1.33

    async def test_session_stats_without_sessions(self, analytics) -> None:
        stats = await analytics.session_stats("7d")

        assert stats.total_sessions == 0
        assert stats.avg_page_views == 0


class TestMangaEvents:
    @pytest.fixture
    async def events(self, analytics) -> AnalyticsService:
        await analytics.track_event("m1", "view", manga_title="Alpha", page="detail")
        await analytics.track_event("m1", "impression", manga_title="Alpha", page="home")
        await analytics.track_event("m2", "view", manga_title="Beta", page="home")
        await analytics.track_event("m2", "read", manga_title="Beta", page="reader")
        return analytics

    async def test_unfiltered_lists_everything(self, events) -> None:
        result = await events.manga_events()

        assert result.total == 4
        assert len(result.data) == 4
        assert result.limit == 20
        assert result.offset == 0

    async def test_filters_combine(self, events) -> None:
        result = await events.manga_events(manga_ids=["m2"], event_types=["view", "read"], pages=["home"])

        assert result.total == 1
        assert (result.data[0].manga_id, result.data[0].event_type) == ("m2", "view")

    async def test_multiple_values_match_any(self, events) -> None:
        result = await events.manga_events(event_types=["impression", "read"])

        assert sorted(e.event_type for e in result.data) == ["impression", "read"]

    async def test_date_bounds(self, events) -> None:
        now = datetime.now(timezone.utc)

        past = await events.manga_events(date_to=now - timedelta(days=1))
        current = await events.manga_events(date_from=now - timedelta(hours=1), date_to=now + timedelta(hours=1))

        assert past.total == 0
        assert current.total == 4

    async def test_pagination_keeps_total(self, events) -> None:
        result = await events.manga_events(limit=3, offset=2)

        assert result.total == 4
        assert len(result.data) == 2
