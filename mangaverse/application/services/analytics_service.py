"""
Analytics service.

Records page views (counting each into its visitor session) and manga
interaction events, and computes the admin dashboard counters and traffic
reports.

Dependencies: mangaverse.boundary.db.CRUD
System role: Analytics ingestion and reporting orchestration
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from mangaverse.boundary.db.CRUD.analytics_crud import (
    ad_click_crud,
    manga_event_crud,
    page_view_crud,
    visitor_session_crud,
)
from mangaverse.boundary.db.CRUD.blog_post_crud import blog_post_crud
from mangaverse.boundary.db.CRUD.user_crud import user_crud
from mangaverse.boundary.db.CRUD.user_favorite_crud import user_favorite_crud
from mangaverse.models.analytics import (
    AnalyticsOverview,
    DashboardStats,
    MangaEventResponse,
    SessionStats,
    TopManga,
)
from mangaverse.models.common import PageResponse

logger = logging.getLogger(__name__)

TIME_RANGES = {
    "1d": timedelta(days=1),
    "7d": timedelta(days=7),
    "30d": timedelta(days=30),
}
DEFAULT_TIME_RANGE = "7d"


def range_start(time_range: str, now: datetime | None = None) -> datetime:
    """Start of a 1d/7d/30d window; unknown ranges fall back to 7d."""
    now = now or datetime.now(timezone.utc)
    return now - TIME_RANGES.get(time_range, TIME_RANGES[DEFAULT_TIME_RANGE])


class AnalyticsService:
    """Tracking ingestion and admin reporting."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def record_page_view(
        self,
        path: str,
        visitor_id: str,
        referrer: str | None = None,
        user_id: UUID | None = None,
        user_agent: str | None = None,
    ) -> None:
        """Store a page view and open or extend the visitor's session."""
        user_agent = (user_agent or "")[:512] or None
        await page_view_crud.create(
            self.db,
            path=path,
            visitor_id=visitor_id,
            referrer=referrer,
            user_id=user_id,
            user_agent=user_agent,
        )
        await visitor_session_crud.touch(
            self.db, visitor_id, user_id=user_id, user_agent=user_agent
        )

    async def track_event(
        self,
        manga_id: str,
        event_type: str,
        manga_title: str | None = None,
        page: str | None = None,
        visitor_id: str | None = None,
        user_id: UUID | None = None,
    ) -> None:
        await manga_event_crud.create(
            self.db,
            manga_id=manga_id,
            manga_title=manga_title,
            event_type=event_type,
            page=page,
            visitor_id=visitor_id,
            user_id=user_id,
        )
        logger.debug("Manga event tracked", extra={"manga_id": manga_id, "event_type": event_type})

    async def dashboard_stats(self, time_range: str = DEFAULT_TIME_RANGE) -> DashboardStats:
        """
        Admin dashboard counters.

        Traffic counters cover the time range; users, posts and favorites
        are all-time totals.
        """
        since = range_start(time_range)
        return DashboardStats(
            time_range=time_range,
            total_page_views=await page_view_crud.count_since(self.db, since),
            unique_visitors=await page_view_crud.count_unique_visitors_since(self.db, since),
            total_users=await user_crud.count(self.db),
            total_blog_posts=await blog_post_crud.count(self.db),
            total_favorites=await user_favorite_crud.count(self.db),
            total_ad_clicks=await ad_click_crud.count_since(self.db, since),
        )

    async def overview(self, time_range: str = DEFAULT_TIME_RANGE, top_pages: int = 10) -> AnalyticsOverview:
        since = range_start(time_range)
        return AnalyticsOverview(
            time_range=time_range,
            total_views=await page_view_crud.count_since(self.db, since),
            unique_visitors=await page_view_crud.count_unique_visitors_since(self.db, since),
            total_clicks=await ad_click_crud.count_since(self.db, since),
            clicks_by_ad=await ad_click_crud.clicks_by_ad_since(self.db, since),
            top_pages=await page_view_crud.top_pages_since(self.db, since, top_pages),
        )

    async def top_manga(
        self,
        time_range: str = DEFAULT_TIME_RANGE,
        event_type: str = "view",
        limit: int = 10,
    ) -> list[TopManga]:
        rows = await manga_event_crud.top_manga_since(
            self.db, range_start(time_range), event_type, limit
        )
        return [TopManga(**row) for row in rows]

    async def session_stats(self, time_range: str = DEFAULT_TIME_RANGE) -> SessionStats:
        """Sessions opened in the range and their mean page views, rounded to 2 places."""
        total, average = await visitor_session_crud.stats_since(self.db, range_start(time_range))
        return SessionStats(
            time_range=time_range,
            total_sessions=total,
            avg_page_views=round(average, 2),
        )

    async def manga_events(
        self,
        manga_ids: Sequence[str] = (),
        event_types: Sequence[str] = (),
        pages: Sequence[str] = (),
        date_from: datetime | None = None,
        date_to: datetime | None = None,
        limit: int = 20,
        offset: int = 0,
    ) -> PageResponse[MangaEventResponse]:
        """
        Per-manga interaction events for the admin analytics table.

        Args:
            manga_ids: Restrict to these manga
            event_types: Restrict to these event types
            pages: Restrict to events from these pages
            date_from: Inclusive lower bound on event time
            date_to: Inclusive upper bound on event time
            limit: Page size
            offset: Rows to skip

        Returns:
            PageResponse[MangaEventResponse]: Newest events first with the total match count
        """
        rows, total = await manga_event_crud.list_filtered(
            self.db,
            manga_ids=manga_ids,
            event_types=event_types,
            pages=pages,
            date_from=date_from,
            date_to=date_to,
            limit=limit,
            offset=offset,
        )
        return PageResponse[MangaEventResponse](
            data=[MangaEventResponse.model_validate(row) for row in rows],
            total=total,
            limit=limit,
            offset=offset,
        )
