"""
Analytics CRUD operations.

Insert helpers and aggregate queries over page views, ad clicks, manga
events and visitor sessions.

Dependencies: sqlalchemy, mangaverse.boundary.db.models
System role: Analytics persistence and reporting queries
"""

from datetime import datetime
from typing import Any, Sequence
from uuid import UUID, uuid4

from sqlalchemy import func, select
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession

from mangaverse.boundary.db.models.ad_model import AdModel
from mangaverse.boundary.db.models.analytics_models import (
    AdClickModel,
    MangaEventModel,
    PageViewModel,
    VisitorSessionModel,
)
from mangaverse.boundary.db.base import utcnow
from mangaverse.boundary.db.CRUD.base_crud import BaseCRUD


class PageViewCRUD(BaseCRUD[PageViewModel]):
    """Page view storage and aggregates."""

    def __init__(self) -> None:
        """Initialize PageViewCRUD with PageViewModel."""
        super().__init__(PageViewModel)

    async def count_since(self, session: AsyncSession, since: datetime) -> int:
        stmt = select(func.count()).select_from(PageViewModel).where(PageViewModel.created_at >= since)
        result = await session.execute(stmt)
        return int(result.scalar_one())

    async def count_unique_visitors_since(self, session: AsyncSession, since: datetime) -> int:
        stmt = select(func.count(func.distinct(PageViewModel.visitor_id))).where(
            PageViewModel.created_at >= since
        )
        result = await session.execute(stmt)
        return int(result.scalar_one())

    async def top_pages_since(
        self,
        session: AsyncSession,
        since: datetime,
        limit: int = 10,
    ) -> list[dict[str, Any]]:
        """Most viewed paths since a point in time."""
        views = func.count().label("views")
        stmt = (
            select(PageViewModel.path, views)
            .where(PageViewModel.created_at >= since)
            .group_by(PageViewModel.path)
            .order_by(views.desc(), PageViewModel.path.asc())
            .limit(limit)
        )
        result = await session.execute(stmt)
        return [{"path": path, "views": int(count)} for path, count in result.all()]


class AdClickCRUD(BaseCRUD[AdClickModel]):
    """Ad click storage and aggregates."""

    def __init__(self) -> None:
        """Initialize AdClickCRUD with AdClickModel."""
        super().__init__(AdClickModel)

    async def count_since(self, session: AsyncSession, since: datetime) -> int:
        stmt = select(func.count()).select_from(AdClickModel).where(AdClickModel.created_at >= since)
        result = await session.execute(stmt)
        return int(result.scalar_one())

    async def clicks_by_ad_since(self, session: AsyncSession, since: datetime) -> list[dict[str, Any]]:
        """Click counts per ad with the ad's network name, busiest first."""
        clicks = func.count(AdClickModel.id).label("clicks")
        stmt = (
            select(AdClickModel.ad_id, AdModel.network_name, clicks)
            .outerjoin(AdModel, AdModel.id == AdClickModel.ad_id)
            .where(AdClickModel.created_at >= since)
            .group_by(AdClickModel.ad_id, AdModel.network_name)
            .order_by(clicks.desc(), AdClickModel.ad_id.asc())
        )
        result = await session.execute(stmt)
        return [
            {"ad_id": ad_id, "network_name": network_name, "clicks": int(count)}
            for ad_id, network_name, count in result.all()
        ]


class MangaEventCRUD(BaseCRUD[MangaEventModel]):
    """Manga interaction event storage and aggregates."""

    def __init__(self) -> None:
        """Initialize MangaEventCRUD with MangaEventModel."""
        super().__init__(MangaEventModel)

    async def top_manga_since(
        self,
        session: AsyncSession,
        since: datetime,
        event_type: str = "view",
        limit: int = 10,
    ) -> list[dict[str, Any]]:
        """
        Manga with the most events of one type since a point in time.

        Args:
            session: Async database session
            since: Lower bound on event time
            event_type: Event type to count
            limit: Number of manga to return

        Returns:
            List of {manga_id, manga_title, count}
        """
        total = func.count(MangaEventModel.id).label("total")
        stmt = (
            select(
                MangaEventModel.manga_id,
                func.max(MangaEventModel.manga_title),
                total,
            )
            .where(
                MangaEventModel.created_at >= since,
                MangaEventModel.event_type == event_type,
            )
            .group_by(MangaEventModel.manga_id)
            .order_by(total.desc(), MangaEventModel.manga_id.asc())
            .limit(limit)
        )
        result = await session.execute(stmt)
        return [
            {"manga_id": manga_id, "manga_title": title, "count": int(count)}
            for manga_id, title, count in result.all()
        ]


    async def list_filtered(
        self,
        session: AsyncSession,
        manga_ids: Sequence[str] = (),
        event_types: Sequence[str] = (),
        pages: Sequence[str] = (),
        date_from: datetime | None = None,
        date_to: datetime | None = None,
        limit: int = 20,
        offset: int = 0,
    ) -> tuple[Sequence[MangaEventModel], int]:
        """
        Raw events matching every given filter, newest first.

        Empty filter sequences and None bounds do not restrict the result.

        Returns:
            Tuple of (page of events, total matching events)
        """
        criteria = []
        if manga_ids:
            criteria.append(MangaEventModel.manga_id.in_(manga_ids))
        if event_types:
            criteria.append(MangaEventModel.event_type.in_(event_types))
        if pages:
            criteria.append(MangaEventModel.page.in_(pages))
        if date_from is not None:
            criteria.append(MangaEventModel.created_at >= date_from)
        if date_to is not None:
            criteria.append(MangaEventModel.created_at <= date_to)

        stmt = (
            select(MangaEventModel)
            .where(*criteria)
            .order_by(MangaEventModel.created_at.desc(), MangaEventModel.id.asc())
            .limit(limit)
            .offset(offset)
        )
        result = await session.execute(stmt)
        return result.scalars().all(), await self.count(session, *criteria)


class VisitorSessionCRUD(BaseCRUD[VisitorSessionModel]):
    """Visitor session upsert and aggregates."""

    def __init__(self) -> None:
        """Initialize VisitorSessionCRUD with VisitorSessionModel."""
        super().__init__(VisitorSessionModel)

    async def get_by_session_id(
        self, session: AsyncSession, session_id: str
    ) -> VisitorSessionModel | None:
        stmt = select(VisitorSessionModel).where(VisitorSessionModel.session_id == session_id)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def touch(
        self,
        session: AsyncSession,
        session_id: str,
        user_id: UUID | None = None,
        user_agent: str | None = None,
    ) -> None:
        """
        Open a session or count one more page view in it.

        Runs as one INSERT .. ON CONFLICT statement; concurrent first page
        views of a session leave exactly one row.

        Args:
            session: Async database session
            session_id: Browser session identifier
            user_id: Signed-in user, stored only when the session is opened
            user_agent: Client user agent, stored only when the session is opened
        """
        now = utcnow()
        dialect = session.get_bind().dialect.name
        insert = postgresql_insert if dialect == "postgresql" else sqlite_insert
        stmt = insert(VisitorSessionModel).values(
            id=uuid4(),
            session_id=session_id,
            user_id=user_id,
            user_agent=user_agent,
            page_count=1,
            first_seen=now,
            last_seen=now,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[VisitorSessionModel.session_id],
            set_={"page_count": VisitorSessionModel.page_count + 1, "last_seen": now},
        )
        await session.execute(stmt)

    async def stats_since(self, session: AsyncSession, since: datetime) -> tuple[int, float]:
        """Number of sessions opened since a point in time and their mean page count."""
        stmt = select(func.count(), func.avg(VisitorSessionModel.page_count)).where(
            VisitorSessionModel.first_seen >= since
        )
        total, average = (await session.execute(stmt)).one()
        return int(total), float(average or 0)


page_view_crud = PageViewCRUD()
ad_click_crud = AdClickCRUD()
manga_event_crud = MangaEventCRUD()
visitor_session_crud = VisitorSessionCRUD()
