"""
Analytics ORM models.

Append-only event rows (page views, ad clicks, manga interaction events)
plus one row per visitor session.

Dependencies: sqlalchemy, mangaverse.boundary.db.base
System role: Raw analytics storage for admin dashboards
"""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from mangaverse.boundary.db.base import Base, UUIDMixin, CreatedAtMixin, utcnow

MANGA_EVENT_TYPES = ("view", "impression", "click", "read")


class PageViewModel(Base, UUIDMixin, CreatedAtMixin):
    """
    One page view.

    Attributes:
        path: Viewed path
        visitor_id: Anonymous browser session identifier
        user_id: Signed-in user, if any
        referrer: HTTP referrer
        user_agent: Client user agent
    """

    __tablename__ = "page_views"

    path: Mapped[str] = mapped_column(String(2048), nullable=False)
    visitor_id: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    user_id: Mapped[uuid.UUID | None] = mapped_column(Uuid(as_uuid=True), nullable=True, default=None)
    referrer: Mapped[str | None] = mapped_column(String(2048), nullable=True, default=None)
    user_agent: Mapped[str | None] = mapped_column(String(512), nullable=True, default=None)


class AdClickModel(Base, UUIDMixin, CreatedAtMixin):
    """
    One ad click.

    Attributes:
        ad_id: Clicked ad
        slot: Slot the ad was rendered in
        visitor_id: Anonymous browser session identifier
    """

    __tablename__ = "ad_clicks"

    ad_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("ads.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    slot: Mapped[str | None] = mapped_column(String(64), nullable=True, default=None)
    visitor_id: Mapped[str | None] = mapped_column(String(128), nullable=True, default=None)


class MangaEventModel(Base, UUIDMixin, CreatedAtMixin):
    """
    Manga interaction event (view, impression, click, read).

    Attributes:
        manga_id: Catalog manga ID
        manga_title: Title snapshot
        event_type: One of MANGA_EVENT_TYPES
        page: Page the event came from (home, detail, reader, ...)
        visitor_id: Anonymous browser session identifier
        user_id: Signed-in user, if any
    """

    __tablename__ = "manga_events"

    manga_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    manga_title: Mapped[str | None] = mapped_column(String(512), nullable=True, default=None)
    event_type: Mapped[str] = mapped_column(String(16), nullable=False)
    page: Mapped[str | None] = mapped_column(String(32), nullable=True, default=None)
    visitor_id: Mapped[str | None] = mapped_column(String(128), nullable=True, default=None)
    user_id: Mapped[uuid.UUID | None] = mapped_column(Uuid(as_uuid=True), nullable=True, default=None)


class VisitorSessionModel(Base, UUIDMixin):
    """
    Browser session seen by page view tracking.

    Attributes:
        session_id: Anonymous browser session identifier (the page view visitor_id)
        user_id: Signed-in user at first sight, if any
        user_agent: Client user agent at first sight
        page_count: Page views recorded in the session
        first_seen: First page view
        last_seen: Most recent page view
    """

    __tablename__ = "visitor_sessions"

    session_id: Mapped[str] = mapped_column(String(128), nullable=False, unique=True)
    user_id: Mapped[uuid.UUID | None] = mapped_column(Uuid(as_uuid=True), nullable=True, default=None)
    user_agent: Mapped[str | None] = mapped_column(String(512), nullable=True, default=None)
    page_count: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    first_seen: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, index=True
    )
    last_seen: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)
