"""
Reading progress ORM model.

Dependencies: sqlalchemy, mangaverse.boundary.db.base
System role: Per-user reading position per manga
"""

import uuid
from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from mangaverse.boundary.db.base import Base, UUIDMixin, utcnow


class ReadingProgressModel(Base, UUIDMixin):
    """
    Last read position of a user in a manga. One row per (user, manga).

    Attributes:
        user_id: Owning user
        manga_id: Catalog manga ID
        chapter_id: Chapter being read
        page_number: 1-based page within the chapter
        total_pages: Page count of the chapter, when known
        completed: Whether the user finished the manga
        updated_at: Last time the position changed (UTC)
    """

    __tablename__ = "reading_progress"
    __table_args__ = (
        UniqueConstraint("user_id", "manga_id", name="uq_reading_progress_user_manga"),
    )

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    manga_id: Mapped[str] = mapped_column(String(64), nullable=False)
    chapter_id: Mapped[str] = mapped_column(String(64), nullable=False)
    page_number: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    total_pages: Mapped[int | None] = mapped_column(Integer, nullable=True, default=None)
    completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
    )
