"""
User favorite ORM model.

Dependencies: sqlalchemy, mangaverse.boundary.db.base
System role: Per-user bookmarked manga
"""

import uuid

from sqlalchemy import ForeignKey, String, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from mangaverse.boundary.db.base import Base, UUIDMixin, CreatedAtMixin


class UserFavoriteModel(Base, UUIDMixin, CreatedAtMixin):
    """
    A manga a user bookmarked. At most one row per (user, manga).

    Attributes:
        user_id: Owning user
        manga_id: Catalog manga ID (MangaDex UUID or mp-<id>)
        manga_title: Title snapshot for list rendering
        manga_cover: Cover URL snapshot
    """

    __tablename__ = "user_favorites"
    __table_args__ = (
        UniqueConstraint("user_id", "manga_id", name="uq_user_favorites_user_manga"),
    )

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    manga_id: Mapped[str] = mapped_column(String(64), nullable=False)
    manga_title: Mapped[str | None] = mapped_column(String(512), nullable=True, default=None)
    manga_cover: Mapped[str | None] = mapped_column(String(2048), nullable=True, default=None)
