"""
Manga comment ORM model.

Dependencies: sqlalchemy, mangaverse.boundary.db.base
System role: Reader discussion attached to a catalog manga
"""

import uuid

from sqlalchemy import ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from mangaverse.boundary.db.base import Base, UUIDMixin, TimestampMixin


class MangaCommentModel(Base, UUIDMixin, TimestampMixin):
    """
    Comment left by a user on a manga detail page.

    Attributes:
        user_id: Author
        manga_id: Catalog manga ID
        content: Comment text (1-2000 chars)
    """

    __tablename__ = "manga_comments"

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    manga_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
