"""
Blog post ORM model.

Dependencies: sqlalchemy, mangaverse.boundary.db.base
System role: Editorial content persistence
"""

import uuid
from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, JSON, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from mangaverse.boundary.db.base import Base, UUIDMixin, TimestampMixin


class BlogPostModel(Base, UUIDMixin, TimestampMixin):
    """
    Blog post ORM model.

    Only published posts are visible on the public site. published_at is
    stamped the first time a post is published and kept afterwards.

    Attributes:
        title: Post title
        slug: Unique kebab-case URL segment
        content: Post body (HTML or markdown)
        excerpt: Optional teaser text
        featured_image: Optional image URL
        category: Optional category label
        tags: List of tag strings
        author_id: Author user (nulled if the account is removed)
        published: Public visibility flag
        published_at: First publication timestamp
        meta_title / meta_description: Optional SEO overrides
    """

    __tablename__ = "blog_posts"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    excerpt: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    featured_image: Mapped[str | None] = mapped_column(String(2048), nullable=True, default=None)
    category: Mapped[str | None] = mapped_column(String(100), nullable=True, default=None)
    tags: Mapped[list] = mapped_column(JSON, nullable=False, default=list)

    author_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        doc="Author user ID"
    )

    published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    published_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
    )

    meta_title: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)
    meta_description: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
