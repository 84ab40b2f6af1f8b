"""
SEO setting ORM model.

Per-path page metadata overriding the site-wide meta settings.

Dependencies: sqlalchemy, mangaverse.boundary.db.base
System role: Search engine metadata storage
"""

from sqlalchemy import Boolean, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from mangaverse.boundary.db.base import Base, UUIDMixin, TimestampMixin


class SeoSettingModel(Base, UUIDMixin, TimestampMixin):
    """
    SEO setting ORM model.

    Attributes:
        path: Site path the metadata applies to ("/", "/blog", ...)
        title: Document title
        description: Meta description
        keywords: Comma separated meta keywords
        og_image: Open Graph image URL
        canonical_url: Canonical link for the page
        no_index: Ask crawlers not to index the page
    """

    __tablename__ = "seo_settings"

    path: Mapped[str] = mapped_column(String(512), nullable=False, unique=True)
    title: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)
    description: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    keywords: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    og_image: Mapped[str | None] = mapped_column(String(2048), nullable=True, default=None)
    canonical_url: Mapped[str | None] = mapped_column(String(2048), nullable=True, default=None)
    no_index: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
