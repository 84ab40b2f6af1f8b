"""
Site setting ORM model.

Key/value pairs that drive site branding and metadata.

Dependencies: sqlalchemy, mangaverse.boundary.db.base
System role: Runtime-editable site configuration
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from mangaverse.boundary.db.base import Base, UUIDMixin, TimestampMixin

SETTING_TYPES = ("string", "number", "boolean", "json")


class SiteSettingModel(Base, UUIDMixin, TimestampMixin):
    """
    Site setting ORM model.

    Attributes:
        key: Unique setting name
        value: Serialized value (text)
        type: One of string, number, boolean, json
    """

    __tablename__ = "site_settings"

    key: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    value: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    type: Mapped[str] = mapped_column(String(16), nullable=False, default="string")
