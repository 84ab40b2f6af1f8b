"""
Ad ORM model.

An ad is either a network script snippet or a banner image with a link,
placed into one or more named page slots.

Dependencies: sqlalchemy, mangaverse.boundary.db.base
System role: Advertising inventory persistence
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Integer, JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from mangaverse.boundary.db.base import Base, utcnow


class AdModel(Base):
    """
    Ad ORM model.

    Attributes:
        id: Autoincrement integer primary key
        network_name: Ad network or advertiser label
        ad_script: Network script snippet (script ads)
        banner_image: Image URL (banner ads)
        banner_link: Click-through URL (banner ads)
        width / height: Explicit size, 0 means slot default
        slots: Slot names this ad may fill
        enabled: Serving flag
        created_at: Creation timestamp (UTC)
    """

    __tablename__ = "ads"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    network_name: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)
    ad_script: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    banner_image: Mapped[str | None] = mapped_column(String(2048), nullable=True, default=None)
    banner_link: Mapped[str | None] = mapped_column(String(2048), nullable=True, default=None)
    width: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    height: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    slots: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
