"""
API configuration ORM model.

Admin-managed records describing upstream catalog endpoints.

Dependencies: sqlalchemy, mangaverse.boundary.db.base
System role: Catalog source registry for the admin console
"""

from sqlalchemy import Boolean, Integer, JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from mangaverse.boundary.db.base import Base, UUIDMixin, TimestampMixin


class ApiConfigurationModel(Base, UUIDMixin, TimestampMixin):
    """
    Upstream API configuration.

    Attributes:
        name: Display name of the catalog source
        base_url: Root URL of the upstream API
        enabled: Whether the source is active
        priority: Ordering key (lower first)
        endpoints: Mapping of logical endpoint name to path
    """

    __tablename__ = "api_configurations"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    base_url: Mapped[str] = mapped_column(String(2048), nullable=False)
    enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    priority: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    endpoints: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
