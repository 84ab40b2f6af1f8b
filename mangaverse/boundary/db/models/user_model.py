"""
User ORM model.

Represents a registered reader or administrator.

Dependencies: sqlalchemy, mangaverse.boundary.db.base
System role: Account persistence for authentication and ownership
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from mangaverse.boundary.db.base import Base, UUIDMixin, TimestampMixin

USER_ROLES = ("user", "admin")


class UserModel(Base, UUIDMixin, TimestampMixin):
    """
    User ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        username: Unique login name
        email: Unique email address
        password_hash: bcrypt hash, never returned to clients
        role: "user" or "admin"
        created_at: Registration timestamp (UTC)
        updated_at: Last modification timestamp (UTC)
    """

    __tablename__ = "users"

    username: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        unique=True,
        doc="Unique login name"
    )

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        doc="Unique email address"
    )

    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        doc="bcrypt password hash"
    )

    role: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
        default="user",
        doc="Authorization role (user, admin)"
    )
