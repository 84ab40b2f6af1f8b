"""
Database configuration settings.

Connection target comes from DATABASE_URL when set (as hosted Postgres
providers hand it out), otherwise from the POSTGRES_* parts. Both the sync
psycopg2 URL used by scripts and the asyncpg URL used by the API are derived
from the same target.

Dependencies: pydantic, pydantic_settings
System role: Database connection configuration for ORM
"""

from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from pydantic import AliasChoices, Field
from pydantic_settings import SettingsConfigDict

from mangaverse.configs.base import BaseSettings

_SCHEMES = ("postgres://", "postgresql://", "postgresql+psycopg2://", "postgresql+asyncpg://")


class DatabaseSettings(BaseSettings):
    """PostgreSQL connection target and pool sizing."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="POSTGRES_",
        case_sensitive=False,
        extra="ignore",
    )

    url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("DATABASE_URL", "POSTGRES_URL"),
        description="Full connection URL; overrides the individual parts",
    )
    host: str = Field(default="localhost")
    port: int = Field(default=5432)
    user: str = Field(default="postgres")
    password: str = Field(default="postgres")
    db: str = Field(default="mangaverse")
    sslmode: str = Field(default="prefer", description="libpq sslmode for managed Postgres")

    pool_size: int = Field(default=10, ge=1)
    max_overflow: int = Field(default=20, ge=0)
    pool_timeout: int = Field(default=30, ge=1, description="Seconds to wait for a pooled connection")
    echo_sql: bool = Field(default=False)

    def _target(self) -> tuple[str, dict[str, str]]:
        """Host/path part after the scheme plus its query parameters."""
        if self.url:
            raw = self.url
            for scheme in _SCHEMES:
                if raw.startswith(scheme):
                    raw = raw[len(scheme):]
                    break
            parts = urlsplit(f"//{raw}")
            location = urlunsplit(("", parts.netloc, parts.path, "", "")).lstrip("/")
            return location, dict(parse_qsl(parts.query))
        location = f"{self.user}:{self.password}@{self.host}:{self.port}/{self.db}"
        return location, {"sslmode": self.sslmode}

    @property
    def database_url(self) -> str:
        """psycopg2 URL for sync engines."""
        location, query = self._target()
        suffix = f"?{urlencode(query)}" if query else ""
        return f"postgresql://{location}{suffix}"

    @property
    def async_database_url(self) -> str:
        """asyncpg URL; sslmode is translated to asyncpg's ssl parameter."""
        location, query = self._target()
        sslmode = query.pop("sslmode", None)
        if sslmode in ("require", "verify-ca", "verify-full"):
            query["ssl"] = "require"
        suffix = f"?{urlencode(query)}" if query else ""
        return f"postgresql+asyncpg://{location}{suffix}"
