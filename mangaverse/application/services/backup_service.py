"""
Backup and restore service.

Exports persisted application data as a JSON document and restores such
a document in foreign-key dependency order.

Dependencies: sqlalchemy, mangaverse.boundary.db.models
System role: Admin disaster-recovery orchestration
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import DateTime, Table, UniqueConstraint, Uuid, delete, select, text
from sqlalchemy.ext.asyncio import AsyncSession

from mangaverse.boundary.db.base import Base
from mangaverse.boundary.db.models import (
    AdClickModel,
    AdModel,
    ApiConfigurationModel,
    BlogPostModel,
    MangaCommentModel,
    ReadingProgressModel,
    SeoSettingModel,
    SiteSettingModel,
    UserFavoriteModel,
    UserModel,
)
from mangaverse.core.exceptions import ValidationError
from mangaverse.models.backup import BackupDocument, RestoreResponse

logger = logging.getLogger(__name__)

BACKUP_VERSION = "1.0"
BACKUP_DATABASE = "mangaverse"

# Restore order: parents before children
BACKUP_TABLES: list[tuple[str, type[Base]]] = [
    ("users", UserModel),
    ("api_configurations", ApiConfigurationModel),
    ("ads", AdModel),
    ("site_settings", SiteSettingModel),
    ("seo_settings", SeoSettingModel),
    ("blog_posts", BlogPostModel),
    ("user_favorites", UserFavoriteModel),
    ("reading_progress", ReadingProgressModel),
    ("manga_comments", MangaCommentModel),
]


def unique_column_sets(table: Table) -> list[tuple]:
    """Column groups that must be unique: unique columns, constraints and indexes."""
    groups: dict[frozenset, tuple] = {}
    for column in table.columns:
        if column.unique:
            groups[frozenset([column.key])] = (column,)
    for constraint in table.constraints:
        if isinstance(constraint, UniqueConstraint):
            columns = tuple(constraint.columns)
            groups[frozenset(c.key for c in columns)] = columns
    for index in table.indexes:
        if index.unique:
            columns = tuple(index.columns)
            groups[frozenset(c.key for c in columns)] = columns
    return list(groups.values())


def serialize_row(instance: Base) -> dict[str, Any]:
    """Column values of an ORM row as JSON-safe primitives."""
    row: dict[str, Any] = {}
    for column in instance.__table__.columns:
        value = getattr(instance, column.key)
        if isinstance(value, datetime):
            value = value.isoformat()
        elif isinstance(value, uuid.UUID):
            value = str(value)
        row[column.key] = value
    return row


def deserialize_row(model: type[Base], row: dict[str, Any]) -> dict[str, Any]:
    """
    Convert a backed-up row back to column values, dropping unknown keys.

    Raises:
        ValidationError: A UUID or timestamp value cannot be parsed
    """
    values: dict[str, Any] = {}
    for column in model.__table__.columns:
        if column.key not in row:
            continue
        value = row[column.key]
        try:
            if value is not None and isinstance(column.type, DateTime):
                value = datetime.fromisoformat(value)
            elif value is not None and isinstance(column.type, Uuid):
                value = uuid.UUID(str(value))
        except (TypeError, ValueError) as e:
            raise ValidationError(
                f"Invalid value for {model.__tablename__}.{column.key}",
                field=column.key,
            ) from e
        values[column.key] = value
    return values


class BackupService:
    """Full-data export and import."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def create_backup(self) -> BackupDocument:
        """Export every backed-up table."""
        tables: dict[str, list[dict[str, Any]]] = {}
        for name, model in BACKUP_TABLES:
            result = await self.db.execute(select(model))
            tables[name] = [serialize_row(row) for row in result.scalars().all()]

        document = BackupDocument(
            version=BACKUP_VERSION,
            timestamp=datetime.now(timezone.utc).isoformat(),
            database=BACKUP_DATABASE,
            tables=tables,
            counts={name: len(rows) for name, rows in tables.items()},
        )
        logger.info("Backup created", extra={"counts": document.counts})
        return document

    async def _clear(self) -> None:
        await self.db.execute(delete(AdClickModel))
        for _, model in reversed(BACKUP_TABLES):
            await self.db.execute(delete(model))
        self.db.expunge_all()

    async def _conflicts(self, model: type[Base], values: dict[str, Any]) -> bool:
        """True when the primary key or any unique key of the row is taken."""
        table = model.__table__
        for columns in [(table.c.id,), *unique_column_sets(table)]:
            if any(values.get(c.key) is None for c in columns):
                continue
            stmt = select(table.c.id).where(*[c == values[c.key] for c in columns]).limit(1)
            if (await self.db.execute(stmt)).first() is not None:
                return True
        return False

    async def _parents_missing(self, model: type[Base], values: dict[str, Any]) -> bool:
        """Null optional dangling references; report required ones."""
        for column in model.__table__.columns:
            value = values.get(column.key)
            if value is None or not column.foreign_keys:
                continue
            target = next(iter(column.foreign_keys)).column
            stmt = select(target).where(target == value).limit(1)
            if (await self.db.execute(stmt)).first() is not None:
                continue
            if column.nullable:
                values[column.key] = None
            else:
                return True
        return False

    async def _insert_if_new(self, model: type[Base], values: dict[str, Any]) -> bool:
        """Insert one row unless it clashes with existing data or lacks its parent."""
        if await self._conflicts(model, values) or await self._parents_missing(model, values):
            return False
        self.db.add(model(**values))
        await self.db.flush()
        return True

    async def _sync_ad_sequence(self) -> None:
        # Explicit ids bypass the serial sequence on PostgreSQL
        if self.db.get_bind().dialect.name != "postgresql":
            return
        await self.db.execute(
            text(
                "SELECT setval(pg_get_serial_sequence('ads', 'id'), "
                "COALESCE((SELECT MAX(id) FROM ads), 1))"
            )
        )

    async def restore(self, backup: BackupDocument, clear_existing: bool = False) -> RestoreResponse:
        """
        Restore a backup document.

        Args:
            backup: Document produced by create_backup
            clear_existing: Delete current rows first

        Returns:
            RestoreResponse: Rows inserted per table

        Raises:
            ValidationError: Document has no tables or contains unparsable values
        """
        if not backup.tables:
            raise ValidationError("Invalid backup data format", field="tables")

        if clear_existing:
            await self._clear()
            logger.warning("Existing data cleared before restore")

        restored: dict[str, int] = {}
        for name, model in BACKUP_TABLES:
            count = 0
            for row in backup.tables.get(name) or []:
                if await self._insert_if_new(model, deserialize_row(model, row)):
                    count += 1
            restored[name] = count

        await self._sync_ad_sequence()
        logger.info(
            "Backup restored",
            extra={"restored": restored, "backup_timestamp": backup.timestamp},
        )
        return RestoreResponse(
            success=True,
            restored=restored,
            backup_version=backup.version,
            backup_timestamp=backup.timestamp,
        )
