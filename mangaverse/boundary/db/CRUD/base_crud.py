"""
Generic async CRUD helpers shared by the model-specific CRUD singletons.

Methods flush but never commit; the request-scoped session in
get_async_db (or the calling service) owns the transaction.

Dependencies: sqlalchemy
System role: Foundation for all database CRUD operations
"""

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import ColumnElement, delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from mangaverse.boundary.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """
    Primary-key CRUD for one model.

    Subclasses bind the model in __init__ and add the queries their
    service needs (by slug, by user, by key, ...).
    """

    def __init__(self, model: type[ModelT]) -> None:
        self.model = model

    async def create(self, session: AsyncSession, **fields: Any) -> ModelT:
        """
        Insert a row and return it with generated ID and defaults loaded.

        Args:
            session: Async database session
            **fields: Column values

        Returns:
            The new model instance
        """
        instance = self.model(**fields)
        session.add(instance)
        await session.flush()
        await session.refresh(instance)
        return instance

    async def get_by_id(self, session: AsyncSession, id: Any) -> ModelT | None:
        """Row by primary key (UUID, or int for ads), None when absent."""
        result = await session.execute(select(self.model).where(self.model.id == id))
        return result.scalar_one_or_none()

    async def update_by_id(self, session: AsyncSession, id: Any, **changes: Any) -> ModelT | None:
        """
        Apply attribute changes to a row.

        Goes through the ORM instance so onupdate timestamps fire.

        Returns:
            Updated instance, or None when the row does not exist
        """
        instance = await self.get_by_id(session, id)
        if instance is None:
            return None
        for field, value in changes.items():
            setattr(instance, field, value)
        await session.flush()
        await session.refresh(instance)
        return instance

    async def delete_by_id(self, session: AsyncSession, id: Any) -> bool:
        """Delete by primary key; True when a row was removed."""
        result = await session.execute(delete(self.model).where(self.model.id == id))
        return result.rowcount > 0

    async def exists(self, session: AsyncSession, id: Any) -> bool:
        stmt = select(self.model.id).where(self.model.id == id).limit(1)
        result = await session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def count(self, session: AsyncSession, *criteria: ColumnElement[bool]) -> int:
        """Row count, optionally restricted by WHERE criteria."""
        stmt = select(func.count()).select_from(self.model)
        if criteria:
            stmt = stmt.where(*criteria)
        result = await session.execute(stmt)
        return int(result.scalar_one())

    async def list_newest(
        self,
        session: AsyncSession,
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[ModelT]:
        """
        Rows ordered by creation time, newest first.

        Ties on created_at fall back to descending primary key so pages are
        stable.
        """
        stmt = (
            select(self.model)
            .order_by(self.model.created_at.desc(), self.model.id.desc())
            .offset(offset)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()
